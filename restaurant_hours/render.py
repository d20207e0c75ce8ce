"""Render query results and failures for display."""

from bs4 import BeautifulSoup

from restaurant_hours.models import Restaurant

NO_RESULTS = "No results."
ERROR_LINES = (
    "We're sorry! An unexpected error occurred.",
    "Please try again later.",
)


def render_results_html(restaurants: list[Restaurant]) -> str:
    """
    Render restaurant names as an HTML list.

    An empty result renders a single "No results." item.
    """
    soup = BeautifulSoup("", "html.parser")
    results = soup.new_tag("ul")
    soup.append(results)

    names = [restaurant.name for restaurant in restaurants] or [NO_RESULTS]
    for name in names:
        item = soup.new_tag("li")
        item.string = name
        results.append(item)

    return str(soup)


def render_error_html() -> str:
    """Render the generic failure notice. Never includes error details."""
    soup = BeautifulSoup("", "html.parser")
    message = soup.new_tag("p")
    message.append(ERROR_LINES[0])
    message.append(soup.new_tag("br"))
    message.append(ERROR_LINES[1])
    soup.append(message)
    return str(soup)


def render_results_text(restaurants: list[Restaurant]) -> str:
    """Render restaurant names one per line, or "No results."."""
    if not restaurants:
        return NO_RESULTS
    return "\n".join(restaurant.name for restaurant in restaurants)


def render_error_text() -> str:
    return " ".join(ERROR_LINES)

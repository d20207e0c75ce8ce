"""Find restaurants that are open at a given date and time."""

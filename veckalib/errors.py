"""Exceptions raised by veckalib."""


class InvalidComponent(ValueError):
    """A year, month, day or week number outside its structurally valid range."""


class InvalidAnchor(ValueError):
    """A recurring anchor whose month/day can never form a calendar date."""

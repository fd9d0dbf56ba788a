"""Case-insensitive frequency tally of grocery list items, with a menu-driven command."""

__version__ = "0.1.0"
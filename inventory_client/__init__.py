"""Client-side data sync and form editing for the inventory console."""

__version__ = "0.1.0"

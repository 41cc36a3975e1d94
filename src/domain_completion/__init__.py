"""Inline domain autocomplete for address-bar text fields."""

__version__ = "0.1.0"

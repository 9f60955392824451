"""Parsing of exact and relative date/time phrases, and a small settings help menu."""

__version__ = "0.1.130"
"""Facilitaki customer registration, login and order API."""

__version__ = "0.1.0"

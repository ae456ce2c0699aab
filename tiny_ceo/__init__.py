"""Tiny CEO - startup idea conversation analysis service."""

__version__ = "2.0.0"

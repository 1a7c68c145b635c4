"""Utility helpers."""
from .text import clean_input  # noqa: F401

"""Input helpers."""
from __future__ import annotations

from typing import List


def clean_input(text: str) -> List[str]:
    """Lower-case ``text`` and split it into words."""

    return text.lower().split()

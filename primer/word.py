"""Utilities for word games."""

from __future__ import annotations


def is_palindrome_bytes(s: str) -> bool:
    """Report whether the UTF-8 bytes of s read the same both ways."""
    data = s.encode("utf-8")
    return data == data[::-1]


def is_palindrome(s: str) -> bool:
    """Report whether s reads the same both ways, ignoring case and non-letters."""
    letters = [ch.lower() for ch in s if ch.isalpha()]
    return letters == letters[::-1]
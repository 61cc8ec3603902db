"""Text normalization for search input codes."""

from __future__ import annotations


def normalize_code(text: str | None) -> str:
    """Normalize an airport code or seating class name.

    Normalization is intentionally conservative:
        - `None` becomes an empty string.
        - Trim surrounding whitespace.
        - Lowercase.

    Inner whitespace is kept as is, so `"premium  economy"` stays an unknown class.
    """

    return (text or "").strip().lower()

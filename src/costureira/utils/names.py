"""Client name helpers."""


def normalize_name(name: str) -> str:
    """Return the key used to match client names within an account.

    Matching is case-insensitive equality only: surrounding or inner
    whitespace and accents are significant.
    """
    return name.lower()


def is_blank(value: str | None) -> bool:
    """Return True for None or whitespace-only strings."""
    return value is None or not value.strip()

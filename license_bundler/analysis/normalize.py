"""License text normalization for template comparison."""


def normalize(text: str) -> str:
    """Normalize license text for comparison.

    - Replace carriage returns and newlines with spaces
    - Halve runs of spaces (one pass over double spaces, not a full collapse)
    - Convert to uppercase

    A run of four spaces becomes two, not one.

    Args:
        text: Raw license text.

    Returns:
        Normalized text for comparison.
    """
    text = text.replace("\r", " ").replace("\n", " ")
    text = text.replace("  ", " ")
    return text.upper()

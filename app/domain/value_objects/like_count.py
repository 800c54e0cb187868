"""Like count encoding — the decimal text stored on disk and pushed to clients."""

from app.domain.errors import MalformedStoredValue


def parse_like_count(raw: str) -> int:
    """Parse stored text into a like count.

    Surrounding whitespace is tolerated (editors like to append a newline).

    Raises:
        MalformedStoredValue: if the text is not a non-negative decimal integer.
    """
    text = raw.strip()
    if not text.isascii() or not text.isdigit():
        raise MalformedStoredValue(raw)
    return int(text)


def render_like_count(value: int) -> str:
    """Render a like count as the plain decimal string used for storage and push frames."""
    if value < 0:
        raise ValueError(f"Like count cannot be negative: {value}")
    return str(value)

from typing import List


def chunk_string(text: str, size: int) -> List[str]:
    """
    Split text into consecutive pieces of at most `size` characters.

    Joining the pieces gives back `text`. An empty string has no pieces.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"chunk size must be a positive integer, got {size!r}")

    return [text[i : i + size] for i in range(0, len(text), size)]

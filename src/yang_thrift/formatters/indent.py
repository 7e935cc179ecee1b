"""Line prefixing for comment blocks."""

from __future__ import annotations


def prefix_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text`` and terminate each with a newline.

    Only ``\\n`` separates lines. Empty lines inside ``text`` are kept (and
    prefixed). A single trailing newline does not add an extra line.

    Examples:
    --------
        >>> prefix_lines("first\\nsecond", "// ")
        '// first\\n// second\\n'

    """
    if not text:
        return ""
    return "".join(f"{prefix}{line}\n" for line in text.removesuffix("\n").split("\n"))

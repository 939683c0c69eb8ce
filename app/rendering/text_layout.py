"""Greedy line wrapping by estimated display width.

SVG text does not wrap, so every narrative field is broken into lines that
fit its box and cut with an ellipsis once the box's line budget is spent.
"""

import unicodedata

ELLIPSIS = "…"
_WIDE = frozenset({"W", "F"})
_NARROW_EM = 0.55


def char_width(ch: str) -> float:
    """Width of a character in ems."""
    return 1.0 if unicodedata.east_asian_width(ch) in _WIDE else _NARROW_EM


def display_width(text: str) -> float:
    return sum(char_width(ch) for ch in text)


def wrap_text(text: str, *, font_size: float, max_width: float, max_lines: int) -> list[str]:
    capacity = max_width / font_size
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        lines.extend(_wrap_paragraph(paragraph.strip(), capacity))
    lines = [line for line in lines if line] or [""]

    if len(lines) <= max_lines:
        return lines
    kept = lines[:max_lines]
    last = kept[-1]
    while last and display_width(last + ELLIPSIS) > capacity:
        last = last[:-1]
    kept[-1] = last.rstrip() + ELLIPSIS
    return kept


def _wrap_paragraph(paragraph: str, capacity: float) -> list[str]:
    lines: list[str] = []
    current = ""
    width = 0.0
    for ch in paragraph:
        w = char_width(ch)
        if current and width + w > capacity:
            lines.append(current.rstrip())
            current, width = "", 0.0
            if ch == " ":
                continue
        current += ch
        width += w
    if current:
        lines.append(current.rstrip())
    return lines

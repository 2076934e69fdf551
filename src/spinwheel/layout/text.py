"""Label fitting for curved slices.

Character budgets are counted in characters, not pixels: renderers differ
in fonts, so the engine works with an average glyph width and leaves exact
measurement to whoever draws the text.
"""

from typing import List

ELLIPSIS = "…"


def wrap_label(text: str, max_chars: int) -> List[str]:
    """Word-wrap a label into lines of at most ``max_chars`` characters.

    - Text that fits is returned as a single line.
    - Several words, none longer than the budget: greedy word packing.
    - Otherwise (one long word, or any word over budget): hard chunks of
      ``max_chars`` characters, spaces included.

    Args:
        text: Label to wrap
        max_chars: Maximum characters per line (at least 1)

    Returns:
        List of lines; empty for empty text
    """
    if not text:
        return []

    max_chars = max(1, max_chars)
    if len(text) <= max_chars:
        return [text]

    words = text.split(" ")
    lines: List[str] = []

    if len(words) > 1 and all(len(word) <= max_chars for word in words):
        current_line = ""
        for word in words:
            if not current_line:
                current_line = word
            elif len(current_line) + 1 + len(word) <= max_chars:
                current_line += " " + word
            else:
                lines.append(current_line)
                current_line = word
        if current_line:
            lines.append(current_line)
        return lines

    for start in range(0, len(text), max_chars):
        lines.append(text[start:start + max_chars])
    return lines


def truncate_label(text: str, max_chars: int, ellipsis: str = ELLIPSIS) -> str:
    """Shorten a label to one line of at most ``max_chars`` characters.

    Prefers cutting at a word boundary as long as that keeps at least half
    of the available room; otherwise cuts mid-word. The ellipsis counts
    towards the budget.
    """
    if len(text) <= max_chars:
        return text

    room = max_chars - len(ellipsis)
    if room <= 0:
        return ellipsis[:max(0, max_chars)]

    cut = text[:room]
    boundary = cut.rfind(" ")
    if boundary >= room / 2:
        cut = cut[:boundary]
    cut = cut.rstrip()
    return cut + ellipsis


def fit_label(text: str, max_chars: int, single_line: bool, ellipsis: str = ELLIPSIS) -> List[str]:
    """Wrap or truncate a label depending on the line policy."""
    if single_line:
        return [truncate_label(text, max_chars, ellipsis)] if text else []
    return wrap_label(text, max_chars)


def line_offsets(line_count: int, font_size: float, spacing_factor: float) -> List[float]:
    """Vertical offsets that center ``line_count`` lines on the ring position.

    Returns:
        One offset per line, in the same units as ``font_size``
    """
    if line_count <= 0:
        return []
    spacing = font_size * spacing_factor
    first = -(line_count * spacing) / 2 + spacing / 2
    return [first + i * spacing for i in range(line_count)]

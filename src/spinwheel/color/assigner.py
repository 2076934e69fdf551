"""Adjacent-color assignment for wheel slices.

Greedy coloring of a cycle: every slice avoids the color of the slice
before it, and the last slice also avoids the first one so the wrap-around
seam never shows two equal neighbors. The palette search for slice ``i``
starts at ``i mod len(palette)`` which spreads the colors over large wheels
instead of favouring the head of the palette.
"""

from dataclasses import replace
from typing import Sequence
import logging

from spinwheel.core.models import Slice

logger = logging.getLogger(__name__)


def _default_palette() -> list[str]:
    from spinwheel.config.themes import DEFAULT_THEME, get_theme
    return get_theme(DEFAULT_THEME).palette


class ColorAssigner:
    """Assigns palette colors so that cyclic neighbors differ.

    With three or more distinct palette colors the guarantee always holds.
    With one or two colors a wheel of three or more slices cannot be
    colored properly; the slice then takes the color at its starting
    offset and the collision is accepted.
    """

    def __init__(self, palette: Sequence[str] | None = None) -> None:
        self._palette = list(palette) if palette else None

    @property
    def palette(self) -> list[str]:
        if self._palette is None:
            self._palette = _default_palette()
        return list(self._palette)

    def assign(self, slice_ids: Sequence[str], palette: Sequence[str] | None = None) -> list[str]:
        """
        Pick one color per slice id, in input order.

        Args:
            slice_ids: Slice identifiers in wheel order (only the count and
                order matter)
            palette: Colors to draw from; falls back to this assigner's
                palette, then to the default theme palette

        Returns:
            List of colors, same length as ``slice_ids``
        """
        colors = list(palette) if palette else None
        if colors is None:
            if palette is not None:
                logger.warning("Empty palette given, using default palette")
            colors = self.palette

        count = len(slice_ids)
        num_colors = len(colors)
        result: list[str] = []

        for i in range(count):
            forbidden: set[str] = set()
            if i > 0:
                forbidden.add(result[i - 1])
            # Close the cycle
            if i == count - 1 and count > 1:
                forbidden.add(result[0])

            start = i % num_colors
            chosen = None
            for step in range(num_colors):
                candidate = colors[(start + step) % num_colors]
                if candidate not in forbidden:
                    chosen = candidate
                    break

            if chosen is None:
                chosen = colors[start]
                logger.debug(
                    f"Palette of {num_colors} colors too small, slice {i} repeats a neighbor color"
                )

            result.append(chosen)

        return result

    def colorize(self, slices: Sequence[Slice], palette: Sequence[str] | None = None) -> list[Slice]:
        """Return copies of ``slices`` carrying their assigned colors."""
        colors = self.assign([s.id for s in slices], palette)
        return [replace(s, color=color) for s, color in zip(slices, colors)]


def assign_colors(slice_ids: Sequence[str], palette: Sequence[str] | None = None) -> list[str]:
    """Assign colors to a cyclic sequence of slices.

    See ``ColorAssigner.assign``.
    """
    return ColorAssigner().assign(slice_ids, palette)

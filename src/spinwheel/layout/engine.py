"""Wheel layout engine.

Produces one ``SliceLayout`` per slice: arc bounds, ring radii, font sizes,
wrapped label lines and the unit-circle anchors a renderer needs. Nothing
here knows how the wheel is drawn.
"""

import logging
from typing import Any, Mapping, Sequence

from spinwheel.config.settings import LayoutSettings, get_settings
from spinwheel.core.models import Slice, SliceLayout
from spinwheel.layout import geometry
from spinwheel.layout.text import fit_label, line_offsets

logger = logging.getLogger(__name__)


def _coerce_slices(slices: Sequence[Slice | Mapping[str, Any]]) -> list[Slice]:
    return [s if isinstance(s, Slice) else Slice.from_dict(s) for s in slices]


class LayoutEngine:
    """Lays out labels for a wheel of any size.

    Special cases:
        0 slices: a single placeholder entry carrying the empty message
        1 slice:  one full-circle entry with the label centred
    """

    def __init__(self, settings: LayoutSettings | None = None) -> None:
        self._settings = settings or get_settings().layout

    @property
    def settings(self) -> LayoutSettings:
        return self._settings

    def _clip_label(self, s: Slice) -> str:
        limit = self._settings.max_label_length
        if len(s.label) > limit:
            logger.warning(f"Label of slice {s.id!r} exceeds {limit} chars, clipping")
            return s.label[:limit]
        return s.label

    def _lines_for(self, label: str, count: int, max_chars: int, font_size: int) -> tuple[list[str], list[float]]:
        lines = fit_label(
            label,
            max_chars,
            single_line=geometry.is_single_line(count, self._settings),
            ellipsis=self._settings.ellipsis,
        )
        spacing = geometry.line_spacing_factor(count, self._settings)
        return lines, line_offsets(len(lines), font_size, spacing)

    def _placeholder(self) -> SliceLayout:
        text_size, emoji_size = geometry.font_sizes(0, self._settings)
        message = self._settings.empty_message
        return SliceLayout(
            slice_id="",
            index=-1,
            arc_start=0.0,
            arc_end=360.0,
            mid_angle=0.0,
            emoji_radius=0.0,
            text_radius=0.0,
            font_size=text_size,
            emoji_size=emoji_size,
            max_chars=len(message),
            text_lines=[message],
            line_offsets=[0.0],
            full_circle=True,
            is_placeholder=True,
        )

    def _single(self, s: Slice) -> SliceLayout:
        text_size, emoji_size = geometry.font_sizes(1, self._settings)
        e_radius = geometry.emoji_radius(1, self._settings)
        max_chars = geometry.max_chars_for(
            1, geometry.text_radius(1, s.has_emoji, self._settings), text_size, self._settings
        )
        lines, offsets = self._lines_for(self._clip_label(s), 1, max_chars, text_size)
        return SliceLayout(
            slice_id=s.id,
            index=0,
            arc_start=0.0,
            arc_end=360.0,
            mid_angle=0.0,
            emoji_radius=e_radius,
            text_radius=0.0,
            font_size=text_size,
            emoji_size=emoji_size,
            max_chars=max_chars,
            text_lines=lines,
            line_offsets=offsets,
            rotation_deg=0.0,
            text_anchor=(0.0, 0.0),
            emoji_anchor=(0.0, -e_radius),
            full_circle=True,
            has_emoji=s.has_emoji,
            color=s.color,
        )

    def layout(self, slices: Sequence[Slice | Mapping[str, Any]]) -> list[SliceLayout]:
        """
        Compute the layout of every slice.

        Args:
            slices: Slices in wheel order (Slice objects or mappings)

        Returns:
            One SliceLayout per slice, or a single placeholder for an empty
            wheel
        """
        items = _coerce_slices(slices)
        count = len(items)

        if count == 0:
            return [self._placeholder()]
        if count == 1:
            return [self._single(items[0])]

        s = self._settings
        starts, ends, mids = geometry.arc_bounds(count)
        text_size, emoji_size = geometry.font_sizes(count, s)
        e_radius = geometry.emoji_radius(count, s)
        t_radii = [geometry.text_radius(count, item.has_emoji, s) for item in items]
        text_anchors = geometry.polar_to_unit(mids, t_radii)
        emoji_anchors = geometry.polar_to_unit(mids, e_radius)

        # Budgets only differ between emoji and plain slices
        budgets = {
            has_emoji: geometry.max_chars_for(count, geometry.text_radius(count, has_emoji, s), text_size, s)
            for has_emoji in (False, True)
        }

        result: list[SliceLayout] = []
        for i, item in enumerate(items):
            max_chars = budgets[item.has_emoji]
            lines, offsets = self._lines_for(self._clip_label(item), count, max_chars, text_size)
            mid = float(mids[i])
            result.append(SliceLayout(
                slice_id=item.id,
                index=i,
                arc_start=float(starts[i]),
                arc_end=float(ends[i]),
                mid_angle=mid,
                emoji_radius=e_radius,
                text_radius=t_radii[i],
                font_size=text_size,
                emoji_size=emoji_size,
                max_chars=max_chars,
                text_lines=lines,
                line_offsets=offsets,
                rotation_deg=mid + 90.0,
                text_anchor=(float(text_anchors[i][0]), float(text_anchors[i][1])),
                emoji_anchor=(float(emoji_anchors[i][0]), float(emoji_anchors[i][1])),
                has_emoji=item.has_emoji,
                color=item.color,
            ))

        logger.debug(f"Laid out {count} slices (font {text_size}/{emoji_size}, emoji ring {e_radius:.3f})")
        return result


def compute_layout(slices: Sequence[Slice | Mapping[str, Any]]) -> list[SliceLayout]:
    """Lay out a wheel with default settings. See ``LayoutEngine.layout``."""
    return LayoutEngine().layout(slices)

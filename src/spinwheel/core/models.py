"""
Value objects exchanged between the wheel engine and its callers.

Slices are owned by the caller and never mutated; layouts and spin plans
are derived fresh on every content change or spin.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from spinwheel.animation.easing import CubicBezier, SPIN_BEZIER, interpolate

MAX_LABEL_LENGTH = 50


@dataclass(frozen=True)
class Slice:
    """One wedge of the wheel.

    Attributes:
        id: Unique, stable identifier
        label: Display text (1-50 characters)
        has_emoji: Whether an emoji is drawn on the outer ring
        color: Fill color as hex string
        emoji: The emoji itself, if known
    """
    id: str
    label: str
    has_emoji: bool = False
    color: str = ""
    emoji: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Slice":
        """Build a slice from a loose mapping.

        Accepts ``hasEmoji`` or ``has_emoji`` and ``label`` or ``name``.
        ``has_emoji`` defaults to whether an ``emoji`` value is present.
        """
        emoji = data.get("emoji") or ""
        has_emoji = data.get("has_emoji", data.get("hasEmoji", bool(emoji)))
        return cls(
            id=str(data["id"]),
            label=str(data.get("label", data.get("name", ""))),
            has_emoji=bool(has_emoji),
            color=str(data.get("color") or ""),
            emoji=str(emoji),
        )


@dataclass
class SliceLayout:
    """Derived geometry for one slice.

    Angles are in degrees, clockwise from the pointer at the top of the
    wheel. Radii are fractions of the wheel radius. Anchors are (x, y) in
    unit-radius coordinates centred on the wheel, y pointing down.
    """
    slice_id: str
    index: int
    arc_start: float
    arc_end: float
    mid_angle: float
    emoji_radius: float
    text_radius: float
    font_size: int
    emoji_size: int
    max_chars: int
    text_lines: list[str] = field(default_factory=list)
    line_offsets: list[float] = field(default_factory=list)
    rotation_deg: float = 0.0
    text_anchor: tuple[float, float] = (0.0, 0.0)
    emoji_anchor: tuple[float, float] = (0.0, 0.0)
    full_circle: bool = False
    is_placeholder: bool = False
    has_emoji: bool = False
    color: str = ""

    @property
    def arc_span(self) -> float:
        return self.arc_end - self.arc_start

    @property
    def large_arc(self) -> bool:
        """SVG large-arc flag for the slice path."""
        return self.arc_span > 180

    def to_dict(self) -> dict[str, Any]:
        return {
            "slice_id": self.slice_id,
            "index": self.index,
            "arc_start": self.arc_start,
            "arc_end": self.arc_end,
            "mid_angle": self.mid_angle,
            "emoji_radius": self.emoji_radius,
            "text_radius": self.text_radius,
            "font_size": self.font_size,
            "emoji_size": self.emoji_size,
            "max_chars": self.max_chars,
            "text_lines": list(self.text_lines),
            "line_offsets": list(self.line_offsets),
            "rotation_deg": self.rotation_deg,
            "text_anchor": list(self.text_anchor),
            "emoji_anchor": list(self.emoji_anchor),
            "full_circle": self.full_circle,
            "is_placeholder": self.is_placeholder,
            "has_emoji": self.has_emoji,
            "color": self.color,
        }


@dataclass(frozen=True)
class SpinPlan:
    """Randomized target and timing for one spin animation.

    ``target_rotation_deg = start_rotation_deg + 360 * extra_turns +
    final_offset_deg``. The winning slice depends on the target alone.
    """
    start_rotation_deg: float
    target_rotation_deg: float
    duration_ms: float
    easing_curve: CubicBezier = SPIN_BEZIER
    extra_turns: int = 0
    final_offset_deg: float = 0.0
    slice_count: int = 0

    @property
    def total_degrees(self) -> float:
        return self.target_rotation_deg - self.start_rotation_deg

    def progress(self, elapsed_ms: float) -> float:
        """Linear time progress clamped to 0.0-1.0."""
        if self.duration_ms <= 0:
            return 1.0
        return max(0.0, min(1.0, elapsed_ms / self.duration_ms))

    def is_settled(self, elapsed_ms: float) -> bool:
        return elapsed_ms >= self.duration_ms

    def rotation_at(self, elapsed_ms: float) -> float:
        """Eased rotation in degrees after ``elapsed_ms`` of animation."""
        return interpolate(
            self.start_rotation_deg,
            self.target_rotation_deg,
            self.progress(elapsed_ms),
            self.easing_curve,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "start_rotation_deg": self.start_rotation_deg,
            "target_rotation_deg": self.target_rotation_deg,
            "duration_ms": self.duration_ms,
            "easing_curve": list(self.easing_curve.control_points),
            "extra_turns": self.extra_turns,
            "final_offset_deg": self.final_offset_deg,
            "slice_count": self.slice_count,
        }


@dataclass
class WheelState:
    """Caller-owned wheel state passed into ``WheelEngine.spin``."""
    rotation_deg: float = 0.0
    slice_count: int = 0
    is_spinning: bool = False

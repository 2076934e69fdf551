"""
Spin session state machine for wheel callers.

States:
    IDLE: Wheel at rest, no result shown yet
    SPINNING: A spin plan is being animated
    RESULT: The last spin settled on a winner

The engine itself is stateless; this is the caller-side helper that owns
the rotation accumulator and the single in-flight plan, so a new spin can
never start while another one is still resolving.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Callable
import logging

from spinwheel.core.models import SpinPlan, WheelState
from spinwheel.spin.engine import SpinOutcomeEngine

logger = logging.getLogger(__name__)


class SpinPhase(Enum):
    """Spin session phases."""
    IDLE = auto()
    SPINNING = auto()
    RESULT = auto()


@dataclass
class SpinContext:
    """Data carried alongside the phase."""
    plan: SpinPlan | None = None
    winner: int | None = None
    spins: int = 0


Listener = Callable[[SpinPhase, SpinPhase, SpinContext], None]


class SpinSession:
    """
    Drives one wheel through repeated spins.

    Typical use by an animation driver::

        plan = session.start(len(slices))
        while not session.tick(elapsed_ms):
            draw(session.rotation_deg)
        winner = slices[session.context.winner]
    """

    VALID_TRANSITIONS: list[tuple[SpinPhase, SpinPhase]] = [
        (SpinPhase.IDLE, SpinPhase.SPINNING),
        (SpinPhase.SPINNING, SpinPhase.RESULT),
        (SpinPhase.SPINNING, SpinPhase.IDLE),  # Cancel
        (SpinPhase.RESULT, SpinPhase.SPINNING),  # Spin again
        (SpinPhase.RESULT, SpinPhase.IDLE),
    ]

    def __init__(self, engine: SpinOutcomeEngine | None = None, rotation_deg: float = 0.0) -> None:
        self._engine = engine or SpinOutcomeEngine()
        self._phase = SpinPhase.IDLE
        self._context = SpinContext()
        self._rotation_deg = rotation_deg
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def phase(self) -> SpinPhase:
        return self._phase

    @property
    def context(self) -> SpinContext:
        return self._context

    @property
    def rotation_deg(self) -> float:
        """Current (possibly mid-animation) cumulative rotation."""
        return self._rotation_deg

    @property
    def is_spinning(self) -> bool:
        return self._phase == SpinPhase.SPINNING

    def state(self, slice_count: int) -> WheelState:
        """Snapshot for ``WheelEngine.spin``."""
        return WheelState(
            rotation_deg=self._rotation_deg,
            slice_count=slice_count,
            is_spinning=self.is_spinning,
        )

    def can_transition(self, to_phase: SpinPhase) -> bool:
        return (self._phase, to_phase) in self._valid_transitions

    def _transition(self, to_phase: SpinPhase) -> bool:
        if not self.can_transition(to_phase):
            logger.warning(f"Invalid transition: {self._phase.name} -> {to_phase.name}")
            return False

        old_phase = self._phase
        self._phase = to_phase
        logger.debug(f"Spin phase: {old_phase.name} -> {to_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, to_phase, self._context)
            except Exception as e:
                logger.error(f"Error in spin listener: {e}")
        return True

    def start(self, slice_count: int) -> SpinPlan | None:
        """
        Begin a spin.

        Returns:
            The new plan, or None when the wheel has fewer than two slices
            or a spin is already in flight
        """
        if self.is_spinning:
            logger.debug("Spin ignored: already spinning")
            return None
        if slice_count < 2:
            logger.debug(f"Spin ignored: {slice_count} slice(s)")
            return None

        plan = self._engine.plan(self._rotation_deg, slice_count)
        self._context.plan = plan
        self._context.winner = None
        self._transition(SpinPhase.SPINNING)
        return plan

    def tick(self, elapsed_ms: float) -> bool:
        """
        Advance the animation clock.

        Returns:
            True once the spin has settled (winner available)
        """
        plan = self._context.plan
        if not self.is_spinning or plan is None:
            return self._phase == SpinPhase.RESULT

        self._rotation_deg = plan.rotation_at(elapsed_ms)
        if not plan.is_settled(elapsed_ms):
            return False

        self._rotation_deg = plan.target_rotation_deg
        self._context.winner = self._engine.resolve(plan)
        self._context.spins += 1
        self._transition(SpinPhase.RESULT)
        logger.info(f"Spin settled on slice {self._context.winner} of {plan.slice_count}")
        return True

    def cancel(self) -> None:
        """Drop the in-flight plan; the rotation stays where it was drawn."""
        if not self.is_spinning:
            return
        self._context.plan = None
        self._transition(SpinPhase.IDLE)

    def add_listener(self, callback: Listener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a phase change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def reset(self) -> None:
        """Back to IDLE with the rotation at rest."""
        old_phase = self._phase
        self._phase = SpinPhase.IDLE
        self._context = SpinContext()
        self._rotation_deg = self._rotation_deg % 360

        for listener in self._listeners:
            try:
                listener(old_phase, SpinPhase.IDLE, self._context)
            except Exception as e:
                logger.error(f"Error in spin listener during reset: {e}")

"""
Phase sequencer.

Runs the phases of a behavior configuration one after another on a trial.
"""

import logging
from typing import Any, Callable, List, Optional

from .behavior import BehaviorConfiguration
from .collaborators import resolve
from .errors import PhaseExecutionError, SequencerError

logger = logging.getLogger(__name__)

# Observer signature: observer(phase_name, trial) -> None or awaitable
PhaseObserver = Callable[[str, Any], Any]


class PhaseSequencer:
    """
    Executes the phases of a behavior in order.

    Each phase runs only after the previous one, including all of its
    suspensions, has finished. Before each phase the trial's before_phase()
    hook runs, then the observer is notified with (phase_name, trial).

    If a phase fails the remaining phases are skipped and the failure is
    raised as PhaseExecutionError. There is no retry.

    Example:
        sequencer = PhaseSequencer(BASE_BEHAVIOR, observer=on_phase)
        await sequencer.run(trial)
    """

    def __init__(self, behavior: BehaviorConfiguration, observer: Optional[PhaseObserver] = None):
        """
        Initialize sequencer.

        Args:
            behavior: Phases and operations to execute
            observer: Optional callback notified at every phase transition
        """
        self.behavior = behavior
        self.observer = observer
        self.completed_phases: List[str] = []
        self.current_phase: Optional[str] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    async def run(self, trial):
        """
        Execute every phase on the trial.

        Args:
            trial: Trial to run

        Returns:
            The trial

        Raises:
            SequencerError: If the sequencer or the trial is already running or finished,
                or the trial was built for another behavior
            PhaseExecutionError: If a phase operation fails
        """
        if self._running:
            raise SequencerError("Sequencer is already running")
        if trial.started:
            raise SequencerError(f"{trial!r} has already been run")
        if trial.behavior is not self.behavior:
            raise SequencerError(
                f"Sequencer runs '{self.behavior.name}' but {trial!r} was built for '{trial.behavior.name}'"
            )

        # Phases and operations are fixed for the whole run
        behavior = self.behavior
        phases = tuple(behavior.phases)

        self._running = True
        self.completed_phases = []
        trial.started = True
        logger.info(f"Running {behavior.name} with phases {list(phases)}")

        try:
            for phase in phases:
                await self._run_phase(phase, behavior.operation(phase), trial)
        finally:
            self._running = False
            self.current_phase = None

        trial.finished = True
        logger.info(f"{behavior.name} complete ({len(self.completed_phases)} phases)")
        return trial

    async def _run_phase(self, phase: str, operation, trial):
        self.current_phase = phase

        try:
            trial.before_phase(phase)
            if self.observer is not None:
                await resolve(self.observer(phase, trial))

            await resolve(operation(trial))

        except Exception as e:
            trial.failed_phase = phase
            logger.error(f"Phase '{phase}' failed: {e}", exc_info=True)
            raise PhaseExecutionError(phase, str(e) or type(e).__name__) from e

        self.completed_phases.append(phase)
        logger.debug(f"Phase '{phase}' complete")

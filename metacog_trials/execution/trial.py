"""
Trial class for metacog-trials.

Represents a single trial execution: its configuration, behavior, clock and
the data record accumulated by its phases.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from metacog_trials.config import AdvisedTrialConfig, ConfigurationError, PromptMap, TrialConfig

from .behavior import ADVISED_BEHAVIOR, BASE_BEHAVIOR, BehaviorConfiguration
from .clock import PhaseClock
from .display import PlaceholderDisplay
from .record import DataRecord
from .sequencer import PhaseObserver, PhaseSequencer

logger = logging.getLogger(__name__)


class Trial:
    """
    A single experimental trial.

    The phases run are those of `behavior`; the base behavior is:
    - begin (prompt)
    - showStim (stimulus phase)
    - hideStim (post-stimulus)
    - getResponse (response collection)
    - showFeedback
    - end
    - cleanup

    Contains:
    - config: TrialConfig the trial was built from
    - data: DataRecord filled during execution
    - prompt: PromptMap of content per phase
    - log: Notes recorded during execution (e.g. response timeouts)
    - phase / state: Current phase name and label
    """

    def __init__(
        self,
        config: TrialConfig,
        behavior: BehaviorConfiguration = BASE_BEHAVIOR,
        observer: Optional[PhaseObserver] = None,
        display=None,
        clock: Optional[PhaseClock] = None
    ):
        """
        Initialize trial.

        Args:
            config: Trial configuration
            behavior: Phases to run and their operations
            observer: Callback(phase_name, trial) notified at every phase transition
            display: Shared display handle (default: in-memory placeholders)
            clock: Phase clock (default: wall clock)

        Raises:
            ConfigurationError: If the config does not suit the behavior or the prompt is malformed
        """
        if not isinstance(config, behavior.config_type):
            raise ConfigurationError(
                f"Behavior '{behavior.name}' requires {behavior.config_type.__name__}, "
                f"got {type(config).__name__}"
            )

        self.config = config
        self.behavior = behavior
        self.observer = observer
        self.display = display if display is not None else PlaceholderDisplay()
        self.clock = clock or PhaseClock()

        self.prompt = PromptMap.build(config.prompt, behavior.phases, behavior.prompt_defaults)
        self.log: List[str] = []
        self.phase: Optional[str] = None
        self.state: Optional[str] = None
        self.started = False
        self.finished = False
        self.failed_phase: Optional[str] = None

        # Register properties in the data output
        self.data = DataRecord(behavior.record_fields)
        self.data['stim'] = str(config.stim)
        self.data['correctAnswer'] = config.resolve_correct_answer()
        self.data['isAttentionCheck'] = int(bool(config.attention_check))
        self.data['number'] = config.number

        self.display.reset()

    @property
    def phases(self):
        return self.behavior.phases

    @property
    def trial_time(self) -> float:
        """Milliseconds since the trial started."""
        return self.clock.elapsed()

    def before_phase(self, phase: str):
        """
        Register the beginning of a phase.

        Sets the phase label on the display and shows the phase prompt.

        Args:
            phase: Phase name
        """
        self.phase = phase
        self.state = f"{self.behavior.state_prefix}-{phase}"
        self.display.set_state(self.state)
        self.display.set_prompt(self.prompt[phase])
        logger.info(f"Phase {self.state}")

    async def run(self) -> 'Trial':
        """
        Run all phases of the trial.

        Returns:
            This trial, once cleanup has finished

        Raises:
            PhaseExecutionError: If a phase fails; later phases are not run
        """
        sequencer = PhaseSequencer(self.behavior, observer=self.observer)
        return await sequencer.run(self)

    @property
    def table_headers(self) -> List[str]:
        """Headers for the columns of to_table()."""
        return list(self.data.keys())

    def to_table(self, headers: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Fetch the trial data in a flat format suitable for a table row.

        Args:
            headers: Columns to read (None = table_headers). Missing columns are None.

        Returns:
            Column name to single value
        """
        return self.data.as_row(self.table_headers if headers is None else headers)

    def __repr__(self):
        return (
            f"Trial(behavior={self.behavior.name!r}, phase={self.phase!r}, "
            f"finished={self.finished})"
        )


def create_trial(config: TrialConfig, **kwargs) -> Trial:
    """
    Create a trial with the behavior matching its configuration.

    AdvisedTrialConfig gets the advised behavior, any other TrialConfig the
    base behavior.

    Args:
        config: Trial configuration
        **kwargs: Passed to Trial (observer, display, clock)

    Returns:
        Trial instance
    """
    behavior = ADVISED_BEHAVIOR if isinstance(config, AdvisedTrialConfig) else BASE_BEHAVIOR
    return Trial(config, behavior=behavior, **kwargs)

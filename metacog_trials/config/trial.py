"""
Trial configuration data structures.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from .errors import ConfigurationError


RESPONSE_WIDGET_METHODS = ('get_response', 'reset')
ADVISOR_METHODS = ('to_table', 'get_advice', 'draw_advice', 'hide_advice')


def _check_duration(name: str, value) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer number of ms or None, got {value!r}")
    if value < 0:
        raise ConfigurationError(f"{name} must be non-negative, got {value}")


def _check_methods(label: str, obj, methods) -> None:
    missing = [m for m in methods if not callable(getattr(obj, m, None))]
    if missing:
        raise ConfigurationError(f"{label} is missing required methods: {', '.join(missing)}")


@dataclass(frozen=True)
class TrialConfig:
    """
    Configuration for a single trial.

    A trial consists of:
    1. Prompt and pre-stimulus interval
    2. Stimulus display and post-stimulus interval
    3. Response collection
    4. Optional feedback
    5. End and cleanup

    Attributes:
        stim: Stimulus content handed to the display
        correct_answer: Correct answer, or a zero-argument callable producing it
        response_widget: Response collector for the trial
        prompt: None, a string for every phase, or a mapping of phase name to content
        blank_stim: Content displayed once the stimulus is hidden
        duration_pre_stim: Pre-stimulus interval in ms
        duration_stim: Stimulus display duration in ms
        duration_post_stim: Interval between stimulus offset and response in ms
        duration_response: Response timeout in ms (None = collector default)
        display_feedback: Callback awaited with the trial to show feedback (None = no feedback)
        attention_check: Whether the trial is an attention check
        number: Trial number within the study
    """
    stim: Any
    correct_answer: Any
    response_widget: Any
    prompt: Any = None
    blank_stim: Any = None
    duration_pre_stim: Optional[int] = 500
    duration_stim: Optional[int] = 500
    duration_post_stim: Optional[int] = 100
    duration_response: Optional[int] = None
    display_feedback: Optional[Callable] = None
    attention_check: bool = False
    number: Optional[int] = None

    def __post_init__(self):
        """Validate trial parameters."""
        for name in self._duration_fields():
            _check_duration(name, getattr(self, name))

        if self.response_widget is None:
            raise ConfigurationError("response_widget is required")
        _check_methods("response_widget", self.response_widget, RESPONSE_WIDGET_METHODS)

        if self.display_feedback is not None and not callable(self.display_feedback):
            raise ConfigurationError("display_feedback must be callable or None")

        if self.number is not None and (isinstance(self.number, bool) or not isinstance(self.number, int)):
            raise ConfigurationError(f"number must be an integer or None, got {self.number!r}")

    @classmethod
    def _duration_fields(cls):
        return ('duration_pre_stim', 'duration_stim', 'duration_post_stim', 'duration_response')

    def resolve_correct_answer(self):
        """Return the correct answer, calling it if it was given as a function."""
        if callable(self.correct_answer):
            return self.correct_answer()
        return self.correct_answer

    def get_estimated_duration(self) -> int:
        """
        Calculate estimated total duration of this trial in ms.

        Response timeouts count at their maximum. Durations delegated to
        collaborators (None) are not counted.

        Returns:
            Total of all configured durations in ms
        """
        return sum(getattr(self, name) or 0 for name in self._duration_fields())

    def to_dict(self) -> dict:
        """Summarise scalar settings for archiving next to the trial data."""
        data = {name: getattr(self, name) for name in self._duration_fields()}
        data.update({
            'stim': str(self.stim),
            'blank_stim': None if self.blank_stim is None else str(self.blank_stim),
            'has_feedback': self.display_feedback is not None,
            'attention_check': self.attention_check,
            'number': self.number,
        })
        return data


@dataclass(frozen=True)
class AdvisedTrialConfig(TrialConfig):
    """
    Configuration for a trial with advice and a final response.

    Attributes:
        advisors: Advisors giving advice on the trial, in display order
        duration_show_advice: Hold after all advice is drawn in ms (None = advisors handle it)
        duration_final_response: Final response timeout in ms (None = use duration_response)
        duration_advice_settle: Pause after each advisor draws its advice in ms
    """
    advisors: Sequence = ()
    duration_show_advice: Optional[int] = None
    duration_final_response: Optional[int] = None
    duration_advice_settle: Optional[int] = 1000

    def __post_init__(self):
        object.__setattr__(self, 'advisors', tuple(self.advisors))
        super().__post_init__()

        for i, advisor in enumerate(self.advisors):
            _check_methods(f"advisor {i}", advisor, ADVISOR_METHODS)

    @classmethod
    def _duration_fields(cls):
        return TrialConfig._duration_fields() + (
            'duration_show_advice',
            'duration_final_response',
            'duration_advice_settle',
        )

    @property
    def final_response_timeout(self) -> Optional[int]:
        """Timeout for the final response, falling back to the initial response timeout."""
        if self.duration_final_response is None:
            return self.duration_response
        return self.duration_final_response

    def get_estimated_duration(self) -> int:
        # Settle interval applies once per advisor
        total = super().get_estimated_duration()
        total -= self.duration_advice_settle or 0
        total += (self.duration_advice_settle or 0) * len(self.advisors)
        return total

    def to_dict(self) -> dict:
        data = super().to_dict()
        data['advisor_count'] = len(self.advisors)
        return data

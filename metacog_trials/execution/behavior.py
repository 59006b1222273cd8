"""
Behavior configurations.

A behavior configuration is the ordered phase list of a trial variant plus
the operation that runs each phase. New trial variants are new
configurations derived with `extend()`; the sequencer is the same for all of
them.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from metacog_trials.config import AdvisedTrialConfig, ConfigurationError, TrialConfig

from .phases import advice, cleanup, feedback, response, stimulus

# Operation signature: operation(trial) -> None or awaitable
PhaseOperation = Callable[[Any], Any]

BASE_RECORD_FIELDS = (
    'timestampStart',
    'timeStimOn',
    'timeStimOff',
    'timeResponseOpen',
    'timeResponseClose',
    'timeFeedbackOn',
    'timeFeedbackOff',
    'timeEnd',
)

ADVICE_PROMPT = "Consider the advice below and provide a final response."


@dataclass(frozen=True)
class BehaviorConfiguration:
    """
    Ordered phases and the operation for each phase of a trial variant.

    Attributes:
        name: Behavior name (e.g. "trial", "advised")
        phases: Phase names in execution order
        operations: Phase name -> operation(trial)
        record_fields: Fields seeded as None so every trial has the same columns
        prompt_defaults: Per-phase prompts replacing a single-string prompt
        config_type: Configuration class trials of this behavior require
        state_prefix: Prefix of the phase label shown to observers ("<prefix>-<phase>")
    """
    name: str
    phases: Tuple[str, ...]
    operations: Mapping[str, PhaseOperation]
    record_fields: Tuple[str, ...] = BASE_RECORD_FIELDS
    prompt_defaults: Mapping[str, str] = field(default_factory=dict)
    config_type: type = TrialConfig
    state_prefix: str = "Trial"

    def __post_init__(self):
        object.__setattr__(self, 'phases', tuple(self.phases))
        object.__setattr__(self, 'record_fields', tuple(self.record_fields))
        object.__setattr__(self, 'operations', MappingProxyType(dict(self.operations)))
        object.__setattr__(self, 'prompt_defaults', MappingProxyType(dict(self.prompt_defaults)))

        if not self.phases:
            raise ConfigurationError(f"Behavior '{self.name}' has no phases")

        duplicates = sorted({p for p in self.phases if self.phases.count(p) > 1})
        if duplicates:
            raise ConfigurationError(f"Behavior '{self.name}' repeats phases: {duplicates}")

        missing = [p for p in self.phases if not callable(self.operations.get(p))]
        if missing:
            raise ConfigurationError(f"Behavior '{self.name}' has no operation for phases: {missing}")

    def operation(self, phase: str) -> PhaseOperation:
        return self.operations[phase]

    def extend(
        self,
        name: str,
        insert_after: Optional[str] = None,
        phases: Optional[Mapping[str, PhaseOperation]] = None,
        overrides: Optional[Mapping[str, PhaseOperation]] = None,
        prompt_defaults: Optional[Mapping[str, str]] = None,
        record_fields: Tuple[str, ...] = (),
        config_type: Optional[type] = None,
        state_prefix: Optional[str] = None
    ) -> 'BehaviorConfiguration':
        """
        Derive a new behavior from this one.

        Args:
            name: Name of the new behavior
            insert_after: Existing phase after which new phases are inserted
                          (None = append at the end)
            phases: New phases and their operations, in insertion order
            overrides: Replacement operations for existing phases
            prompt_defaults: Additional per-phase prompt defaults
            record_fields: Additional fields seeded as None
            config_type: Required configuration class (default: unchanged)
            state_prefix: Phase label prefix (default: unchanged)

        Returns:
            New BehaviorConfiguration; this one is left untouched

        Example:
            ADVISED_BEHAVIOR = BASE_BEHAVIOR.extend(
                "advised",
                insert_after="getResponse",
                phases={"showAdvice": show_advice, "getFinalResponse": get_final_response},
            )
        """
        phases = dict(phases or {})
        overrides = dict(overrides or {})

        unknown = [p for p in overrides if p not in self.phases]
        if unknown:
            raise ConfigurationError(f"Cannot override unknown phases {unknown} of '{self.name}'")

        phase_list = list(self.phases)
        if insert_after is None:
            index = len(phase_list)
        elif insert_after in phase_list:
            index = phase_list.index(insert_after) + 1
        else:
            raise ConfigurationError(f"Behavior '{self.name}' has no phase '{insert_after}'")
        phase_list[index:index] = list(phases)

        operations: Dict[str, PhaseOperation] = dict(self.operations)
        operations.update(phases)
        operations.update(overrides)

        defaults = dict(self.prompt_defaults)
        defaults.update(prompt_defaults or {})

        return BehaviorConfiguration(
            name=name,
            phases=tuple(phase_list),
            operations=operations,
            record_fields=self.record_fields + tuple(record_fields),
            prompt_defaults=defaults,
            config_type=config_type or self.config_type,
            state_prefix=self.state_prefix if state_prefix is None else state_prefix,
        )

    def __repr__(self):
        return f"BehaviorConfiguration(name={self.name!r}, phases={list(self.phases)})"


BASE_BEHAVIOR = BehaviorConfiguration(
    name="trial",
    phases=(
        'begin',
        'showStim',
        'hideStim',
        'getResponse',
        'showFeedback',
        'end',
        'cleanup',
    ),
    operations={
        'begin': stimulus.begin,
        'showStim': stimulus.show_stim,
        'hideStim': stimulus.hide_stim,
        'getResponse': response.get_response,
        'showFeedback': feedback.show_feedback,
        'end': feedback.end,
        'cleanup': cleanup.cleanup,
    },
)

ADVISED_BEHAVIOR = BASE_BEHAVIOR.extend(
    "advised",
    insert_after='getResponse',
    phases={
        'showAdvice': advice.show_advice,
        'getFinalResponse': response.get_final_response,
    },
    overrides={'cleanup': advice.cleanup},
    prompt_defaults={
        'showAdvice': ADVICE_PROMPT,
        'getFinalResponse': ADVICE_PROMPT,
        'showFeedback': ADVICE_PROMPT,
        'end': "",
        'cleanup': "",
    },
    record_fields=('timeResponseOpenFinal', 'timeResponseCloseFinal'),
    config_type=AdvisedTrialConfig,
)

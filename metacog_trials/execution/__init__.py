"""
Execution module for metacog-trials.

This module contains the trial execution architecture:
- PhaseClock: Elapsed time since trial start
- Suspension: Resolvable, cancellable delay
- DataRecord: Append-only record of a trial's data
- BehaviorConfiguration: Ordered phases and their operations
- PhaseSequencer: Runs the phases of a behavior in order
- Trial: A single trial execution
"""

from .clock import PhaseClock
from .suspension import Suspension, wait
from .collaborators import NO_RESPONSE, NoResponse, ResponseCollector, Advisor, is_no_response
from .display import DisplayHandle, PlaceholderDisplay
from .errors import PhaseExecutionError, RecordError, SequencerError
from .record import DataRecord, ResponseRound
from .behavior import ADVISED_BEHAVIOR, BASE_BEHAVIOR, BehaviorConfiguration
from .sequencer import PhaseSequencer
from .trial import Trial, create_trial

__all__ = [
    'PhaseClock',
    'Suspension',
    'wait',
    'NO_RESPONSE',
    'NoResponse',
    'ResponseCollector',
    'Advisor',
    'is_no_response',
    'DisplayHandle',
    'PlaceholderDisplay',
    'PhaseExecutionError',
    'RecordError',
    'SequencerError',
    'DataRecord',
    'ResponseRound',
    'BehaviorConfiguration',
    'BASE_BEHAVIOR',
    'ADVISED_BEHAVIOR',
    'PhaseSequencer',
    'Trial',
    'create_trial',
]

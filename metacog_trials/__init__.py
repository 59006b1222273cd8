"""
metacog-trials: phase-sequenced trials for social metacognition studies.
"""

from .config import AdvisedTrialConfig, ConfigurationError, TrialConfig
from .execution import (
    ADVISED_BEHAVIOR,
    BASE_BEHAVIOR,
    NO_RESPONSE,
    BehaviorConfiguration,
    PhaseExecutionError,
    PhaseSequencer,
    Trial,
    create_trial,
)
from .data_collector import TrialDataCollector

__version__ = "0.1.0"

__all__ = [
    'TrialConfig',
    'AdvisedTrialConfig',
    'ConfigurationError',
    'BehaviorConfiguration',
    'BASE_BEHAVIOR',
    'ADVISED_BEHAVIOR',
    'NO_RESPONSE',
    'PhaseExecutionError',
    'PhaseSequencer',
    'Trial',
    'create_trial',
    'TrialDataCollector',
]

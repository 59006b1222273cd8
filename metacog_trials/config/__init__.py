"""
Configuration structures for metacog-trials.

This module contains the data classes that parameterise a single trial
(stimulus, correct answer, phase durations, collaborators) and the prompt map
expanded from them.
"""

from .errors import ConfigurationError
from .prompt import PromptMap
from .trial import TrialConfig, AdvisedTrialConfig

__all__ = ['ConfigurationError', 'PromptMap', 'TrialConfig', 'AdvisedTrialConfig']

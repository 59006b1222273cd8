"""
Error types raised while executing a trial.
"""


class RecordError(RuntimeError):
    """Raised when a write would break the data record's invariants."""


class SequencerError(RuntimeError):
    """Raised when a trial is run while running or after it already ran."""


class PhaseExecutionError(RuntimeError):
    """
    Raised when a phase operation fails.

    The original exception is chained as __cause__.

    Attributes:
        phase: Name of the phase that failed
    """

    def __init__(self, phase: str, message: str):
        super().__init__(f"Phase '{phase}' failed: {message}")
        self.phase = phase

"""
Shared visual resource handle.

Rendering is done outside this package. A trial only tells the display what
to show (stimulus, prompt, phase label) and resets it to a neutral baseline
at construction and cleanup. The handle is passed in explicitly rather than
reached through global state.
"""

import logging
from typing import Any, List, Optional, Protocol

logger = logging.getLogger(__name__)


class DisplayHandle(Protocol):
    def show_stimulus(self, content: Any) -> None:
        ...

    def set_prompt(self, content: str) -> None:
        ...

    def set_state(self, label: str) -> None:
        ...

    def reset(self) -> None:
        ...


class PlaceholderDisplay:
    """
    In-memory display placeholders.

    Holds what a renderer should currently show. Used when no renderer is
    attached and as a test double.

    Attributes:
        stimulus: Current stimulus content (None = blank)
        prompt: Current prompt content
        state: Current phase label (e.g. "Trial-showStim")
        history: Phase labels set since the last reset
    """

    def __init__(self):
        self.stimulus: Optional[Any] = None
        self.prompt: str = ""
        self.state: Optional[str] = None
        self.history: List[str] = []
        self.reset_count = 0

    def show_stimulus(self, content: Any) -> None:
        self.stimulus = content

    def set_prompt(self, content: str) -> None:
        self.prompt = content

    def set_state(self, label: str) -> None:
        self.state = label
        self.history.append(label)

    def reset(self) -> None:
        """Clear stimulus, prompt and phase label."""
        self.stimulus = None
        self.prompt = ""
        self.state = None
        self.history = []
        self.reset_count += 1
        logger.debug("Display reset")

    def __repr__(self):
        return f"PlaceholderDisplay(state={self.state!r}, prompt={self.prompt!r})"

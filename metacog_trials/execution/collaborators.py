"""
Interfaces of the external collaborators a trial consumes.

The response collector and the advisors are implemented outside this
package; these protocols document what the phases call on them. Any method
may be a plain function or a coroutine function.
"""

import inspect
from typing import Any, Dict, Optional, Protocol


class NoResponse:
    """Marker returned by a response collector when no response was given."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_RESPONSE"


NO_RESPONSE = NoResponse()


def is_no_response(response) -> bool:
    """True if a collector result means the participant gave no response."""
    return response is None or response is NO_RESPONSE


class ResponseCollector(Protocol):
    """Supplies the participant's response, optionally bounded by a timeout."""

    def get_response(self, timeout_ms: Optional[int], reset_first: bool = True):
        """Return a mapping of response fields, or NO_RESPONSE on timeout."""
        ...

    def reset(self) -> None:
        ...


class Advisor(Protocol):
    """Supplies advice on a trial and draws it."""

    def to_table(self) -> Dict[str, Any]:
        ...

    def get_advice(self, trial) -> Dict[str, Any]:
        ...

    def draw_advice(self) -> None:
        ...

    def hide_advice(self) -> None:
        ...


async def resolve(result):
    """Await a collaborator result if it is awaitable, otherwise return it."""
    if inspect.isawaitable(result):
        return await result
    return result

"""
Prompt map for trial phases.

Expands the prompt shorthand of a trial configuration into a total mapping
from every phase of a behavior to the content shown during that phase.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Optional

from .errors import ConfigurationError


class PromptMap(Mapping):
    """
    Read-only mapping from phase name to prompt content.

    Every phase of the behavior has an entry, so lookups never need to check
    whether a phase was listed.

    Example:
        prompts = PromptMap.build("Which box had more dots?", ["begin", "end"])
        prompts["end"]  # "Which box had more dots?"
    """

    def __init__(self, entries: Dict[str, str]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def build(
        cls,
        prompt,
        phases: Iterable[str],
        defaults: Optional[Mapping] = None
    ) -> 'PromptMap':
        """
        Build the prompt map for a list of phases.

        Args:
            prompt: None, a single string used for every phase, or a mapping
                    of phase name to content
            phases: Phase names of the behavior
            defaults: Per-phase content that replaces a single-string prompt
                      (ignored for explicit mappings)

        Returns:
            PromptMap covering every phase

        Raises:
            ConfigurationError: If the prompt has an unsupported shape or names
                                an unknown phase
        """
        phases = list(phases)
        defaults = defaults or {}

        if prompt is None:
            return cls({phase: "" for phase in phases})

        if isinstance(prompt, str):
            return cls({phase: defaults.get(phase, prompt) for phase in phases})

        if isinstance(prompt, Mapping):
            unknown = [key for key in prompt if key not in phases]
            if unknown:
                raise ConfigurationError(
                    f"Prompt names unknown phases {unknown}; valid phases are {phases}"
                )
            for key, value in prompt.items():
                if value is not None and not isinstance(value, str):
                    raise ConfigurationError(
                        f"Prompt for phase '{key}' must be a string, got {type(value).__name__}"
                    )
            return cls({phase: prompt.get(phase) or "" for phase in phases})

        raise ConfigurationError(
            f"Prompt must be None, a string or a mapping of phase names, "
            f"got {type(prompt).__name__}"
        )

    def __getitem__(self, phase: str) -> str:
        return self._entries[phase]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"PromptMap({dict(self._entries)!r})"

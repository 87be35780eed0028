"""Environment variables and the last exit status seen by the parser."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

DEFAULT_PATH = "/usr/local/sbin:/usr/local/bin:/usr/sbin:/usr/bin:/sbin:/bin"


@dataclass
class ShellState:
    """Variables visible to expansion, plus the last exit status."""

    variables: dict[str, str] = field(default_factory=dict)
    status: int = 0
    default_path: str = DEFAULT_PATH

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "ShellState":
        """Build a state holding a private copy of ``mapping``."""
        return cls(variables=dict(mapping))

    def lookup(self, key: Optional[str]) -> Optional[str]:
        """Return the value of variable ``key``, or None if it is not set."""
        if key is None:
            return None
        return self.variables.get(key)

    def path_fallback(self, key: Optional[str]) -> Optional[str]:
        """Return the built-in search path for ``PATH``, None for any other key."""
        if key == "PATH":
            return self.default_path
        return None

    def set_status(self, status: int) -> int:
        """Record ``status`` as the last exit status and return it."""
        self.status = status
        return status
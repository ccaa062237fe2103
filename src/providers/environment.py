"""Environment snapshot."""
import os
from types import MappingProxyType
from typing import Iterator, Mapping, Optional


class EnvironmentSnapshot(Mapping[str, str]):
    """Read-only copy of environment variables.

    The registry and the request factory read variables through a snapshot
    instead of ``os.environ`` so that callers can pass a fake environment.
    A snapshot never changes after construction; take a new one to observe
    later changes of the process environment.
    """

    def __init__(self, variables: Optional[Mapping[str, str]] = None) -> None:
        self._variables = MappingProxyType(dict(variables or {}))

    @classmethod
    def from_os(cls) -> "EnvironmentSnapshot":
        """Snapshot the current process environment."""
        return cls(os.environ)

    def __getitem__(self, name: str) -> str:
        return self._variables[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def get_non_blank(self, name: str) -> Optional[str]:
        """Get variable value unless it is unset or whitespace only.

        The returned value is not stripped.

        Args:
            name: Variable name

        Returns:
            Unstripped value, or None
        """
        value = self._variables.get(name)
        if value is None or not value.strip():
            return None
        return value

    def __repr__(self) -> str:
        return f"EnvironmentSnapshot({len(self._variables)} variables)"

"""The shell's environment: an ordered set of variables."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple


def is_valid_key(key: Optional[str]) -> bool:
    """Return True when ``key`` is a valid variable name.

    A valid name is non-empty, does not start with a digit and holds only
    ASCII letters, digits and underscores.
    """
    if not key or (key[0].isascii() and key[0].isdigit()):
        return False
    return all(ch == "_" or (ch.isascii() and ch.isalnum()) for ch in key)


class Environment:
    """Variables in insertion order, keyed by name."""

    def __init__(self, items: Optional[Iterable[Tuple[str, str]]] = None) -> None:
        self._vars: Dict[str, str] = {}
        for key, value in items or ():
            self.set(key, value)

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``KEY=VALUE`` strings.

        The key ends at the first ``=``; the rest is the value.
        """
        env = cls()
        for entry in entries:
            key, sep, value = entry.partition("=")
            if not sep:
                raise ValueError(f"environment entry without '=': {entry!r}")
            env.set(key, value)
        return env

    def get(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or None when it is not set."""
        return self._vars.get(key)

    def exists(self, key: str) -> bool:
        """Return True when ``key`` is set."""
        return self.get(key) is not None

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``; a new key goes at the end."""
        self._vars[key] = value

    def unset(self, key: str) -> bool:
        """Remove ``key``; return whether it was set."""
        return self._vars.pop(key, None) is not None

    def to_list(self) -> List[str]:
        """Return every variable as a ``KEY=VALUE`` string, in order."""
        return [f"{key}={value}" for key, value in self._vars.items()]

    def sorted_entries(self) -> List[str]:
        """Return the ``KEY=VALUE`` strings in ascending order."""
        return sorted(self.to_list())

    def format(self) -> str:
        """Return one ``KEY=VALUE`` line per variable, in order."""
        return "".join(f"{entry}\n" for entry in self.to_list())

    def items(self) -> Iterator[Tuple[str, str]]:
        """Iterate over (key, value) pairs in order."""
        return iter(list(self._vars.items()))

    def __contains__(self, key: object) -> bool:
        return key in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)
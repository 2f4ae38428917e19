"""Shell variables and the state of a running shell."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

SHELL_NAME = "Minichell"


@dataclass
class Variable:
    """One shell variable; ``value`` is None when it is declared but unset."""

    key: str
    value: Optional[str] = None


class Environment:
    """An ordered collection of shell variables.

    Lookups match the first variable whose name begins with the given key.
    """

    def __init__(self, pairs: Iterable[tuple[str, Optional[str]]] = ()) -> None:
        self._vars: list[Variable] = [Variable(key, value) for key, value in pairs]

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build from ``NAME=value`` strings; a name without ``=`` has no value."""
        pairs = []
        for entry in entries:
            key, sep, value = entry.partition("=")
            pairs.append((key, value if sep else None))
        return cls(pairs)

    def find(self, key: str) -> Optional[Variable]:
        """Return the first variable whose name starts with ``key``."""
        if key is None:
            return None
        return next((var for var in self._vars if var.key.startswith(key)), None)

    def get(self, key: str) -> Optional[str]:
        """Value of the variable matched by ``key``, or None."""
        var = self.find(key)
        return None if var is None else var.value

    def change(self, key: str, value: Optional[str]) -> Optional[Variable]:
        """Replace the value of an existing variable; None if there is none."""
        var = self.find(key)
        if var is not None:
            var.value = value
        return var

    def add(self, key: str, value: Optional[str]) -> Variable:
        """Set ``key`` to ``value``, appending a new variable if needed."""
        if key is None:
            raise TypeError("a variable needs a name")
        var = self.change(key, value)
        if var is None:
            var = Variable(key, value)
            self._vars.append(var)
        return var

    def append(self, key: str, value: Optional[str]) -> Variable:
        """Append ``value`` to the variable's value, creating it if missing."""
        if key is None:
            raise TypeError("a variable needs a name")
        var = self.find(key)
        if var is None:
            return self.add(key, value)
        if var.value is not None or value is not None:
            var.value = (var.value or "") + (value or "")
        return var

    def erase(self, key: str) -> None:
        """Remove the variable matched by ``key``, if any."""
        var = self.find(key)
        if var is not None:
            self._vars.remove(var)

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._vars))

    def __len__(self) -> int:
        return len(self._vars)


@dataclass
class Shell:
    """State shared by the read loop and the builtins."""

    env: Environment = field(default_factory=Environment)
    status: int = 0
    finished: bool = False
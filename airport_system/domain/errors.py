"""Typed domain errors for the airport system.

Invalid insertions and unreachable targets are ordinary results (a
``False`` return and an infinite distance). The errors below cover the
conditions a caller cannot express as a value: unknown vertex names,
disconnected graphs under the strict spanning-tree policy and bad
configuration.

All errors inherit from AirportSystemError and can optionally wrap a
root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class AirportSystemError(Exception):
    """Base error for the airport system domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class UnknownVertexError(AirportSystemError):
    """A query referenced a vertex name that is not in the store.

    Attributes:
        vertex_name: The name that could not be resolved
    """

    vertex_name: str = ""


@dataclass
class DisconnectedGraphError(AirportSystemError):
    """Not every vertex is reachable from the spanning-tree root.

    Attributes:
        root: Name of the root vertex
        reached: Number of vertices attached to the tree
        total: Number of vertices in the store
    """

    root: str = ""
    reached: int = 0
    total: int = 0


@dataclass
class ConfigurationError(AirportSystemError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None

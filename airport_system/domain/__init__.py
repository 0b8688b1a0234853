"""Domain layer - Core models and errors.

This module contains the graph models and typed errors used
throughout the package. No external dependencies.
"""

from .errors import (
    AirportSystemError,
    ConfigurationError,
    DisconnectedGraphError,
    UnknownVertexError,
)
from .models import Edge, Journey, Vertex

__all__ = [
    # Models
    "Edge",
    "Journey",
    "Vertex",
    # Errors
    "AirportSystemError",
    "ConfigurationError",
    "DisconnectedGraphError",
    "UnknownVertexError",
]

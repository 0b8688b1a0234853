"""Ports layer - Protocols the algorithms depend on.

Available ports:
- GraphView: read-only access to a built graph
"""

from .graph import GraphView

__all__ = ["GraphView"]

"""Services layer - Application facade.

Available services:
- AirportSystem: builds a network and answers queries about it
"""

from .airport_system import AirportSystem

__all__ = ["AirportSystem"]

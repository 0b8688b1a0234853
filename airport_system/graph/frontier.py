"""Priority frontier of journeys with lazy deletion.

Stale journeys are not removed when their arrival vertex gets visited.
They stay in the heap and are discarded when they reach the top.
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from typing import List, Optional, Set

from ..domain.models import Journey


@dataclass
class JourneyFrontier:
    """Min-heap of journeys keyed by cost, plus the visited handles.

    Attributes:
        origin: Handle of the search source, visited from the start
    """

    origin: int
    _heap: List[Journey] = field(default_factory=list, repr=False)
    _visited: Set[int] = field(default_factory=set, repr=False)

    def __post_init__(self) -> None:
        self._visited.add(self.origin)

    def push(self, journey: Journey) -> None:
        """Queue a journey and mark the vertex it leaves from as visited."""
        self._visited.add(journey.parent)
        heapq.heappush(self._heap, journey)

    def pop_next_unvisited(self) -> Optional[Journey]:
        """Pop the cheapest journey whose arrival has not been visited yet.

        Journeys landing on already visited vertices are discarded. The
        arrival of the returned journey is marked visited.

        Returns:
            The journey, or None once the frontier is exhausted.
        """
        while self._heap:
            journey = heapq.heappop(self._heap)
            if journey.arrival in self._visited:
                continue
            self._visited.add(journey.arrival)
            return journey
        return None

    def is_visited(self, handle: int) -> bool:
        return handle in self._visited

    def __bool__(self) -> bool:
        return bool(self._heap)

"""
Ordered station registry. Position is the fallback order used during fulfillment.
"""

from typing import Dict, Iterator, List, Optional
import logging

from kitchen.station import KitchenStation

logger = logging.getLogger(__name__)


class StationRegistry:
    """Stations in attempt order, with unique names."""

    def __init__(self, stations: Optional[List[KitchenStation]] = None):
        self._stations: List[KitchenStation] = []
        self._by_name: Dict[str, KitchenStation] = {}
        for station in stations or []:
            self.add(station)

    def __len__(self) -> int:
        return len(self._stations)

    def __iter__(self) -> Iterator[KitchenStation]:
        # Snapshot so callers may mutate the registry while walking it
        return iter(list(self._stations))

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def names(self) -> List[str]:
        return [station.name for station in self._stations]

    def add(self, station: KitchenStation) -> bool:
        """Append a station. Rejects duplicates by name."""
        if station is None:
            return False
        if station.name in self._by_name:
            logger.warning(f"Station '{station.name}' already registered")
            return False
        self._stations.append(station)
        self._by_name[station.name] = station
        return True

    def remove(self, name: str) -> bool:
        station = self._by_name.pop(name, None)
        if station is None:
            return False
        self._stations.remove(station)
        return True

    def find(self, name: str) -> Optional[KitchenStation]:
        return self._by_name.get(name)

    def index_of(self, name: str) -> int:
        if name not in self._by_name:
            return -1
        for index, station in enumerate(self._stations):
            if station.name == name:
                return index
        return -1

    def move_to_front(self, name: str) -> bool:
        index = self.index_of(name)
        if index < 0:
            return False
        if index > 0:
            self._stations.insert(0, self._stations.pop(index))
        return True

    def merge(self, name_a: str, name_b: str) -> bool:
        """Fold station B into station A and drop B from the registry."""
        station_a = self.find(name_a)
        station_b = self.find(name_b)
        if station_a is None or station_b is None or station_a is station_b:
            return False

        station_a.absorb(station_b)
        self.remove(name_b)
        logger.info(f"Merged {name_b} into {name_a}")
        return True

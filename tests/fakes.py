"""
In-memory planet stores for unit tests.

They follow the PlanetStore protocol and record every call so tests can assert
that an operation touched no storage at all.
"""

from typing import Any, Dict, List, Mapping, Optional

from app.schemas.planet import PLANET_FIELDS, Planet
from app.services.errors import DuplicateName, StorageFailure
from app.services.planet_store import name_key
from app.services.validator import PlanetValidator


class FakeStore:
    def __init__(self, planets: Optional[List[Mapping[str, Any]]] = None):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.calls: List[str] = []
        self._next_id = 1
        for planet in planets or []:
            self._add(planet)

    def _add(self, planet: Mapping[str, Any]) -> int:
        planet_id = self._next_id
        self._next_id += 1
        self.rows[planet_id] = {field: planet.get(field) for field in PLANET_FIELDS}
        self.rows[planet_id]["name"] = self.rows[planet_id]["name"].strip()
        return planet_id

    def _planet(self, planet_id: int) -> Planet:
        return Planet(id=planet_id, **self.rows[planet_id])

    def list_all(self) -> List[Planet]:
        self.calls.append("list_all")
        return [self._planet(planet_id) for planet_id in self.rows]

    def find_by_id(self, planet_id: int) -> Optional[Planet]:
        self.calls.append("find_by_id")
        return self._planet(planet_id) if planet_id in self.rows else None

    def find_by_name(self, name: str, case_insensitive: bool = True) -> Optional[Planet]:
        self.calls.append("find_by_name")
        wanted = name.strip()
        for planet_id, row in self.rows.items():
            stored = row["name"]
            if stored == wanted or (case_insensitive and name_key(stored) == name_key(wanted)):
                return self._planet(planet_id)
        return None

    def insert(self, planet: Mapping[str, Any]) -> int:
        self.calls.append("insert")
        return self._add(planet)

    def delete_by_id(self, planet_id: int) -> bool:
        self.calls.append("delete_by_id")
        return self.rows.pop(planet_id, None) is not None

    def delete_by_name(self, name: str) -> bool:
        self.calls.append("delete_by_name")
        for planet_id, row in list(self.rows.items()):
            if row["name"] == name:
                del self.rows[planet_id]
                return True
        return False

    @property
    def mutations(self) -> List[str]:
        return [call for call in self.calls if call.startswith(("insert", "delete"))]


class FakeRegistry(FakeStore):
    """Published registry: validates and refuses known names on insert."""

    def __init__(self, planets=None, validator: Optional[PlanetValidator] = None):
        self.validator = validator or PlanetValidator()
        super().__init__(planets)

    def insert(self, planet: Mapping[str, Any]) -> int:
        self.validator.validate(planet).raise_for_status()
        if self.find_by_name(planet["name"]):
            raise DuplicateName(planet["name"])
        return super().insert(planet)


class BrokenStoreMixin:
    """Raise StorageFailure for the listed operations."""

    broken = ()

    def _maybe_fail(self, operation: str):
        if operation in self.broken:
            self.calls.append(f"{operation}!")
            raise StorageFailure(f"{operation} failed")

    def find_by_id(self, planet_id):
        self._maybe_fail("find_by_id")
        return super().find_by_id(planet_id)

    def find_by_name(self, name, case_insensitive=True):
        self._maybe_fail("find_by_name")
        return super().find_by_name(name, case_insensitive)

    def insert(self, planet):
        self._maybe_fail("insert")
        return super().insert(planet)

    def delete_by_id(self, planet_id):
        self._maybe_fail("delete_by_id")
        return super().delete_by_id(planet_id)


def broken(store_cls, *operations):
    """Build a store class whose listed operations raise StorageFailure."""
    return type(f"Broken{store_cls.__name__}", (BrokenStoreMixin, store_cls), {"broken": operations})

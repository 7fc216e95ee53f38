from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.database.models import PlanetRecord, PendingPlanetRecord
from app.schemas.planet import Planet, PLANET_FIELDS
from .errors import DuplicateName, StorageFailure
from .validator import PlanetValidator
from typing import Any, Dict, List, Mapping, Optional, Protocol


def name_key(name: str) -> str:
    """Comparison key for planet names: trimmed and Unicode-casefolded"""
    return name.strip().casefold()


class PlanetStore(Protocol):
    """Storage collaborator consumed by the moderation engine"""

    def list_all(self) -> List[Planet]: ...

    def find_by_id(self, planet_id: int) -> Optional[Planet]: ...

    def find_by_name(self, name: str, case_insensitive: bool = True) -> Optional[Planet]: ...

    def insert(self, planet: Mapping[str, Any]) -> int: ...

    def delete_by_id(self, planet_id: int) -> bool: ...


class SqlPlanetStore:
    """SQLAlchemy-backed planet table; errors surface as StorageFailure"""

    model = None

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, error: SQLAlchemyError):
        self.db.rollback()
        raise StorageFailure(f"Could not {action} {self.model.__tablename__}: {error}") from error

    def list_all(self) -> List[Planet]:
        """Get every planet in the table"""
        try:
            rows = self.db.query(self.model).order_by(self.model.id).all()
        except SQLAlchemyError as e:
            self._fail("list", e)
        return [Planet.model_validate(row) for row in rows]

    def find_by_id(self, planet_id: int) -> Optional[Planet]:
        """Get planet by ID"""
        try:
            row = self.db.query(self.model).filter(self.model.id == planet_id).first()
        except SQLAlchemyError as e:
            self._fail("read", e)
        return Planet.model_validate(row) if row else None

    def find_by_name(self, name: str, case_insensitive: bool = True) -> Optional[Planet]:
        """Get planet by name, ignoring case unless told otherwise"""
        name = name.strip()
        if case_insensitive:
            criterion = self.model.name_key == name_key(name)
        else:
            criterion = self.model.name == name
        try:
            row = self.db.query(self.model).filter(criterion).first()
        except SQLAlchemyError as e:
            self._fail("read", e)
        return Planet.model_validate(row) if row else None

    def insert(self, planet: Mapping[str, Any]) -> int:
        """Insert a planet and return its new id"""
        values: Dict[str, Any] = {field: planet.get(field) for field in PLANET_FIELDS}
        values["name"] = values["name"].strip()
        values["name_key"] = name_key(values["name"])
        record = self.model(**values)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            self._fail("insert into", e)
        return record.id

    def delete_by_id(self, planet_id: int) -> bool:
        """Delete by id; False when nothing matched"""
        try:
            deleted = self.db.query(self.model).filter(self.model.id == planet_id).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("delete from", e)
        return deleted > 0


class PublishedRegistry(SqlPlanetStore):
    """Published planets; inserts validate every field and refuse known names"""

    model = PlanetRecord

    def __init__(self, db: Session, validator: Optional[PlanetValidator] = None):
        super().__init__(db)
        self.validator = validator or PlanetValidator()

    def insert(self, planet: Mapping[str, Any]) -> int:
        self.validator.validate(planet).raise_for_status()
        if self.find_by_name(planet["name"]):
            raise DuplicateName(planet["name"].strip())
        return super().insert(planet)


class PendingStore(SqlPlanetStore):
    """Submissions awaiting moderation"""

    model = PendingPlanetRecord

    def delete_by_name(self, name: str) -> bool:
        """Delete a pending submission by exact name"""
        try:
            deleted = self.db.query(self.model).filter(self.model.name == name).delete()
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("delete from", e)
        return deleted > 0

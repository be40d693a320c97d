"""JSON-file-backed base for all repositories.

Each aggregate type lives in its own file as a JSON array of documents.
An aggregate and everything it owns is one document, so writing a
document is all-or-nothing for that aggregate. Files are replaced
atomically (write to a temp file, then ``os.replace``).

Subclasses supply the document mapping (``_to_raw`` / ``_to_domain``)
and the relation names callers may ``include``.
"""

from __future__ import annotations

import json
import os
import tempfile
from abc import abstractmethod
from pathlib import Path
from typing import Iterable, TypeVar

import structlog

from shopkernel.domain.exceptions import EntityNotFoundError, PersistenceError
from shopkernel.domain.repository.base import Repository
from shopkernel.domain.specification.base import Specification
from shopkernel.infrastructure.persistence.evaluator import SpecificationEvaluator

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class JsonDocumentRepository(Repository[T]):

    entity_name: str = "Entity"
    relations: tuple[str, ...] = ()

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._evaluator = SpecificationEvaluator(self.relations)
        self._ensure_file()

    # --- Mapping (per aggregate) ----------------------------------------------

    @abstractmethod
    def _to_raw(self, entity: T) -> dict:
        """Serialise an aggregate, including its owned children."""

    @abstractmethod
    def _to_domain(self, raw: dict) -> T:
        """Rebuild an aggregate from its document."""

    # --- ReadRepository interface ---------------------------------------------

    def get_by_id(self, entity_id: int) -> T | None:
        for raw in self._load_raw():
            if raw["id"] == entity_id:
                return self._to_domain(raw)
        return None

    def list_matching(self, spec: Specification[T] | None = None) -> list[T]:
        return self._evaluator.evaluate(self._load_all(), spec)

    def count_matching(self, spec: Specification[T] | None = None) -> int:
        return self._evaluator.count(self._load_all(), spec)

    def first_matching(self, spec: Specification[T]) -> T | None:
        matches = self._evaluator.evaluate(self._load_all(), spec)
        return matches[0] if matches else None

    # --- Repository interface -------------------------------------------------

    def add(self, entity: T) -> T:
        documents = self._load_raw()
        raw = self._to_raw(entity)
        raw["id"] = max((d["id"] for d in documents), default=0) + 1
        documents.append(raw)
        self._persist_raw(documents)
        logger.debug("Document added", entity=self.entity_name, id=raw["id"])
        return self._to_domain(raw)

    def update(self, entity: T) -> None:
        documents = self._load_raw()
        entity_id = self._id_of(entity)
        for i, raw in enumerate(documents):
            if raw["id"] == entity_id:
                documents[i] = self._to_raw(entity)
                self._persist_raw(documents)
                return
        raise EntityNotFoundError(f"{self.entity_name} #{entity_id} not found")

    def delete(self, entity: T) -> None:
        self.delete_many([entity])

    def delete_many(self, entities: Iterable[T]) -> None:
        ids = {self._id_of(e) for e in entities}
        if not ids:
            return
        documents = self._load_raw()
        missing = ids - {d["id"] for d in documents}
        if missing:
            raise EntityNotFoundError(
                f"{self.entity_name} #{min(missing)} not found"
            )
        self._persist_raw([d for d in documents if d["id"] not in ids])

    # --- Helpers --------------------------------------------------------------

    def _id_of(self, entity: T) -> int:
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise EntityNotFoundError(f"{self.entity_name} has not been added yet")
        return entity_id

    def _load_all(self) -> list[T]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self._file_path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Corrupt data file {self._file_path}: {exc}") from exc

    def _persist_raw(self, documents: list[dict]) -> None:
        payload = json.dumps(documents, indent=2) + "\n"
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}."
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self._file_path}: {exc}") from exc

"""
Service layer for contractor records.

``ContractorStore`` owns the authoritative, ordered list of
contractors.  It performs create/update/delete, keeps the positional
``serial`` numbers dense (``serial == index + 1`` in storage order) and
writes the complete list back to its slot storage after every
mutation.  When the slot has never been written, the store starts from
the seed dataset and persists it straight away.

Persistence is a collaborator passed to the constructor (any object
with ``load()`` and ``save(payload)``), which keeps the store easy to
exercise against ``MemorySlotStorage`` in tests.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from typing import Dict, List, Optional

from pydantic import ValidationError

from contractor_registry.app.core.exceptions import (
    ContractorNotFoundError,
    ContractorValidationError,
    StorageError,
)
from contractor_registry.app.core.config import settings
from contractor_registry.app.core.storage import SlotStorage, build_storage
from contractor_registry.app.schemas.contractor import ContractorInput, ContractorRecord
from contractor_registry.app.services.seed_data import seed_contractors

CONTACT_NUMBER_PATTERN = re.compile(r"^\+?[\d\s\-()]+$")


def validate_contractor_input(data: ContractorInput) -> Dict[str, str]:
    """Return a mapping of field name to error message; empty when valid."""
    errors: Dict[str, str] = {}
    if not data.name.strip():
        errors["name"] = "Name is required"
    contact = data.contact_number.strip()
    if not contact:
        errors["contact_number"] = "Contact number is required"
    elif not CONTACT_NUMBER_PATTERN.match(contact):
        errors["contact_number"] = "Please enter a valid contact number"
    return errors


def renumber(records: List[ContractorRecord]) -> List[ContractorRecord]:
    """Return ``records`` with ``serial`` reset to ``index + 1``, order preserved."""
    return [record.model_copy(update={"serial": index}) for index, record in enumerate(records, start=1)]


class ContractorStore:
    """In-memory contractor list with write-through persistence."""

    def __init__(self, storage: SlotStorage) -> None:
        self.storage = storage
        self._records: Optional[List[ContractorRecord]] = None
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Loading and persistence
    # ------------------------------------------------------------------
    def load(self) -> List[ContractorRecord]:
        """Read the contractor list from storage, seeding it on first use.

        Persisted data is returned exactly as stored.  Raises
        ``StorageError`` when the slot holds something that is not a
        JSON list of contractor records.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            payload = self.storage.load()
            if payload is None:
                records = seed_contractors()
                logger.info("No stored contractors under %r; seeding %d records", self.storage.key, len(records))
                self._records = records
                self._persist()
            else:
                self._records = self._decode(payload)
            return list(self._records)

    def records(self) -> List[ContractorRecord]:
        """Return the current contractor list, loading it on first access."""
        with self._lock:
            if self._records is None:
                return self.load()
            return list(self._records)

    def _decode(self, payload: str) -> List[ContractorRecord]:
        try:
            raw = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Stored contractors under {self.storage.key!r} are not valid JSON") from exc
        if not isinstance(raw, list):
            raise StorageError(f"Stored contractors under {self.storage.key!r} must be a JSON array")
        try:
            return [ContractorRecord.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise StorageError(f"Stored contractors under {self.storage.key!r} are malformed: {exc}") from exc

    def _persist(self) -> None:
        """Write the whole list to storage.

        A failed write is logged and otherwise ignored; the in-memory
        list remains the source of truth until the next successful save.
        """
        payload = json.dumps(
            [record.model_dump(by_alias=True) for record in self._records or []],
            ensure_ascii=False,
        )
        try:
            self.storage.save(payload)
        except Exception:
            logging.getLogger(__name__).exception(
                "Failed to persist %d contractors under %r", len(self._records or []), self.storage.key
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, contractor_id: int) -> ContractorRecord:
        """Return the contractor with ``contractor_id`` or raise ``ContractorNotFoundError``."""
        for record in self.records():
            if record.id == contractor_id:
                return record
        raise ContractorNotFoundError(contractor_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, data: ContractorInput) -> List[ContractorRecord]:
        """Validate and append a new contractor, returning the updated list."""
        logger = logging.getLogger(__name__)
        errors = validate_contractor_input(data)
        if errors:
            raise ContractorValidationError(errors)
        with self._lock:
            current = self.records()
            new_id = max((record.id for record in current), default=0) + 1
            record = ContractorRecord(
                id=new_id,
                serial=len(current) + 1,
                name=data.name.strip(),
                contact_number=data.contact_number.strip(),
                address=data.address.strip(),
                remarks=data.remarks.strip(),
            )
            self._records = renumber(current + [record])
            self._persist()
            logger.info("Added contractor %s (%s)", new_id, record.name)
            return list(self._records)

    def update(self, contractor_id: int, data: ContractorInput) -> List[ContractorRecord]:
        """Replace the content fields of an existing contractor.

        ``id`` and ``serial`` are left untouched.  Raises
        ``ContractorValidationError`` for invalid input and
        ``ContractorNotFoundError`` when the id is not live.
        """
        logger = logging.getLogger(__name__)
        errors = validate_contractor_input(data)
        if errors:
            raise ContractorValidationError(errors)
        with self._lock:
            current = self.records()
            for index, record in enumerate(current):
                if record.id == contractor_id:
                    break
            else:
                raise ContractorNotFoundError(contractor_id)
            current[index] = record.model_copy(
                update={
                    "name": data.name.strip(),
                    "contact_number": data.contact_number.strip(),
                    "address": data.address.strip(),
                    "remarks": data.remarks.strip(),
                }
            )
            self._records = current
            self._persist()
            logger.info("Updated contractor %s", contractor_id)
            return list(self._records)

    def remove(self, contractor_id: int) -> List[ContractorRecord]:
        """Delete a contractor if present and renumber the rest.

        Removing an id that does not exist is not an error.
        """
        logger = logging.getLogger(__name__)
        with self._lock:
            current = self.records()
            remaining = [record for record in current if record.id != contractor_id]
            if len(remaining) == len(current):
                logger.debug("Delete of unknown contractor %s ignored", contractor_id)
            else:
                logger.info("Deleted contractor %s", contractor_id)
            self._records = renumber(remaining)
            self._persist()
            return list(self._records)

    def reset(self) -> List[ContractorRecord]:
        """Replace the whole list with the seed dataset."""
        with self._lock:
            self._records = seed_contractors()
            self._persist()
            logging.getLogger(__name__).info("Contractor list reset to %d seed records", len(self._records))
            return list(self._records)


_store: Optional[ContractorStore] = None


def get_contractor_store() -> ContractorStore:
    """FastAPI dependency returning the process-wide store.

    The store is built from ``settings`` on first use.  Tests swap it
    out through ``app.dependency_overrides``.
    """
    global _store
    if _store is None:
        _store = ContractorStore(build_storage(settings))
    return _store

"""
Domain exceptions raised by the contractor store.

The API layer translates these into HTTP errors; other callers (the
test-suite, scripts) handle them directly.
"""

from typing import Dict


class ContractorValidationError(ValueError):
    """Submitted contractor data failed validation.

    ``errors`` maps each offending field name to a human readable
    message, so a form can show the message next to the field.
    """

    def __init__(self, errors: Dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in self.errors.items()))


class ContractorNotFoundError(LookupError):
    """No live contractor has the requested id."""

    def __init__(self, contractor_id: int) -> None:
        self.contractor_id = contractor_id
        super().__init__(f"Contractor {contractor_id} not found")


class StorageError(RuntimeError):
    """Persisted contractor data could not be decoded."""

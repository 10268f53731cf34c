"""
Pydantic schemas for contractor records.

A contractor record carries a permanent ``id``, a positional ``serial``
(1-based rank in storage order) and four text fields.  The persisted
and wire representation keeps the field names used by the original
browser application (``sNo`` and ``contactNo``), so both aliases and
the Python attribute names are accepted on input.
"""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class SortField(str, Enum):
    """Columns the contractor listing can be sorted by."""

    serial = "serial"
    name = "name"
    contact_number = "contact_number"
    address = "address"
    remarks = "remarks"

    @classmethod
    def _missing_(cls, value):
        # Accept the column names used by the browser application.
        legacy = {"sno": cls.serial, "contactno": cls.contact_number}
        if isinstance(value, str):
            return legacy.get(value.lower())
        return None


class SortDirection(str, Enum):
    asc = "asc"
    desc = "desc"


class ContractorInput(BaseModel):
    """Content fields submitted when adding or editing a contractor.

    Validation happens in the store so that every offending field can
    be reported at once; the model itself only enforces types.
    """

    name: str = Field("", examples=["Farooq Ahmed"])
    contact_number: str = Field("", alias="contactNo", examples=["+880 17 1128 4718"])
    address: str = Field("", examples=["Cantonment"])
    remarks: str = Field("", examples=["Piling work"])

    model_config = {
        "populate_by_name": True,
    }


class ContractorRecord(BaseModel):
    """A stored contractor."""

    id: int
    serial: int = Field(..., alias="sNo")
    name: str
    contact_number: str = Field(..., alias="contactNo")
    address: str = ""
    remarks: str = ""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class ContractorStats(BaseModel):
    """Summary counters shown above the contractor table."""

    total: int
    displayed: int
    with_remarks: int
    remarks_values: List[str] = []


class RemarksOption(BaseModel):
    """One entry of the remarks category filter selector."""

    value: str
    label: str


class ContractorListing(BaseModel):
    """A projected (searched, filtered and sorted) view of the registry."""

    items: List[ContractorRecord]
    stats: ContractorStats
    sort_field: SortField
    sort_direction: SortDirection

"""
Derived views over the contractor list.

Everything here is a pure function of the records passed in: search,
remarks filtering, sorting and the summary counters shown above the
table.  Nothing is cached and the input list is never modified, so the
functions can be called on every request with different parameters.
"""

from __future__ import annotations

import locale
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from contractor_registry.app.schemas.contractor import (
    ContractorRecord,
    ContractorStats,
    RemarksOption,
    SortDirection,
    SortField,
)

FILTER_ALL = "all"
FILTER_EMPTY = "empty"
OPTION_LABEL_LENGTH = 30


def matches_search(record: ContractorRecord, text: str) -> bool:
    """True if any text field contains ``text`` (case-insensitive)."""
    if not text:
        return True
    needle = text.lower()
    return any(
        needle in value.lower()
        for value in (record.name, record.contact_number, record.address, record.remarks)
    )


def matches_remarks_filter(record: ContractorRecord, value: str) -> bool:
    """Apply the remarks category filter.

    ``all`` keeps everything and ``empty`` keeps records without
    remarks.  Any other value is an unanchored, case-insensitive
    substring match, so a value contained in a longer remark also
    selects that longer remark.
    """
    if not value or value == FILTER_ALL:
        return True
    if value == FILTER_EMPTY:
        return not record.remarks.strip()
    return value.lower() in record.remarks.lower()


def _sort_key(field: SortField):
    if field is SortField.serial:
        return lambda record: record.serial
    attr = field.value

    def text_key(record):
        value = getattr(record, attr)
        # Letter case only breaks ties, lowercase first.
        return locale.strxfrm(value.casefold()), locale.strxfrm(value.swapcase())

    return text_key


def sort_contractors(
    records: Iterable[ContractorRecord],
    field: SortField = SortField.serial,
    direction: SortDirection = SortDirection.asc,
) -> List[ContractorRecord]:
    """Return ``records`` sorted by ``field``; equal keys keep their input order."""
    field = SortField(field)
    direction = SortDirection(direction)
    return sorted(records, key=_sort_key(field), reverse=direction is SortDirection.desc)


def project_contractors(
    records: Sequence[ContractorRecord],
    search: str = "",
    remarks_filter: str = FILTER_ALL,
    sort_field: SortField = SortField.serial,
    sort_direction: SortDirection = SortDirection.asc,
) -> List[ContractorRecord]:
    """Search, filter and sort ``records`` for display."""
    visible = [
        record
        for record in records
        if matches_search(record, search) and matches_remarks_filter(record, remarks_filter)
    ]
    return sort_contractors(visible, sort_field, sort_direction)


@dataclass(frozen=True)
class SortState:
    """Current sort column and direction of the table."""

    field: SortField = SortField.serial
    direction: SortDirection = SortDirection.asc

    def toggle(self, field: SortField) -> "SortState":
        """Clicking the active column flips direction; another column starts ascending."""
        field = SortField(field)
        if field is self.field:
            flipped = SortDirection.desc if self.direction is SortDirection.asc else SortDirection.asc
            return SortState(field, flipped)
        return SortState(field, SortDirection.asc)


def distinct_remarks(records: Iterable[ContractorRecord]) -> List[str]:
    """Non-empty remarks values in order of first appearance."""
    seen: List[str] = []
    for record in records:
        if record.remarks.strip() and record.remarks not in seen:
            seen.append(record.remarks)
    return seen


def contractor_stats(records: Sequence[ContractorRecord], displayed: Sequence[ContractorRecord]) -> ContractorStats:
    return ContractorStats(
        total=len(records),
        displayed=len(displayed),
        with_remarks=sum(1 for record in records if record.remarks.strip()),
        remarks_values=distinct_remarks(records),
    )


def remarks_filter_options(records: Iterable[ContractorRecord]) -> List[RemarksOption]:
    """Entries for the remarks filter selector.

    Long remarks are shortened to their first 30 characters in the label;
    the value always carries the full text.
    """
    options = [
        RemarksOption(value=FILTER_ALL, label="All Contractors"),
        RemarksOption(value=FILTER_EMPTY, label="No Remarks"),
    ]
    for remark in distinct_remarks(records):
        options.append(RemarksOption(value=remark, label=f"{remark[:OPTION_LABEL_LENGTH]}..."))
    return options

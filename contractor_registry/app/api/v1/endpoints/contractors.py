"""
Contractor endpoints for API v1.

These routes expose the contractor registry: a projected listing with
search, remarks filter and sorting, summary counters, the remarks
filter options, CSV export and the create/update/delete operations.
Mutating routes answer with the complete, renumbered contractor list
so that clients can redraw their table without a second request.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from contractor_registry.app.core.exceptions import ContractorNotFoundError, ContractorValidationError
from contractor_registry.app.schemas.contractor import (
    ContractorInput,
    ContractorListing,
    ContractorRecord,
    ContractorStats,
    RemarksOption,
    SortDirection,
    SortField,
)
from contractor_registry.app.services.contractor_service import ContractorStore, get_contractor_store
from contractor_registry.app.services.export_service import CSV_MEDIA_TYPE, export_filename, render_contractors_csv
from contractor_registry.app.services.view_service import (
    FILTER_ALL,
    contractor_stats,
    project_contractors,
    remarks_filter_options,
)

router = APIRouter()


def _sort_field(sort_by: str) -> SortField:
    try:
        return SortField(sort_by)
    except ValueError as e:
        allowed = ", ".join(field.value for field in SortField)
        raise HTTPException(
            status_code=422,
            detail=f"Unknown sort field {sort_by!r}; expected one of: {allowed}",
        ) from e


def _validation_failed(e: ContractorValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"errors": e.errors})


@router.get("/", response_model=ContractorListing)
def list_contractors(
    search: str = Query("", description="Case-insensitive text matched against every field"),
    remarks: str = Query(FILTER_ALL, description="`all`, `empty` or a remarks value to filter by"),
    sort_by: str = Query("serial"),
    order: SortDirection = Query(SortDirection.asc),
    store: ContractorStore = Depends(get_contractor_store),
) -> ContractorListing:
    """Return the contractors to display together with the summary counters.

    - **search**: matched as a substring of name, contact number, address or remarks.
    - **remarks**: `all` (default), `empty` for contractors without remarks, or any remarks text.
    - **sort_by**: `serial`, `name`, `contact_number`, `address` or `remarks`.
    - **order**: `asc` or `desc`.
    """
    field = _sort_field(sort_by)
    records = store.records()
    items = project_contractors(records, search, remarks, field, order)
    return ContractorListing(
        items=items,
        stats=contractor_stats(records, items),
        sort_field=field,
        sort_direction=order,
    )


@router.get("/stats", response_model=ContractorStats)
def get_stats(
    search: str = Query(""),
    remarks: str = Query(FILTER_ALL),
    store: ContractorStore = Depends(get_contractor_store),
) -> ContractorStats:
    """Return total, displayed and with-remarks counts for the given search/filter."""
    records = store.records()
    return contractor_stats(records, project_contractors(records, search, remarks))


@router.get("/remarks-options", response_model=List[RemarksOption])
def list_remarks_options(store: ContractorStore = Depends(get_contractor_store)) -> List[RemarksOption]:
    """Return the entries for the remarks filter selector."""
    return remarks_filter_options(store.records())


@router.get("/export")
def export_contractors(
    search: str = Query(""),
    remarks: str = Query(FILTER_ALL),
    sort_by: str = Query("serial"),
    order: SortDirection = Query(SortDirection.asc),
    store: ContractorStore = Depends(get_contractor_store),
) -> Response:
    """Download the currently displayed contractors as CSV."""
    items = project_contractors(store.records(), search, remarks, _sort_field(sort_by), order)
    return Response(
        content=render_contractors_csv(items),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )


@router.post("/reset", response_model=List[ContractorRecord])
def reset_contractors(store: ContractorStore = Depends(get_contractor_store)) -> List[ContractorRecord]:
    """Replace the registry with the default contractor list."""
    return store.reset()


@router.get("/{contractor_id}", response_model=ContractorRecord)
def get_contractor(contractor_id: int, store: ContractorStore = Depends(get_contractor_store)) -> ContractorRecord:
    """Retrieve a single contractor.  Returns 404 if it does not exist."""
    try:
        return store.get(contractor_id)
    except ContractorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=List[ContractorRecord], status_code=status.HTTP_201_CREATED)
def create_contractor(
    contractor_in: ContractorInput,
    store: ContractorStore = Depends(get_contractor_store),
) -> List[ContractorRecord]:
    """Add a contractor.

    Invalid input is rejected with 422 and a ``{"errors": {field: message}}``
    detail; nothing is stored in that case.
    """
    try:
        return store.add(contractor_in)
    except ContractorValidationError as e:
        raise _validation_failed(e) from e


@router.put("/{contractor_id}", response_model=List[ContractorRecord])
def update_contractor(
    contractor_id: int,
    contractor_in: ContractorInput,
    store: ContractorStore = Depends(get_contractor_store),
) -> List[ContractorRecord]:
    """Replace the name, contact number, address and remarks of a contractor."""
    try:
        return store.update(contractor_id, contractor_in)
    except ContractorValidationError as e:
        raise _validation_failed(e) from e
    except ContractorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{contractor_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contractor(contractor_id: int, store: ContractorStore = Depends(get_contractor_store)) -> None:
    """Delete a contractor.  Deleting an unknown id succeeds without changes."""
    store.remove(contractor_id)
    return None

"""
CSV export of the displayed contractor list.

The output mirrors the spreadsheet download of the browser version:
the serial number is written bare and every text field is wrapped in
double quotes as-is.  Embedded quotes are not escaped, so a value
containing ``"`` produces a file that strict CSV readers reject.
"""

from datetime import date
from typing import Iterable, Optional

from contractor_registry.app.schemas.contractor import ContractorRecord

CSV_HEADER = "Serial No,Name,Contact No,Address,Remarks"
CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


def _quoted(value: str) -> str:
    return f'"{value}"'


def render_contractor_row(record: ContractorRecord) -> str:
    return ",".join(
        [
            str(record.serial),
            _quoted(record.name),
            _quoted(record.contact_number),
            _quoted(record.address),
            _quoted(record.remarks),
        ]
    )


def render_contractors_csv(records: Iterable[ContractorRecord]) -> str:
    """Return the CSV document for ``records`` (rows separated by ``\\n``)."""
    return "\n".join([CSV_HEADER, *(render_contractor_row(record) for record in records)])


def export_filename(today: Optional[date] = None) -> str:
    """File name offered for download, e.g. ``contractors_2024-05-01.csv``."""
    today = today or date.today()
    return f"contractors_{today.isoformat()}.csv"

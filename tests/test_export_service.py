from datetime import date

from contractor_registry.app.schemas.contractor import ContractorRecord
from contractor_registry.app.services.export_service import (
    CSV_HEADER,
    export_filename,
    render_contractors_csv,
)
from contractor_registry.app.services.seed_data import seed_contractors


def test_single_record_fields_are_quoted_verbatim():
    record = ContractorRecord(id=1, serial=1, name="A, B", contact_number="123", address="", remarks="")

    assert render_contractors_csv([record]) == 'Serial No,Name,Contact No,Address,Remarks\n1,"A, B","123","",""'


def test_embedded_quotes_are_not_escaped():
    record = ContractorRecord(id=4, serial=2, name='Eng "Hanif"', contact_number="1", address="", remarks="")

    assert render_contractors_csv([record]).splitlines()[1] == '2,"Eng "Hanif"","1","",""'


def test_empty_view_exports_header_only():
    assert render_contractors_csv([]) == CSV_HEADER


def test_rows_follow_given_order():
    records = list(reversed(seed_contractors()))[:2]

    lines = render_contractors_csv(records).split("\n")

    assert lines[1] == '24,"Premier Construction","+880 19 7788 9900","Bailey Road","Premium quality work"'
    assert lines[2].startswith('23,"Smart Solutions"')


def test_export_filename_uses_iso_date():
    assert export_filename(date(2024, 3, 7)) == "contractors_2024-03-07.csv"
    assert export_filename() == f"contractors_{date.today().isoformat()}.csv"

import json

import requests

from contractor_registry_client import ContractorRegistryAPI


class _FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        if payload is not None:
            self.text = json.dumps(payload)
        else:
            self.text = text or ""
        self.content = self.text.encode("utf-8")

    def json(self):
        return json.loads(self.text)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class _FakeSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc is not None:
            raise self.exc
        return self.response


def _client(session, **kwargs):
    return ContractorRegistryAPI(base_url="http://registry.local/", session=session, **kwargs)


def test_list_contractors_sends_view_parameters():
    session = _FakeSession(_FakeResponse(payload={"items": [], "stats": {}}))

    data, error = _client(session).list_contractors(search="ahmed", remarks="empty", sort_by="name", order="desc")

    assert error is None
    assert data == {"items": [], "stats": {}}
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://registry.local/api/v1/contractors/"
    assert call["params"] == {"search": "ahmed", "remarks": "empty", "sort_by": "name", "order": "desc"}


def test_add_contractor_posts_wire_field_names():
    session = _FakeSession(_FakeResponse(201, payload=[{"id": 1}]))

    data, error = _client(session, api_key="secret").add_contractor("Karim", "+880 1", remarks="tiles")

    assert (data, error) == ([{"id": 1}], None)
    call = session.calls[0]
    assert call["json"] == {"name": "Karim", "contactNo": "+880 1", "address": "", "remarks": "tiles"}
    assert call["headers"] == {"Authorization": "Bearer secret"}


def test_validation_errors_are_surfaced():
    detail = {"detail": {"errors": {"name": "Name is required"}}}
    session = _FakeSession(_FakeResponse(422, payload=detail))

    data, error = _client(session).add_contractor("", "1")

    assert data == []
    assert error["status_code"] == 422
    assert error["errors"] == {"name": "Name is required"}
    assert error["message"] == "Name is required"


def test_not_found_uses_detail_message():
    session = _FakeSession(_FakeResponse(404, payload={"detail": "Contractor 7 not found"}))

    data, error = _client(session).get_contractor(7)

    assert data is None
    assert error == {"status_code": 404, "message": "Contractor 7 not found"}


def test_delete_with_empty_body_succeeds():
    session = _FakeSession(_FakeResponse(204))

    ok, error = _client(session).delete_contractor(3)

    assert ok is True
    assert error is None
    assert session.calls[0]["method"] == "DELETE"


def test_export_csv_returns_text():
    csv_text = 'Serial No,Name,Contact No,Address,Remarks\n1,"A","1","",""'
    session = _FakeSession(_FakeResponse(text=csv_text))

    data, error = _client(session).export_csv(remarks="empty")

    assert (data, error) == (csv_text, None)
    assert session.calls[0]["url"].endswith("/api/v1/contractors/export")


def test_connection_errors_are_reported():
    session = _FakeSession(exc=requests.ConnectionError("refused"))

    data, error = _client(session).health()

    assert data is None
    assert error == {"status_code": None, "message": "refused"}

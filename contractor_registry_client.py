"""Contractor Registry API client.

This module defines a small client wrapper around the REST API served
by ``contractor_registry.app.main``.  The client uses the ``requests``
library internally to make HTTP calls and exposes high‑level methods
for the operations a front end needs:

* :meth:`list_contractors` – the searched, filtered and sorted listing.
* :meth:`get_contractor` – fetch a single contractor by its identifier.
* :meth:`add_contractor` / :meth:`update_contractor` /
  :meth:`delete_contractor` – mutate the registry.
* :meth:`stats` and :meth:`remarks_options` – summary counters and
  filter selector entries.
* :meth:`export_csv` – the CSV document for the current view.

Every method returns a tuple ``(data, error)``.  ``error`` is ``None``
on success, otherwise a dictionary with ``status_code`` and
``message`` keys (and ``errors`` for rejected contractor input).

The client supports optional authentication via an API key which will
be sent in the ``Authorization`` header, for deployments that put the
service behind an authenticating proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class ContractorRegistryAPI:
    """Client for interacting with the contractor registry API."""

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` will be
                included in all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        json_body: Any | None = None,
        expect_json: bool = True,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the versioned API prefix (e.g. ``/contractors/``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
            expect_json: Decode the body as JSON; otherwise return it as text.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if not response.content:
                return None, None
            if expect_json:
                return response.json(), None
            return response.text, None
        except requests.HTTPError as exc:
            return None, self._describe_http_error(exc)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _describe_http_error(exc: requests.HTTPError) -> Error:
        response = exc.response
        status = response.status_code if response is not None else None
        error: Error = {"status_code": status, "message": ""}
        if response is not None:
            try:
                payload = response.json()
            except ValueError:
                payload = None
            detail = payload.get("detail") if isinstance(payload, dict) else None
            if isinstance(detail, dict) and "errors" in detail:
                error["errors"] = detail["errors"]
                error["message"] = "; ".join(detail["errors"].values())
            elif detail:
                error["message"] = detail if isinstance(detail, str) else str(detail)
            else:
                error["message"] = response.text
        if not error["message"]:
            error["message"] = str(exc)
        logger.error("API request failed (%s): %s", status, error["message"])
        return error

    @staticmethod
    def _view_params(
        search: str, remarks: str, sort_by: Optional[str] = None, order: Optional[str] = None
    ) -> Dict[str, str]:
        params = {"search": search, "remarks": remarks}
        if sort_by:
            params["sort_by"] = sort_by
        if order:
            params["order"] = order
        return params

    # ------------------------------------------------------------------
    # Contractor operations
    # ------------------------------------------------------------------
    def list_contractors(
        self,
        search: str = "",
        remarks: str = "all",
        sort_by: str = "serial",
        order: str = "asc",
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Return the listing (``items``, ``stats``, ``sort_field``, ``sort_direction``)."""
        return self._request("GET", "/contractors/", params=self._view_params(search, remarks, sort_by, order))

    def get_contractor(self, contractor_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/contractors/{contractor_id}")

    def add_contractor(
        self, name: str, contact_number: str, address: str = "", remarks: str = ""
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Create a contractor and return the full, renumbered list."""
        body = {"name": name, "contactNo": contact_number, "address": address, "remarks": remarks}
        data, error = self._request("POST", "/contractors/", json_body=body)
        return data or [], error

    def update_contractor(
        self, contractor_id: int, name: str, contact_number: str, address: str = "", remarks: str = ""
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        body = {"name": name, "contactNo": contact_number, "address": address, "remarks": remarks}
        data, error = self._request("PUT", f"/contractors/{contractor_id}", json_body=body)
        return data or [], error

    def delete_contractor(self, contractor_id: int) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/contractors/{contractor_id}")
        return error is None, error

    def stats(self, search: str = "", remarks: str = "all") -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/contractors/stats", params=self._view_params(search, remarks))

    def remarks_options(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", "/contractors/remarks-options")
        return data or [], error

    def export_csv(
        self,
        search: str = "",
        remarks: str = "all",
        sort_by: str = "serial",
        order: str = "asc",
    ) -> Tuple[Optional[str], Optional[Error]]:
        """Return the CSV document for the given view as text."""
        return self._request(
            "GET",
            "/contractors/export",
            params=self._view_params(search, remarks, sort_by, order),
            expect_json=False,
        )

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", "/info/health")

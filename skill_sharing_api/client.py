"""Skill Sharing API client.

A thin wrapper around the user endpoints for scripts and other
services:

* :meth:`SkillSharingAPI.get_user` – fetch a user by identifier.
* :meth:`SkillSharingAPI.create_user` – register a user (idempotent).

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]


class SkillSharingAPI:
    """Client for the user endpoints of the Skill Sharing API."""

    USERS_PATH = "/api/users"

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request and unpack the JSON answer."""
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None and exc.response.content:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def get_user(self, user_id: str) -> Result:
        """Retrieve a user by ID.

        Returns:
            A tuple ``(user, error)``; ``user`` holds ``id``, ``name``
            and ``email``.  An unknown user gives a 404 error.
        """
        return self._request("GET", f"{self.USERS_PATH}/{quote(str(user_id), safe='')}")

    def create_user(self, payload: Dict[str, Any]) -> Result:
        """Create a user.

        Args:
            payload: ``id``, ``name`` and ``email`` of the new user.
        Returns:
            A tuple ``(body, error)``.  Creating an existing user is
            not an error: ``body`` is ``{"message": "User already exists"}``.
        """
        return self._request("POST", self.USERS_PATH, json_body=payload)

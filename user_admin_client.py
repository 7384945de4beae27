"""User Admin API client.

A thin wrapper around the ``/api/users`` REST endpoints built on the
``requests`` library.  Every method returns a tuple ``(data, error)``:

* on success ``data`` holds the ``data`` field of the response
  envelope and ``error`` is ``None``;
* on failure ``data`` is empty and ``error`` is a dictionary with keys
  ``status_code`` and ``message``.  ``status_code`` is ``None`` for
  connection errors.

The client exposes:

* :meth:`list_users` – return all users.
* :meth:`get_user` – fetch a single user by its identifier.
* :meth:`create_user` – create a user.
* :meth:`update_user` – replace a user's name, email and role.
* :meth:`delete_user` – delete a user.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserAdminAPI:
    """Client for the users resource of the User Admin API."""

    def __init__(
        self,
        *,
        base_url: str,
        api_prefix: str = "/api",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:8080``.
            api_prefix: Mount point of the API on that server.
            timeout: Per-request timeout in seconds.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/") + "/" + api_prefix.strip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and unwrap the response envelope.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
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
            if not response.content:
                return None, None
            body = response.json()
            if isinstance(body, dict) and "success" in body:
                return body.get("data"), None
            return body, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
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

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``. ``users`` is empty on failure.
        """
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data or [], None

    def get_user(self, user_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/users/{user_id}")

    def create_user(
        self, name: str, email: str, role: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user.  Without ``role`` the user is stored with a null role."""
        return self._request("POST", "/users", json_body=self._payload(name, email, role))

    def update_user(
        self, user_id: int, name: str, email: str, role: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace name, email and role of a user.  Omitting ``role`` clears it."""
        return self._request("PUT", f"/users/{user_id}", json_body=self._payload(name, email, role))

    def delete_user(self, user_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/users/{user_id}")
        return error is None, error

    @staticmethod
    def _payload(name: str, email: str, role: Optional[str]) -> Dict[str, Any]:
        body: Dict[str, Any] = {"name": name, "email": email}
        if role is not None:
            body["role"] = role
        return body

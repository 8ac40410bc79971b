"""Ledger API client.

A thin wrapper around the Ledger API's HTTP surface, built on the
``requests`` library.  It is meant for scripts and front ends that talk
to a running server:

* :meth:`LedgerAPI.register` – create an account.
* :meth:`LedgerAPI.login` – open a session and remember its token.
* :meth:`LedgerAPI.create_transaction` – record a deposit or withdrawal.
* :meth:`LedgerAPI.list_transactions` – fetch the history.
* :meth:`LedgerAPI.logout` – close the session and forget the token.

Every method returns a tuple ``(data, error)``.  On success ``error`` is
``None``; on failure ``data`` is ``None`` (or empty) and ``error`` is a
dictionary with the keys ``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class LedgerAPI:
    """Client for a Ledger API server.

    The client keeps the session token returned by :meth:`login` and
    sends it as ``Authorization: Bearer <token>`` on protected calls.
    """

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            token: Optional token of an already open session.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        json_body: Any | None = None,
        authenticated: bool = False,
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/login``).
            json_body: JSON body to send with the request.
            authenticated: Whether to send the stored session token.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if authenticated:
            if not self.token:
                return None, {"status_code": None, "message": "Not logged in"}
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("detail", "")
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
    # Accounts
    # ------------------------------------------------------------------
    def register(
        self, name: str, email: str, password: str, password_confirmation: Optional[str] = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an account.  The confirmation defaults to ``password``."""
        payload = {
            "name": name,
            "email": email,
            "password": password,
            "password_confirmation": password if password_confirmation is None else password_confirmation,
        }
        return self._request("POST", "/register", json_body=payload)

    def login(self, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Open a session.  On success the token is kept for later calls."""
        data, error = self._request("POST", "/login", json_body={"email": email, "password": password})
        if data and data.get("token"):
            self.token = data["token"]
        return data, error

    def logout(self) -> Tuple[bool, Optional[Error]]:
        """Close the current session and forget its token."""
        _, error = self._request("DELETE", "/logout", authenticated=True)
        if error:
            return False, error
        self.token = None
        return True, None

    # ------------------------------------------------------------------
    # Ledger
    # ------------------------------------------------------------------
    def create_transaction(
        self, kind: str, amount: float, description: str
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Record a ``deposit`` or ``withdrawal``."""
        return self._request(
            "POST",
            f"/transactions/{kind}",
            json_body={"amount": amount, "description": description},
            authenticated=True,
        )

    def list_transactions(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Return the transactions of the logged in user."""
        data, error = self._request("GET", "/transactions", authenticated=True)
        if error or not isinstance(data, dict):
            return [], error
        return data.get("transactions", []), None

    def balance(self) -> Tuple[Optional[float], Optional[Error]]:
        """Sum of deposits minus withdrawals, computed from the history."""
        transactions, error = self.list_transactions()
        if error:
            return None, error
        total = 0.0
        for item in transactions:
            amount = float(item.get("amount", 0))
            total += amount if item.get("kind") == "deposit" else -amount
        return total, None

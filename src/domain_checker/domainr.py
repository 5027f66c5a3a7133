"""Domainr (RapidAPI) status client."""

from __future__ import annotations

import logging
from typing import Any

from requests import Session
from requests.adapters import HTTPAdapter
from requests.exceptions import RequestException

from .errors import ProviderError
from .models import Availability, AvailabilityResult

DOMAINR_HOST = "domainr.p.rapidapi.com"
DOMAINR_STATUS_URL = f"https://{DOMAINR_HOST}/v2/status"
AVAILABLE_SUMMARY = "inactive"


def make_session(user_agent: str) -> Session:
    """Create a requests session without retries; a failed check is final."""
    session = Session()
    session.headers.update({"User-Agent": user_agent})
    adapter = HTTPAdapter(max_retries=0)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def parse_summary(payload: Any) -> str:
    """Return ``status[0].summary`` from a Domainr status payload."""
    try:
        summary = payload["status"][0]["summary"]
    except (KeyError, IndexError, TypeError) as exc:
        raise ProviderError(f"unexpected status payload: {exc!r}") from exc
    if not isinstance(summary, str):
        raise ProviderError(f"summary is not a string: {summary!r}")
    return summary


class DomainrClient:
    """Availability checks against the Domainr status endpoint."""

    def __init__(
        self, *, session: Session, api_key: str, timeout: float, logger: logging.Logger
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._timeout = timeout
        self._logger = logger

    def check(self, domain: str) -> AvailabilityResult:
        headers = {"x-rapidapi-key": self._api_key, "x-rapidapi-host": DOMAINR_HOST}
        try:
            response = self._session.get(
                DOMAINR_STATUS_URL,
                params={"domain": domain},
                headers=headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
            summary = parse_summary(response.json())
        except (RequestException, ValueError, ProviderError) as exc:
            self._logger.debug("Domainr status failed for %s: %s", domain, exc)
            return AvailabilityResult(domain=domain, status=Availability.ERROR, reason=str(exc))

        if summary == AVAILABLE_SUMMARY:
            return AvailabilityResult(domain=domain, status=Availability.AVAILABLE, reason=summary)
        return AvailabilityResult(domain=domain, status=Availability.TAKEN, reason=summary)

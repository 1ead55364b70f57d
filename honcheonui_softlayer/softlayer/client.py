"""SoftLayer REST client with object masks, filters and result limits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from honcheonui_softlayer.shared.logging import get_logger
from honcheonui_softlayer.shared.settings import DEFAULT_ENDPOINT
from honcheonui_softlayer.softlayer import filters, masks
from honcheonui_softlayer.softlayer.errors import RemoteQueryFailure
from honcheonui_softlayer.softlayer.raw import RawCurrentUser, RawTicket, RawVirtualGuest

ACCOUNT_SERVICE = "SoftLayer_Account"

MAX_ERROR_BODY_LENGTH = 200

logger = get_logger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
SessionFactory = Callable[[], requests.Session]


@dataclass(frozen=True)
class Query:
    """Per-call query options: mask paths, filter predicates and result window."""

    mask: tuple[str, ...] = ()
    predicates: tuple[filters.Predicate, ...] = ()
    limit: int | None = None
    offset: int = 0

    def params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.mask:
            params["objectMask"] = masks.render(self.mask)
        if self.predicates:
            params["objectFilter"] = filters.encode(filters.build(*self.predicates))
        if self.limit is not None:
            if self.limit < 1 or self.offset < 0:
                raise ValueError(f"Invalid result window: offset={self.offset} limit={self.limit}")
            params["resultLimit"] = f"{self.offset},{self.limit}"
        return params


class SoftLayerClient:
    """Authenticated handle on the SoftLayer REST API.

    Owns one ``requests`` session. Use as a context manager so the session is
    closed once the single query of an operation completes.
    """

    def __init__(
        self,
        username: str,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        session: requests.Session | None = None,
        timeout_s: float | None = None,
    ) -> None:
        self.username = username
        self.api_key = api_key
        self.endpoint = endpoint.rstrip("/")
        self.session = session or requests.Session()
        self.timeout_s = timeout_s

    def __enter__(self) -> "SoftLayerClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get_current_user(self, query: Query | None = None) -> RawCurrentUser:
        payload = self._call(ACCOUNT_SERVICE, "getCurrentUser", query or Query())
        if not isinstance(payload, dict):
            raise RemoteQueryFailure(
                "SoftLayer getCurrentUser returned a non-object payload",
                reason_code="softlayer_invalid_payload",
            )
        return _parse(RawCurrentUser, payload)

    def get_virtual_guests(self, query: Query | None = None) -> list[RawVirtualGuest]:
        payload = self._call(ACCOUNT_SERVICE, "getVirtualGuests", query or Query())
        return _parse_list(RawVirtualGuest, payload, method="getVirtualGuests")

    def get_tickets(self, query: Query | None = None) -> list[RawTicket]:
        payload = self._call(ACCOUNT_SERVICE, "getTickets", query or Query())
        return _parse_list(RawTicket, payload, method="getTickets")

    def _call(self, service: str, method: str, query: Query) -> Any:
        url = f"{self.endpoint}/{service}/{method}.json"
        try:
            params = query.params()
        except ValueError as exc:
            raise RemoteQueryFailure(
                f"SoftLayer {service}::{method} query rejected: {exc}",
                reason_code="softlayer_invalid_query",
            ) from exc

        try:
            response = self.session.request(
                method="GET",
                url=url,
                auth=(self.username, self.api_key),
                headers={"Accept": "application/json"},
                params=params,
                timeout=self.timeout_s,
            )
        except requests.RequestException as exc:
            raise RemoteQueryFailure(
                f"SoftLayer {service}::{method} transport failure: {exc}",
                reason_code="softlayer_transport",
            ) from exc

        if response.status_code >= 400:
            error_code, message = _error_details(response)
            raise RemoteQueryFailure(
                f"SoftLayer {service}::{method} failed ({response.status_code}): {message}",
                reason_code=f"softlayer_{response.status_code}",
                status_code=response.status_code,
                error_code=error_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteQueryFailure(
                f"SoftLayer {service}::{method} returned invalid json",
                reason_code="softlayer_invalid_payload",
                status_code=response.status_code,
            ) from exc


def _error_details(response: requests.Response) -> tuple[str, str]:
    try:
        payload = response.json()
    except ValueError:
        return "", str(response.text or "")[:MAX_ERROR_BODY_LENGTH]
    if not isinstance(payload, dict):
        return "", str(payload)[:MAX_ERROR_BODY_LENGTH]
    return str(payload.get("code", "")), str(payload.get("error", ""))[:MAX_ERROR_BODY_LENGTH]


def _parse(model: type[RecordT], payload: dict[str, Any]) -> RecordT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise RemoteQueryFailure(
            f"SoftLayer payload does not match {model.__name__}: {exc.error_count()} errors",
            reason_code="softlayer_invalid_payload",
        ) from exc


def _parse_list(model: type[RecordT], payload: Any, method: str) -> list[RecordT]:
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise RemoteQueryFailure(
            f"SoftLayer {method} returned a non-list payload",
            reason_code="softlayer_invalid_payload",
        )
    records: list[RecordT] = []
    for row in payload:
        if not isinstance(row, dict):
            raise RemoteQueryFailure(
                f"SoftLayer {method} returned a non-object row",
                reason_code="softlayer_invalid_payload",
            )
        records.append(_parse(model, row))
    logger.debug("softlayer %s returned %d rows", method, len(records))
    return records


"""SoftLayer implementation of the honcheonui provider contract."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import UUID

import requests

from honcheonui_softlayer.contracts.records import (
    NIL_UUID,
    AccountIdentity,
    HoncheonuiNotification,
    HoncheonuiResource,
    HoncheonuiStatus,
)
from honcheonui_softlayer.shared.logging import get_logger
from honcheonui_softlayer.shared.settings import SoftLayerSettings
from honcheonui_softlayer.softlayer import masks
from honcheonui_softlayer.softlayer.client import Query, SessionFactory, SoftLayerClient
from honcheonui_softlayer.softlayer.errors import RemoteQueryFailure
from honcheonui_softlayer.softlayer.filters import Path
from honcheonui_softlayer.softlayer.raw import (
    RawTicket,
    RawVirtualGuest,
    sl_int,
    sl_name,
    sl_string,
    sl_time,
)

PROVIDER_NAME = "softlayer"
RESOURCE_TYPE = "vm"
NOTIFICATION_TYPE = "ticket"

EXCLUDED_GROUP_TERM = "Sales"
TICKET_EDITOR_TYPES = ("AUTO", "EMPLOYEE")

STATUS_ACTIVE = "Active"
POWER_RUNNING = "Running"
TICKET_CLOSED = "Closed"


class SoftLayerProvider:
    """Maps SoftLayer account, guest and ticket data onto honcheonui records.

    Each operation opens its own client session, issues one query and closes
    the session. Any query failure raises ``RemoteQueryFailure``.
    """

    name = PROVIDER_NAME

    def __init__(
        self,
        settings: SoftLayerSettings | None = None,
        session_factory: SessionFactory = requests.Session,
        logger: logging.Logger | None = None,
    ) -> None:
        self.settings = settings or SoftLayerSettings()
        self.session_factory = session_factory
        self.logger = logger or get_logger(__name__)

    def init(self) -> None:
        return None

    def check_account(self, user: str, password: str) -> AccountIdentity:
        try:
            with self._client(user, password) as client:
                data = client.get_current_user(Query(mask=masks.CURRENT_USER_MASK))
        except RemoteQueryFailure as exc:
            self.logger.error("softlayer api exception: %s", exc)
            raise

        self.logger.debug("account '%s' confirmed", sl_int(data.account_id))
        return AccountIdentity(user_id=sl_int(data.id), account_id=sl_int(data.account_id))

    def get_resources(self, user: str, password: str) -> list[HoncheonuiResource]:
        data = self._virtual_guests(user, password, masks.VIRTUAL_GUEST_MASK)
        resources = [resource_from_guest(guest) for guest in data]
        self.logger.debug("got %d virtual guests", len(resources))
        return resources

    def get_statuses(self, user: str, password: str) -> list[HoncheonuiStatus]:
        data = self._virtual_guests(user, password, masks.VIRTUAL_GUEST_STATUS_MASK)
        statuses = [status_from_guest(guest) for guest in data]
        self.logger.debug("got %d virtual guest statuses", len(statuses))
        return statuses

    def get_notifications(
        self, user: str, password: str, since: datetime
    ) -> list[HoncheonuiNotification]:
        """Return recent support tickets as notifications.

        Only tickets created strictly after ``since`` whose group name does not
        mention Sales and whose first update came from an automated process or
        an employee are returned. A single page of ``settings.ticket_limit``
        rows is fetched; further matches in the window are not retrieved.
        """

        query = ticket_query(since, self.settings)
        try:
            with self._client(user, password) as client:
                data = client.get_tickets(query)
        except RemoteQueryFailure as exc:
            self.logger.debug("softlayer api exception: %s", exc)
            raise

        notifications = [notification_from_ticket(ticket) for ticket in data]
        self.logger.debug("got %d tickets", len(notifications))
        return notifications

    def _virtual_guests(
        self, user: str, password: str, mask: tuple[str, ...]
    ) -> list[RawVirtualGuest]:
        try:
            with self._client(user, password) as client:
                return client.get_virtual_guests(Query(mask=mask))
        except RemoteQueryFailure as exc:
            self.logger.debug("softlayer api exception: %s", exc)
            raise

    def _client(self, user: str, password: str) -> SoftLayerClient:
        return SoftLayerClient(
            username=user,
            api_key=password,
            endpoint=self.settings.endpoint,
            session=self.session_factory(),
            timeout_s=self.settings.request_timeout_s,
        )


def format_since(since: datetime, settings: SoftLayerSettings) -> str:
    """Render ``since`` in the API's local zone; naive values are taken as UTC."""

    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)
    local = since.astimezone(settings.zone())
    return (
        f"{local.month:02d}/{local.day:02d}/{local.year:04d} "
        f"{local.hour:02d}:{local.minute:02d}:{local.second:02d}"
    )


def ticket_query(since: datetime, settings: SoftLayerSettings) -> Query:
    try:
        since_text = format_since(since, settings)
    except (ValueError, OverflowError) as exc:
        raise RemoteQueryFailure(
            f"Cannot build ticket filter: {exc}", reason_code="softlayer_invalid_query"
        ) from exc
    return Query(
        mask=masks.TICKET_MASK,
        predicates=(
            Path("tickets.group.name").not_contains(EXCLUDED_GROUP_TERM),
            Path("tickets.firstUpdate.editorType").in_(*TICKET_EDITOR_TYPES),
            Path("tickets.createDate").date_after(since_text),
        ),
        limit=settings.ticket_limit,
    )


def resource_from_guest(guest: RawVirtualGuest) -> HoncheonuiResource:
    max_cpu = sl_int(guest.max_cpu)
    max_memory = sl_int(guest.max_memory)
    return HoncheonuiResource(
        provider=PROVIDER_NAME,
        type=RESOURCE_TYPE,
        original_id=str(sl_int(guest.id)),
        uuid=_parse_uuid(guest.uuid),
        name=f"{sl_string(guest.hostname)}.{sl_string(guest.domain)}",
        notes=sl_string(guest.notes),
        group_id=str(sl_int(guest.account_id)),
        resource_created_at=sl_time(guest.create_date),
        resource_modified_at=sl_time(guest.modify_date),
        ip_address=sl_string(guest.primary_ip_address),
        location=sl_string(guest.location.path_string) if guest.location else "",
        is_conn=sl_name(guest.status) == STATUS_ACTIVE,
        is_on=sl_name(guest.power_state) == POWER_RUNNING,
        attributes={"MaxCpu": str(max_cpu), "MaxMemory": str(max_memory)},
        integer_attributes={"MaxCpu": max_cpu, "MaxMemory": max_memory},
        tags=[sl_name(ref.tag) for ref in guest.tag_references],
        user_ids=[str(sl_int(u.id)) for u in guest.users],
    )


def status_from_guest(guest: RawVirtualGuest) -> HoncheonuiStatus:
    return HoncheonuiStatus(
        original_id=str(sl_int(guest.id)),
        is_conn=sl_name(guest.status) == STATUS_ACTIVE,
        is_on=sl_name(guest.power_state) == POWER_RUNNING,
    )


def notification_from_ticket(ticket: RawTicket) -> HoncheonuiNotification:
    first_update = ticket.first_update
    category = ""
    if ticket.group is not None:
        category = sl_string(ticket.group.name)
    if ticket.subject is not None:
        category += "/" + sl_string(ticket.subject.name)

    user_ids: list[str] = []
    for guest in ticket.attached_virtual_guests:
        user_ids.extend(str(sl_int(u.id)) for u in guest.users)

    return HoncheonuiNotification(
        provider=PROVIDER_NAME,
        type=NOTIFICATION_TYPE,
        original_id=str(sl_int(ticket.id)),
        group_id=str(sl_int(ticket.account_id)),
        user_id=str(sl_int(ticket.assigned_user_id)),
        title=sl_string(ticket.title),
        content=sl_string(first_update.entry) if first_update else "",
        issued_by=sl_string(first_update.editor_type) if first_update else "",
        issued_at=sl_time(ticket.create_date),
        modified_at=sl_time(ticket.modify_date),
        category=category,
        is_open=sl_name(ticket.status) != TICKET_CLOSED,
        resource_ids=[str(sl_int(r.attachment_id)) for r in ticket.attached_resources],
        user_ids=user_ids,
    )


def _parse_uuid(value: str | None) -> UUID:
    if not value:
        return NIL_UUID
    try:
        return UUID(value)
    except ValueError:
        return NIL_UUID

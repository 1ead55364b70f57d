"""Raw SoftLayer records as returned by the REST API.

Every property is optional: the API omits anything outside the object mask and
anything unset on the account. Presence is kept as ``None`` here and resolved
exactly once by ``sl_int``, ``sl_string`` and ``sl_time`` while mapping.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

MISSING_INT = -1
MISSING_STRING = ""
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _none_as_empty(value: Any) -> Any:
    return [] if value is None else value


NoneAsEmpty = BeforeValidator(_none_as_empty)


class RawRecord(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )


class RawNamed(RawRecord):
    name: str | None = None


class RawId(RawRecord):
    id: int | None = None


class RawLocation(RawRecord):
    path_string: str | None = None


class RawTagReference(RawRecord):
    tag: RawNamed | None = None


class RawCurrentUser(RawRecord):
    id: int | None = None
    account_id: int | None = None


class RawVirtualGuest(RawRecord):
    id: int | None = None
    uuid: str | None = None
    account_id: int | None = None
    hostname: str | None = None
    domain: str | None = None
    notes: str | None = None
    primary_ip_address: str | None = None
    location: RawLocation | None = None
    status: RawNamed | None = None
    power_state: RawNamed | None = None
    max_cpu: int | None = None
    max_memory: int | None = None
    create_date: datetime | None = None
    modify_date: datetime | None = None
    tag_references: Annotated[list[RawTagReference], NoneAsEmpty] = Field(default_factory=list)
    users: Annotated[list[RawId], NoneAsEmpty] = Field(default_factory=list)


class RawTicketUpdate(RawRecord):
    entry: str | None = None
    editor_type: str | None = None


class RawAttachedResource(RawRecord):
    attachment_id: int | None = None


class RawAttachedVirtualGuest(RawRecord):
    users: Annotated[list[RawId], NoneAsEmpty] = Field(default_factory=list)


class RawTicket(RawRecord):
    id: int | None = None
    account_id: int | None = None
    assigned_user_id: int | None = None
    title: str | None = None
    group: RawNamed | None = None
    subject: RawNamed | None = None
    status: RawNamed | None = None
    first_update: RawTicketUpdate | None = None
    create_date: datetime | None = None
    modify_date: datetime | None = None
    attached_resources: Annotated[list[RawAttachedResource], NoneAsEmpty] = Field(
        default_factory=list
    )
    attached_virtual_guests: Annotated[list[RawAttachedVirtualGuest], NoneAsEmpty] = Field(
        default_factory=list
    )


def sl_int(value: int | None) -> int:
    if value is None:
        return MISSING_INT
    return value


def sl_string(value: str | None) -> str:
    if value is None:
        return MISSING_STRING
    return value


def sl_time(value: datetime | None) -> datetime:
    if value is None:
        return ZERO_TIME
    return value


def sl_name(named: RawNamed | None) -> str:
    """Name of a nested ``{name: ...}`` object, empty when either level is missing."""

    if named is None:
        return MISSING_STRING
    return sl_string(named.name)

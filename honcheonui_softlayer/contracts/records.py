"""Pydantic contracts for the records handed to honcheonui."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NIL_UUID = UUID(int=0)


class HoncheonuiRecord(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AccountIdentity(HoncheonuiRecord):
    user_id: int
    account_id: int


class HoncheonuiStatus(HoncheonuiRecord):
    """Lightweight connectivity and power view of one resource."""

    original_id: str
    is_conn: bool = False
    is_on: bool = False


class HoncheonuiResource(HoncheonuiRecord):
    """Normalized compute resource."""

    provider: str
    type: str
    original_id: str
    uuid: UUID = NIL_UUID
    name: str = ""
    notes: str = ""
    group_id: str
    resource_created_at: datetime
    resource_modified_at: datetime
    ip_address: str = ""
    location: str = ""
    is_conn: bool = False
    is_on: bool = False
    attributes: dict[str, str] = Field(default_factory=dict)
    integer_attributes: dict[str, int] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    user_ids: list[str] = Field(default_factory=list)


class HoncheonuiNotification(HoncheonuiRecord):
    """Normalized notification built from a provider support ticket."""

    provider: str
    type: Literal["ticket"] = "ticket"
    original_id: str
    group_id: str
    user_id: str
    title: str = ""
    content: str = ""
    issued_by: str = ""
    issued_at: datetime
    modified_at: datetime
    category: str = ""
    is_open: bool = False
    resource_ids: list[str] = Field(default_factory=list)
    user_ids: list[str] = Field(default_factory=list)


def dump_records(records: Iterable[HoncheonuiRecord]) -> list[dict[str, Any]]:
    """Serialize records with the camelCase field names honcheonui expects."""

    return [record.to_json_dict() for record in records]

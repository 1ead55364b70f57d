"""Output records and the provider contract consumed by honcheonui."""

from honcheonui_softlayer.contracts.provider import Provider
from honcheonui_softlayer.contracts.records import (
    AccountIdentity,
    HoncheonuiNotification,
    HoncheonuiResource,
    HoncheonuiStatus,
    dump_records,
)

__all__ = [
    "AccountIdentity",
    "HoncheonuiNotification",
    "HoncheonuiResource",
    "HoncheonuiStatus",
    "Provider",
    "dump_records",
]

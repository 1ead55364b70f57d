"""Provider contract implemented by every honcheonui adapter."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from honcheonui_softlayer.contracts.records import (
    AccountIdentity,
    HoncheonuiNotification,
    HoncheonuiResource,
    HoncheonuiStatus,
)


class Provider(Protocol):
    """Adapter protocol the host calls for one cloud provider.

    Every operation is a single synchronous round trip. Failures propagate as
    exceptions; a successful call never returns partial data.
    """

    name: str

    def init(self) -> None: ...

    def check_account(self, user: str, password: str) -> AccountIdentity: ...

    def get_resources(self, user: str, password: str) -> list[HoncheonuiResource]: ...

    def get_statuses(self, user: str, password: str) -> list[HoncheonuiStatus]: ...

    def get_notifications(
        self, user: str, password: str, since: datetime
    ) -> list[HoncheonuiNotification]: ...

"""Failure type raised for any unsuccessful SoftLayer query."""

from __future__ import annotations


class RemoteQueryFailure(RuntimeError):
    """Raised when a SoftLayer call fails for any reason.

    Auth rejection, transport errors, rejected filters, server errors and
    unreadable payloads all surface as this one type. Callers decide whether
    to retry.
    """

    def __init__(
        self,
        message: str,
        reason_code: str,
        status_code: int | None = None,
        error_code: str = "",
    ) -> None:
        super().__init__(message)
        self.reason_code = reason_code
        self.status_code = status_code
        self.error_code = error_code

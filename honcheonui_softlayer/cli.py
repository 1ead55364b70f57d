"""honcheonui-softlayer CLI for exercising the provider against a live account."""

from __future__ import annotations

import json
import sys
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import typer

from honcheonui_softlayer.contracts.provider import Provider
from honcheonui_softlayer.contracts.records import dump_records
from honcheonui_softlayer.registry import build_provider_from_env
from honcheonui_softlayer.shared.logging import setup_logging
from honcheonui_softlayer.softlayer.errors import RemoteQueryFailure

DEFAULT_NOTIFICATION_DAYS = 365

app = typer.Typer(add_completion=False, help="honcheonui-softlayer: SoftLayer provider adapter")

UserOption = typer.Option(..., "--user", envvar="SL_USERNAME", help="SoftLayer username")
ApiKeyOption = typer.Option(
    ..., "--api-key", envvar="SL_API_KEY", help="SoftLayer API key", show_default=False
)


def _provider() -> Provider:
    logger = setup_logging(stream=sys.stderr)
    try:
        return build_provider_from_env(logger=logger)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


def _fail(operation: str, exc: RemoteQueryFailure) -> None:
    typer.echo(
        json.dumps(
            {
                "operation": operation,
                "error": str(exc),
                "reason_code": exc.reason_code,
                "status_code": exc.status_code,
            }
        ),
        err=True,
    )


def _resolve_since(days: int | None, since: str) -> datetime:
    if since and days is not None:
        raise typer.BadParameter("Use only one of --since or --days")
    if since:
        try:
            parsed = datetime.fromisoformat(since)
        except ValueError as exc:
            raise typer.BadParameter(
                f"--since must be an ISO-8601 timestamp, got {since!r}"
            ) from exc
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    span = DEFAULT_NOTIFICATION_DAYS if days is None else days
    if span < 0:
        raise typer.BadParameter("--days must not be negative")
    return datetime.now(timezone.utc) - timedelta(days=span)


def _run(operation: str, call: Callable[[], Any]) -> Any:
    try:
        return call()
    except RemoteQueryFailure as exc:
        _fail(operation, exc)
        raise typer.Exit(code=1) from exc


@app.command("check-account")
def check_account(user: str = UserOption, api_key: str = ApiKeyOption) -> None:
    """Confirm credentials and print the user and account ids."""
    provider = _provider()
    identity = _run("check_account", lambda: provider.check_account(user, api_key))
    _emit(identity.to_json_dict())


@app.command()
def resources(user: str = UserOption, api_key: str = ApiKeyOption) -> None:
    """Print every virtual guest as a normalized resource."""
    provider = _provider()
    _emit(dump_records(_run("get_resources", lambda: provider.get_resources(user, api_key))))


@app.command()
def statuses(user: str = UserOption, api_key: str = ApiKeyOption) -> None:
    """Print connectivity and power state for every virtual guest."""
    provider = _provider()
    _emit(dump_records(_run("get_statuses", lambda: provider.get_statuses(user, api_key))))


@app.command()
def notifications(
    user: str = UserOption,
    api_key: str = ApiKeyOption,
    days: int = typer.Option(None, "--days", help="Look back this many days (default 365)"),
    since: str = typer.Option("", "--since", help="ISO-8601 lower bound, exclusive"),
) -> None:
    """Print tickets created after the lower bound as notifications."""
    lower = _resolve_since(days, since)
    provider = _provider()
    _emit(
        dump_records(
            _run(
                "get_notifications",
                lambda: provider.get_notifications(user, api_key, lower),
            )
        )
    )


@app.command()
def smoke(user: str = UserOption, api_key: str = ApiKeyOption) -> None:
    """Run every provider operation once, continuing past failures."""
    provider = _provider()
    provider.init()
    failed = False

    steps: list[tuple[str, Callable[[], Any]]] = [
        ("check_account", lambda: provider.check_account(user, api_key).to_json_dict()),
        ("get_resources", lambda: dump_records(provider.get_resources(user, api_key))),
        ("get_statuses", lambda: dump_records(provider.get_statuses(user, api_key))),
        (
            "get_notifications",
            lambda: dump_records(
                provider.get_notifications(
                    user,
                    api_key,
                    datetime.now(timezone.utc) - timedelta(days=DEFAULT_NOTIFICATION_DAYS),
                )
            ),
        ),
    ]
    for operation, call in steps:
        try:
            result = call()
        except RemoteQueryFailure as exc:
            _fail(operation, exc)
            failed = True
            continue
        typer.echo(f"-- {operation}: {json.dumps(result, sort_keys=True)}")

    typer.echo("-- done")
    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

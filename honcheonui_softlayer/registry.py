"""Provider registration and environment-driven selection."""

from __future__ import annotations

import logging
import os
from typing import Callable

from honcheonui_softlayer.contracts.provider import Provider
from honcheonui_softlayer.shared.settings import SoftLayerSettings
from honcheonui_softlayer.softlayer.provider import SoftLayerProvider

ProviderFactory = Callable[[SoftLayerSettings, logging.Logger | None], Provider]


def _softlayer(settings: SoftLayerSettings, logger: logging.Logger | None) -> Provider:
    return SoftLayerProvider(settings=settings, logger=logger)


PROVIDER_FACTORIES: dict[str, ProviderFactory] = {
    SoftLayerProvider.name: _softlayer,
}


def registered_providers(
    settings: SoftLayerSettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> dict[str, Provider]:
    resolved = settings or SoftLayerSettings()
    providers = {name: factory(resolved, logger) for name, factory in PROVIDER_FACTORIES.items()}
    return dict(sorted(providers.items(), key=lambda kv: kv[0]))


def get_provider(
    name: str,
    settings: SoftLayerSettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Provider:
    factory = PROVIDER_FACTORIES.get(name.strip().lower())
    if factory is None:
        raise ValueError(f"unknown_provider:{name}")
    return factory(settings or SoftLayerSettings(), logger)


def build_provider_from_env(
    env: dict[str, str] | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Provider:
    env_map = os.environ if env is None else env
    settings = SoftLayerSettings.from_env(env_map)
    return get_provider(settings.provider, settings, logger=logger)

"""SoftLayer REST client, raw records, and the provider implementation."""

from honcheonui_softlayer.softlayer.errors import RemoteQueryFailure
from honcheonui_softlayer.softlayer.provider import PROVIDER_NAME, SoftLayerProvider

__all__ = ["PROVIDER_NAME", "RemoteQueryFailure", "SoftLayerProvider"]

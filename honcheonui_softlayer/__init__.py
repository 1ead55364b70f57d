"""SoftLayer provider adapter for the honcheonui orchestration schema."""

__version__ = "0.1.0"

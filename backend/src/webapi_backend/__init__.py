"""Web API backend package wiring and entrypoints."""

from webapi_backend.settings import BackendSettings, get_settings

__all__ = [
    "BackendSettings",
    "get_settings",
]

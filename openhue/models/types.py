"""Type definitions for openhue."""

from typing import NotRequired, TypedDict


class DiscoveredBridge(TypedDict):
    """Bridge information from N-UPnP discovery."""
    id: str
    internalipaddress: str
    port: NotRequired[int]

# solo-hub-web - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.cms import (
    CMSError,
    CMSPort,
    CMSQuery,
    NetworkError,
    Record,
    UpstreamError,
)

__all__ = [
    # CMS
    "CMSError",
    "CMSPort",
    "CMSQuery",
    "NetworkError",
    "Record",
    "UpstreamError",
]

"""Task API access."""

from todobridge.api.client import RemoteActionClient

__all__ = ["RemoteActionClient"]

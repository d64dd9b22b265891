"""Abstract interfaces for infrastructure dependencies."""

from .connection_store import ConnectionStore
from .lead_store import LeadStore
from .storage import StorageClient

__all__ = ["StorageClient", "LeadStore", "ConnectionStore"]

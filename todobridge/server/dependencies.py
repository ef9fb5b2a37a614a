"""Process-wide bridge service used by the RPC routes."""

import logging
import threading

from todobridge.api.client import RemoteActionClient
from todobridge.cache.todo import TodoCache
from todobridge.config import Config, load_config
from todobridge.services.todo_bridge import TodoBridgeService

logger = logging.getLogger(__name__)

_service: TodoBridgeService | None = None
_service_lock = threading.Lock()


def build_bridge_service(config: Config | None = None) -> TodoBridgeService:
    """Build a bridge service with an open task API session.

    Raises:
        MissingCredentialsError: If SC_API_KEY is not configured
    """
    config = config or load_config()
    client = RemoteActionClient(config=config)
    client.open()
    logger.info(f"Bridge service ready (task API: {client.base_url})")
    return TodoBridgeService(client, TodoCache(), require_uuid_ids=config.require_uuid_ids)


def get_bridge_service() -> TodoBridgeService:
    """FastAPI dependency returning the shared bridge service."""
    global _service
    with _service_lock:
        if _service is None:
            _service = build_bridge_service()
        return _service


def set_bridge_service(service: TodoBridgeService | None) -> None:
    """Install (or clear) the shared bridge service."""
    global _service
    with _service_lock:
        _service = service

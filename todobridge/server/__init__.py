"""RPC server for the todo bridge."""

from todobridge.server.app import app, create_app
from todobridge.server.dependencies import build_bridge_service, get_bridge_service, set_bridge_service

__all__ = [
    "app",
    "build_bridge_service",
    "create_app",
    "get_bridge_service",
    "set_bridge_service",
]

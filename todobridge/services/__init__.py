"""Service layer."""

from todobridge.services.todo_bridge import TaskAPI, TodoBridgeService

__all__ = ["TaskAPI", "TodoBridgeService"]

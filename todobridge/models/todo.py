"""Todo entity and RPC request/response models."""

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """A todo item mirrored from the task API."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Todo identifier, also the remote task id")
    title: str = Field(default="", description="Short label")
    description: str = Field(default="", description="Free text description")
    completed: bool = Field(default=False, description="Completion flag")


class CreateTodoRequest(BaseModel):
    """Request for CreateTodo."""

    id: str
    title: str = ""
    description: str = ""


class GetTodoRequest(BaseModel):
    """Request for GetTodo."""

    id: str


class UpdateTodoRequest(BaseModel):
    """Request for UpdateTodo."""

    id: str
    title: str = ""
    description: str = ""
    completed: bool = False


class BulkDeleteTodoRequest(BaseModel):
    """Request for BulkDeleteTodo."""

    ids: list[str] = Field(default_factory=list)


class ListTodosRequest(BaseModel):
    """Request for ListTodos."""


class ListTodosResponse(BaseModel):
    """Response for ListTodos."""

    todos: list[Todo] = Field(default_factory=list)


class Empty(BaseModel):
    """Empty RPC reply."""


# Outbound task API payloads
class CreateTaskPayload(BaseModel):
    """Body of POST /tasks/v1/actions."""

    task_id: str
    title: str
    description: str


class BulkDeleteTaskPayload(BaseModel):
    """Body of POST /tasks/v1/actions/delete."""

    ids: list[str]

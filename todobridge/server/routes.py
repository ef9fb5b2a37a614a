"""RPC methods of the todo service."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header

from todobridge.core.constants import DEADLINE_HEADER, RPC_SERVICE_PREFIX
from todobridge.exceptions import TodoNotFoundError
from todobridge.models.todo import (
    BulkDeleteTodoRequest,
    CreateTodoRequest,
    Empty,
    GetTodoRequest,
    ListTodosRequest,
    ListTodosResponse,
    Todo,
    UpdateTodoRequest,
)
from todobridge.server.dependencies import get_bridge_service
from todobridge.services.todo_bridge import TodoBridgeService

router = APIRouter(
    prefix=RPC_SERVICE_PREFIX,
    tags=["todos"],
)

Service = Annotated[TodoBridgeService, Depends(get_bridge_service)]
Deadline = Annotated[
    float | None,
    Header(
        alias=DEADLINE_HEADER,
        gt=0,
        allow_inf_nan=False,
        description="Deadline in seconds for the task API call",
    ),
]


# PUBLIC_INTERFACE
@router.post(
    "/CreateTodo",
    response_model=Todo,
    summary="Create Todo",
    description="Create the task remotely and cache it once the task API confirms.",
    responses={
        400: {"description": "Validation error"},
        502: {"description": "Task API rejected the request or replied with an unreadable body"},
        503: {"description": "Task API unreachable"},
        504: {"description": "Deadline exceeded"},
    },
)
def create_todo(request: CreateTodoRequest, service: Service, timeout: Deadline = None) -> Todo:
    return service.create_todo(request.id, request.title, request.description, timeout=timeout)


# PUBLIC_INTERFACE
@router.post(
    "/GetTodo",
    response_model=Todo,
    summary="Get Todo",
    description="Query the task API, then return the locally cached todo.",
    responses={404: {"description": "Todo not cached"}},
)
def get_todo(request: GetTodoRequest, service: Service, timeout: Deadline = None) -> Todo:
    todo = service.get_todo(request.id, timeout=timeout)
    if todo is None:
        raise TodoNotFoundError(request.id)
    return todo


# PUBLIC_INTERFACE
@router.post(
    "/UpdateTodo",
    response_model=Todo,
    summary="Update Todo",
    responses={501: {"description": "Not implemented"}},
)
def update_todo(request: UpdateTodoRequest, service: Service, timeout: Deadline = None) -> Todo:
    return service.update_todo(
        request.id, request.title, request.description, request.completed, timeout=timeout
    )


# PUBLIC_INTERFACE
@router.post(
    "/BulkDeleteTodo",
    response_model=Empty,
    summary="Bulk Delete Todos",
    description="Delete all ids in one task API request; the cache is only updated on an empty confirmation.",
    responses={
        400: {"description": "Validation error"},
        502: {"description": "Task API rejected the request or replied unexpectedly"},
    },
)
def bulk_delete_todo(request: BulkDeleteTodoRequest, service: Service, timeout: Deadline = None) -> Empty:
    service.bulk_delete_todo(request.ids, timeout=timeout)
    return Empty()


# PUBLIC_INTERFACE
@router.post(
    "/ListTodos",
    response_model=ListTodosResponse,
    summary="List Todos",
    responses={501: {"description": "Not implemented"}},
)
def list_todos(
    service: Service, request: ListTodosRequest | None = None, timeout: Deadline = None  # noqa: ARG001
) -> ListTodosResponse:
    return ListTodosResponse(todos=service.list_todos(timeout=timeout))

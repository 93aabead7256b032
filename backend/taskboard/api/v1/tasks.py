from fastapi import APIRouter, Depends, Path, status

from ...schemas.common import Envelope, PaginatedEnvelope
from ...schemas.tasks import TaskIn, TaskOut
from ...services.tasks import TaskService
from ..deps import MAX_ID, PaginationParams, get_task_service, pagination_params

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=PaginatedEnvelope[TaskOut])
def list_tasks(
    params: PaginationParams = Depends(pagination_params),
    service: TaskService = Depends(get_task_service),
):
    page = service.get_list(params.page, params.limit)
    return PaginatedEnvelope[TaskOut](
        message="List tasks successfully",
        data=page.items,
        pagination=page.pagination,
    )


@router.get("/{task_id}", response_model=Envelope[TaskOut])
def get_task(
    task_id: int = Path(ge=1, le=MAX_ID),
    service: TaskService = Depends(get_task_service),
):
    return Envelope[TaskOut](
        message="Task retrieved successfully", data=service.get_by_id(task_id)
    )


@router.post("", response_model=Envelope[TaskOut], status_code=status.HTTP_201_CREATED)
def create_task(body: TaskIn, service: TaskService = Depends(get_task_service)):
    return Envelope[TaskOut](message="Task created successfully", data=service.create(body))


@router.put("/{task_id}", response_model=Envelope[TaskOut])
def update_task(
    body: TaskIn,
    task_id: int = Path(ge=1, le=MAX_ID),
    service: TaskService = Depends(get_task_service),
):
    return Envelope[TaskOut](
        message="Task updated successfully", data=service.update(task_id, body)
    )


@router.delete("/{task_id}", response_model=Envelope[None])
def delete_task(
    task_id: int = Path(ge=1, le=MAX_ID),
    service: TaskService = Depends(get_task_service),
):
    service.delete(task_id)
    return Envelope[None](message="Task deleted successfully")

from ..db.models import Task
from ..schemas.tasks import TaskIn, TaskOut
from .base import CrudService


class TaskService(CrudService[Task, TaskIn, TaskOut]):
    response_schema = TaskOut

    def build(self, request: TaskIn) -> Task:
        return Task(
            title=request.title,
            description=request.description,
            status=request.status,
        )

    def apply(self, entity: Task, request: TaskIn) -> None:
        entity.title = request.title
        entity.description = request.description
        entity.status = request.status

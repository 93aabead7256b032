from ..core.errors import ValidationError
from ..db.models import Event
from ..schemas.events import EventIn, EventOut
from .base import CrudService


class EventService(CrudService[Event, EventIn, EventOut]):
    response_schema = EventOut

    def validate(self, request: EventIn) -> None:
        # equal times are rejected too
        if request.start_time >= request.end_time:
            raise ValidationError(
                "startTime", request.start_time, "startTime must be before endTime"
            )

    def build(self, request: EventIn) -> Event:
        return Event(
            title=request.title,
            description=request.description,
            complete=bool(request.complete),
            location=request.location,
            start_time=request.start_time,
            end_time=request.end_time,
        )

    def apply(self, entity: Event, request: EventIn) -> None:
        entity.title = request.title
        entity.description = request.description
        entity.complete = bool(request.complete)
        entity.location = request.location
        entity.start_time = request.start_time
        entity.end_time = request.end_time

from fastapi import APIRouter, Depends, Path, status

from ...schemas.common import Envelope, PaginatedEnvelope
from ...schemas.events import EventIn, EventOut
from ...services.events import EventService
from ..deps import MAX_ID, PaginationParams, get_event_service, pagination_params

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=PaginatedEnvelope[EventOut])
def list_events(
    params: PaginationParams = Depends(pagination_params),
    service: EventService = Depends(get_event_service),
):
    page = service.get_list(params.page, params.limit)
    return PaginatedEnvelope[EventOut](
        message="List events successfully",
        data=page.items,
        pagination=page.pagination,
    )


@router.get("/{event_id}", response_model=Envelope[EventOut])
def get_event(
    event_id: int = Path(ge=1, le=MAX_ID),
    service: EventService = Depends(get_event_service),
):
    return Envelope[EventOut](
        message="Event retrieved successfully", data=service.get_by_id(event_id)
    )


@router.post("", response_model=Envelope[EventOut], status_code=status.HTTP_201_CREATED)
def create_event(body: EventIn, service: EventService = Depends(get_event_service)):
    return Envelope[EventOut](message="Event created successfully", data=service.create(body))


@router.put("/{event_id}", response_model=Envelope[EventOut])
def update_event(
    body: EventIn,
    event_id: int = Path(ge=1, le=MAX_ID),
    service: EventService = Depends(get_event_service),
):
    return Envelope[EventOut](
        message="Event updated successfully", data=service.update(event_id, body)
    )


@router.delete("/{event_id}", response_model=Envelope[None])
def delete_event(
    event_id: int = Path(ge=1, le=MAX_ID),
    service: EventService = Depends(get_event_service),
):
    service.delete(event_id)
    return Envelope[None](message="Event deleted successfully")

from typing import Optional

from .common import RequiredText, TransferModel, UTCDatetime


class EventIn(TransferModel):
    title: RequiredText
    description: Optional[str] = None
    location: RequiredText
    start_time: UTCDatetime
    end_time: UTCDatetime
    complete: Optional[bool] = False


class EventOut(TransferModel):
    id: int
    title: str
    description: Optional[str] = None
    complete: bool
    location: str
    start_time: UTCDatetime
    end_time: UTCDatetime
    created_at: UTCDatetime
    updated_at: UTCDatetime

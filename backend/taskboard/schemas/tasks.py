from typing import Optional

from .common import RequiredText, TransferModel, UTCDatetime


class TaskIn(TransferModel):
    title: RequiredText
    description: Optional[str] = None
    status: bool = False


class TaskOut(TransferModel):
    id: int
    title: str
    description: Optional[str] = None
    status: bool
    created_at: UTCDatetime
    updated_at: UTCDatetime

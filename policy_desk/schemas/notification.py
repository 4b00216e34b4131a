from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Notification(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    message: str
    holder_name: str
    due_date: datetime
    status: Literal["Expired", "Expiring Soon"]
    dismissible: bool
    popup: bool


class NotificationList(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    count: int
    notifications: list[Notification]

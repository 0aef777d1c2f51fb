from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class SubscribeRequest(BaseModel):
    email: str


class SubscriberResponse(BaseModel):
    email: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

from datetime import datetime
from typing import Any, Dict

from pydantic import BaseModel, Field

from restaurantos.models.order import utcnow


class Event(BaseModel):
    type: str
    data: Dict[str, Any] = {}
    emitted_at: datetime = Field(default_factory=utcnow)

from typing import Literal

from app.schemas.base import BaseSchema


class HealthSchema(BaseSchema):
    status: Literal["ok", "error"]

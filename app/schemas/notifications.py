from typing import Literal

from app.schemas.academic import CamelModel

ToastType = Literal["success", "error", "info"]


class Toast(CamelModel):
    id: str
    message: str
    type: ToastType = "info"
    created_at: float

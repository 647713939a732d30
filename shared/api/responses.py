from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    """Wraps every successful payload: {success, data, count?, message?}."""

    success: bool = True
    count: Optional[int] = None
    message: Optional[str] = None
    data: Optional[T] = None


class ErrorEnvelope(BaseModel):
    success: bool = False
    error: str


def ok(data=None, *, message: str | None = None) -> dict:
    return {"success": True, "data": data, "message": message}


def ok_list(items: list) -> dict:
    return {"success": True, "count": len(items), "data": items}

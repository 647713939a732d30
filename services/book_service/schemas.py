from datetime import datetime
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class BookPayload(BaseModel):
    # Used for create and partial update; required fields are checked by the service
    title: Optional[str] = None
    author: Optional[str] = None
    isbn: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    stock: Optional[int] = None
    description: Optional[str] = None


class StockUpdate(BaseModel):
    quantity: Optional[int] = None


class BookResponse(BaseModel):
    id: str
    title: str
    author: str
    isbn: str
    price: float
    category: str
    stock: int
    description: str
    created_at: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

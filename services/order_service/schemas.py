from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic.alias_generators import to_camel

from .models import OrderStatus


class OrderItemPayload(BaseModel):
    # Every field is optional here so the service can report which rule failed
    book_id: Optional[str] = None
    quantity: Optional[int] = None
    unit_price: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("unitPrice", "price", "unit_price"),
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class OrderCreate(BaseModel):
    user_id: Optional[str] = None
    items: Optional[List[OrderItemPayload]] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        coerce_numbers_to_str = True


class StatusUpdate(BaseModel):
    status: Optional[str] = None


class OrderItemResponse(BaseModel):
    book_id: str
    quantity: int
    unit_price: float

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class OrderResponse(BaseModel):
    id: str
    user_id: str
    items: List[OrderItemResponse]
    total_amount: float
    status: OrderStatus
    order_date: datetime
    updated_at: datetime

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class OrderStats(BaseModel):
    total_orders: int
    total_revenue: float
    status_breakdown: dict[str, int]

    class Config:
        alias_generator = to_camel
        populate_by_name = True

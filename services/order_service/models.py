import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Mapping, Optional

from shared.errors import InvalidStateError, InvalidStatusError, ValidationError
from shared.storage.record_store import new_id

EMPTY_ITEMS_MESSAGE = "Order must contain at least one item"
MISSING_FIELD_MESSAGE = "Each item must have bookId, quantity, and price"
NON_POSITIVE_MESSAGE = "Quantity and price must be positive numbers"
MISSING_USER_MESSAGE = "User ID is required"
NOT_PENDING_MESSAGE = "Cannot modify order that is not pending"


class OrderStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value: Any) -> "OrderStatus":
        try:
            return cls(value)
        except ValueError:
            raise InvalidStatusError("Invalid status") from None


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _item_field(item: Any, *names: str) -> Any:
    # Items arrive either as mappings or as request models
    for name in names:
        if isinstance(item, Mapping):
            value = item.get(name)
        else:
            value = getattr(item, name, None)
        if value is not None:
            return value
    return None


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def validate_line_values(quantity: Any, unit_price: Any) -> tuple[int, float]:
    """Check a line's quantity and unit price and return them normalized.

    Quantity must be a whole positive number (``2.0`` is accepted, ``2.5`` and
    ``"2"`` are not); price must be a positive finite number.
    """
    if not _is_number(quantity) or not _is_number(unit_price):
        raise ValidationError(NON_POSITIVE_MESSAGE)
    if isinstance(quantity, float) and not quantity.is_integer():
        raise ValidationError(NON_POSITIVE_MESSAGE)
    if quantity <= 0 or unit_price <= 0:
        raise ValidationError(NON_POSITIVE_MESSAGE)
    return int(quantity), float(unit_price)


@dataclass
class OrderItem:
    book_id: str
    quantity: int
    unit_price: float

    @property
    def subtotal(self) -> float:
        return self.quantity * self.unit_price


@dataclass
class Order:
    """
    Order aggregate.

    ``total_amount`` is always derived from ``items``; it has no setter.
    Items can only change while the order is pending. Status may move to any
    legal value at any time.
    """

    user_id: str
    items: list[OrderItem]
    id: str = field(default_factory=new_id)
    status: OrderStatus = OrderStatus.PENDING
    order_date: datetime = field(default_factory=_now)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.order_date

    @property
    def total_amount(self) -> float:
        return sum((item.subtotal for item in self.items), 0.0)

    @property
    def is_pending(self) -> bool:
        return self.status == OrderStatus.PENDING

    @classmethod
    def create(cls, user_id: Any, items: Iterable[Any] | None) -> "Order":
        """Validate the payload and build a pending order.

        Raises ValidationError with one of three messages for the items:
        empty list, missing field, non-positive quantity/price.
        """
        if not user_id:
            raise ValidationError(MISSING_USER_MESSAGE)

        items = list(items or [])
        if not items:
            raise ValidationError(EMPTY_ITEMS_MESSAGE)

        lines = []
        for item in items:
            book_id = _item_field(item, "book_id", "bookId")
            quantity = _item_field(item, "quantity")
            unit_price = _item_field(item, "unit_price", "unitPrice", "price")
            if not book_id or quantity is None or unit_price is None:
                raise ValidationError(MISSING_FIELD_MESSAGE)
            quantity, unit_price = validate_line_values(quantity, unit_price)
            lines.append(OrderItem(book_id=str(book_id), quantity=quantity, unit_price=unit_price))

        return cls(user_id=str(user_id), items=lines)

    def touch(self) -> None:
        self.updated_at = _now()

    def set_status(self, new_status: Any) -> None:
        # Parse first so an invalid value leaves the order untouched
        self.status = OrderStatus.parse(new_status)
        self.touch()

    def _ensure_pending(self) -> None:
        if not self.is_pending:
            raise InvalidStateError(NOT_PENDING_MESSAGE)

    def add_item(self, book_id: str, quantity: int, unit_price: float) -> None:
        self._ensure_pending()
        existing = next((item for item in self.items if item.book_id == book_id), None)
        if existing is not None:
            # The line keeps its original price; unit_price is ignored on merge
            existing.quantity += quantity
        else:
            self.items.append(OrderItem(book_id=book_id, quantity=quantity, unit_price=unit_price))
        self.touch()

    def remove_item(self, book_id: str) -> None:
        self._ensure_pending()
        self.items = [item for item in self.items if item.book_id != book_id]
        self.touch()

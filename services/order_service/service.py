from collections import Counter
from typing import Any, Iterable, Optional

import structlog

from shared.errors import InternalError, NotFoundError, ValidationError
from shared.observability import (
    bookstore_order_item_mutations_total,
    bookstore_order_status_changes_total,
    bookstore_orders_created_total,
)

from .models import Order, OrderItem, OrderStatus, validate_line_values
from .repository import OrderRepository

logger = structlog.get_logger(__name__)

ORDER_NOT_FOUND_MESSAGE = "Order not found"
ITEM_FIELDS_REQUIRED_MESSAGE = "Book ID, quantity, and price are required"

SAMPLE_ORDERS = [
    (
        "user-1",
        [
            {"book_id": "book-1", "quantity": 2, "unit_price": 12.99},
            {"book_id": "book-2", "quantity": 1, "unit_price": 14.99},
        ],
        OrderStatus.CONFIRMED,
    ),
    (
        "user-2",
        [{"book_id": "book-3", "quantity": 1, "unit_price": 45.99}],
        OrderStatus.SHIPPED,
    ),
]


class OrderService:
    """
    Owns the orders collection. Every public method runs under the
    repository lock so lookup and mutation happen as one step.
    """

    def __init__(self, repository: Optional[OrderRepository] = None):
        self.repository = repository if repository is not None else OrderRepository()

    def _get_or_raise(self, order_id: str) -> Order:
        order = self.repository.get_order(order_id)
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)
        return order

    def list_orders(self, user_id: Optional[str] = None, status: Optional[str] = None) -> list[Order]:
        # userId wins when both filters are given
        if user_id:
            return self.repository.get_orders_by_user(user_id)
        if status:
            return self.repository.get_orders_by_status(status)
        return self.repository.get_all_orders()

    def get_order(self, order_id: str) -> Order:
        return self._get_or_raise(order_id)

    def create_order(self, user_id: Any, items: Iterable[Any] | None) -> Order:
        try:
            with self.repository.lock:
                order = Order.create(user_id, items)
                self.repository.insert(order)
        except ValidationError:
            raise
        except Exception as e:
            logger.error("order_create_failed", error=str(e))
            raise InternalError("Failed to create order") from e

        bookstore_orders_created_total.inc()
        logger.info("order_created", order_id=order.id, user_id=order.user_id, total_amount=order.total_amount)
        return order

    def update_status(self, order_id: str, status: Optional[str]) -> Order:
        if not status:
            raise ValidationError("Status is required")
        with self.repository.lock:
            order = self._get_or_raise(order_id)
            previous = order.status
            order.set_status(status)

        bookstore_order_status_changes_total.labels(status=order.status.value).inc()
        logger.info("order_status_updated", order_id=order_id, previous=previous.value, status=order.status.value)
        return order

    def delete_order(self, order_id: str) -> Order:
        order = self.repository.remove_by_id(order_id)
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND_MESSAGE)
        logger.info("order_deleted", order_id=order_id)
        return order

    def add_item(self, order_id: str, book_id: Optional[str], quantity: Optional[int], unit_price: Optional[float]) -> Order:
        if not book_id or quantity is None or unit_price is None:
            raise ValidationError(ITEM_FIELDS_REQUIRED_MESSAGE)
        quantity, unit_price = validate_line_values(quantity, unit_price)

        with self.repository.lock:
            order = self._get_or_raise(order_id)
            order.add_item(str(book_id), quantity, unit_price)
            total_amount = order.total_amount

        bookstore_order_item_mutations_total.labels(operation="add").inc()
        logger.info("order_item_added", order_id=order_id, book_id=book_id, quantity=quantity, total_amount=total_amount)
        return order

    def remove_item(self, order_id: str, book_id: str) -> Order:
        with self.repository.lock:
            order = self._get_or_raise(order_id)
            order.remove_item(book_id)
            total_amount = order.total_amount

        bookstore_order_item_mutations_total.labels(operation="remove").inc()
        logger.info("order_item_removed", order_id=order_id, book_id=book_id, total_amount=total_amount)
        return order

    def get_stats(self) -> dict:
        with self.repository.lock:
            orders = self.repository.get_all_orders()
            return {
                "total_orders": len(orders),
                "total_revenue": sum((order.total_amount for order in orders), 0.0),
                "status_breakdown": dict(Counter(order.status.value for order in orders)),
            }

    def seed_sample_orders(self) -> list[Order]:
        seeded = []
        with self.repository.lock:
            for user_id, items, status in SAMPLE_ORDERS:
                order = Order(
                    user_id=user_id,
                    items=[OrderItem(**item) for item in items],
                )
                order.set_status(status)
                seeded.append(self.repository.insert(order))
        logger.info("sample_orders_seeded", count=len(seeded))
        return seeded

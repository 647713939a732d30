from typing import Optional

from shared.storage.record_store import RecordStore

from .models import Order


class OrderRepository(RecordStore[Order]):

    def get_order(self, order_id: str) -> Optional[Order]:
        return self.find(order_id)

    def get_all_orders(self) -> list[Order]:
        return self.all()

    def get_orders_by_user(self, user_id: str) -> list[Order]:
        return self.filter(lambda order: order.user_id == user_id)

    def get_orders_by_status(self, status: str) -> list[Order]:
        return self.filter(lambda order: order.status.value == status)

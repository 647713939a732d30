from .setup import setup_observability, configure_logging
from .metrics import (
    bookstore_orders_created_total,
    bookstore_order_status_changes_total,
    bookstore_order_item_mutations_total,
    bookstore_gateway_upstream_failures_total
)

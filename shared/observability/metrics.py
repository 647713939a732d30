from prometheus_client import Counter

# Business Metrics
bookstore_orders_created_total = Counter(
    "bookstore_orders_created_total",
    "Total orders created"
)

bookstore_order_status_changes_total = Counter(
    "bookstore_order_status_changes_total",
    "Total order status updates",
    ["status"] # Labels: 'pending', 'confirmed', 'shipped', 'delivered', 'cancelled'
)

bookstore_order_item_mutations_total = Counter(
    "bookstore_order_item_mutations_total",
    "Total order line item changes",
    ["operation"] # Labels: 'add', 'remove'
)

bookstore_gateway_upstream_failures_total = Counter(
    "bookstore_gateway_upstream_failures_total",
    "Total proxied requests that could not reach their upstream",
    ["service"] # Labels: 'books', 'orders'
)

from prometheus_client import Counter

# Business Metrics
b2b_orders_total = Counter(
    "b2b_orders_total",
    "Total order placements processed",
    ["status"] # Labels: 'success', 'rejected', 'failed'
)

b2b_order_cancellations_total = Counter(
    "b2b_order_cancellations_total",
    "Total order cancellations processed",
    ["status"] # Labels: 'success', 'not_found'
)

b2b_stock_reserved_units_total = Counter(
    "b2b_stock_reserved_units_total",
    "Units of stock taken by placed orders"
)

b2b_stock_restored_units_total = Counter(
    "b2b_stock_restored_units_total",
    "Units of stock returned by cancelled orders"
)

b2b_products_created_total = Counter(
    "b2b_products_created_total",
    "Total products added to the catalog"
)

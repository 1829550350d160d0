from .setup import setup_observability
from .metrics import (
    b2b_orders_total,
    b2b_order_cancellations_total,
    b2b_stock_reserved_units_total,
    b2b_stock_restored_units_total,
    b2b_products_created_total
)

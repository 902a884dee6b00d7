from .setup import setup_observability
from .metrics import (
    titleflow_search_total,
    titleflow_checkout_total,
    titleflow_checkout_duration_seconds,
    titleflow_saga_compensation_total,
    titleflow_orders_fulfilled_total,
    titleflow_pending_fulfilments,
    titleflow_llm_requests_total
)

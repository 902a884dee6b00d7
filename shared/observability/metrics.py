from prometheus_client import Counter, Histogram, Gauge

# Business Metrics
titleflow_search_total = Counter(
    "titleflow_search_total",
    "Total address searches processed",
    ["mode", "outcome"] # mode: 'live' | 'mock', outcome: 'results' | 'empty' | 'pending' | 'error'
)

titleflow_checkout_total = Counter(
    "titleflow_checkout_total",
    "Total checkouts processed",
    ["status"] # Labels: 'success', 'failed', 'empty'
)

titleflow_checkout_duration_seconds = Histogram(
    "titleflow_checkout_duration_seconds",
    "Checkout duration in seconds"
)

titleflow_saga_compensation_total = Counter(
    "titleflow_saga_compensation_total",
    "Total saga compensations triggered",
    ["step_name"] # Labels: 'place_provider_order', 'create_order', etc.
)

titleflow_orders_fulfilled_total = Counter(
    "titleflow_orders_fulfilled_total",
    "Orders moved to completed by the fulfilment timer"
)

titleflow_pending_fulfilments = Gauge(
    "titleflow_pending_fulfilments",
    "Number of armed fulfilment timers"
)

titleflow_llm_requests_total = Counter(
    "titleflow_llm_requests_total",
    "Total assistant LLM calls",
    ["model", "kind", "outcome"] # kind: 'explain' | 'chat'
)

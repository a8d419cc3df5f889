"""Prometheus metrics for calculator usage, rejected input and IP lookups"""

from prometheus_client import Counter, Histogram

# Calculator metrics
calculation_counter = Counter(
    "toolhub_calculation_total",
    "Total calculations served",
    ["tool"],  # income_tax | loan | sales_tax | simple_interest | compound_interest | bmi | age | csv_to_json
)

invalid_argument_counter = Counter(
    "toolhub_invalid_argument_total",
    "Calculations rejected for invalid input",
    ["tool"],
)

# IP lookup metrics
ip_lookup_latency_histogram = Histogram(
    "ip_lookup_latency_seconds",
    "IP geolocation API response time",
    buckets=[0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

ip_lookup_failures_counter = Counter(
    "ip_lookup_failures_total",
    "Failed IP geolocation lookups",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(tool: str) -> None:
    calculation_counter.labels(tool=tool).inc()


def record_invalid_argument(tool: str) -> None:
    invalid_argument_counter.labels(tool=tool).inc()

from time import perf_counter
from typing import Mapping, Sequence

from prometheus_client import Counter, Histogram

# ---- METRICS (names are Prometheus-safe; units are in names) ----

TAGGER_REQUESTS = Counter(
    "yeuai_tagger_requests_total",
    "Upstream tagger calls by service and outcome",
    labelnames=("service", "outcome"),
)

PARSE_LATENCY_MS = Histogram(
    "yeuai_parse_latency_ms",
    "End-to-end latency of parse() in milliseconds",
    buckets=(25, 50, 100, 200, 400, 800, 1600, 3200, 6400),
)

PHRASES_EXTRACTED = Counter(
    "yeuai_phrases_extracted_total",
    "Phrases produced by parse(), by category",
    labelnames=("category",),
)

ERRORS_TOTAL = Counter(
    "yeuai_errors_total",
    "Count of errors by type",
    labelnames=("type",),
)

# ---- HELPERS ----

def timer_start() -> float:
    return perf_counter()

def timer_observe_ms(start: float) -> float:
    elapsed_ms = (perf_counter() - start) * 1000.0
    PARSE_LATENCY_MS.observe(elapsed_ms)
    return elapsed_ms

def record_request(service: str, outcome: str) -> None:
    TAGGER_REQUESTS.labels(service=service, outcome=outcome).inc()

def record_phrases(counts: Mapping[str, Sequence[str]]) -> None:
    for category, phrases in counts.items():
        if phrases:
            PHRASES_EXTRACTED.labels(category=category).inc(len(phrases))

def record_error(err_type: str) -> None:
    ERRORS_TOTAL.labels(type=err_type).inc()

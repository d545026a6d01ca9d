"""
Prometheus-based metrics for production monitoring.
Provides /metrics endpoint for scraping.
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response


# Counters
preview_requests_total = Counter(
    "preview_requests_total",
    "Total number of resolved preview requests",
    ["outcome"],  # render, redirect_permanent, redirect_editor, not_found
)

preview_access_decisions_total = Counter(
    "preview_access_decisions_total",
    "Total paywall access decisions for previews",
    ["level"],  # full, partial, deny
)

post_lookup_failures_total = Counter(
    "post_lookup_failures_total",
    "Total post lookups that raised",
)

# Histograms
post_lookup_duration_seconds = Histogram(
    "post_lookup_duration_seconds",
    "Post lookup by uuid duration",
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1, 5],
)


# Metrics endpoint router
router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )

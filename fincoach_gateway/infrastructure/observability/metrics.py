"""Prometheus metrics for monitoring simulations, health scores, imports and XP awards"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "fincoach_simulation_total",
    "Total savings simulations run",
    ["band"],  # excellent | good | fair | poor | critical
)

potential_savings_histogram = Histogram(
    "fincoach_potential_savings",
    "Monthly potential savings found by simulations",
    buckets=[0, 500, 1000, 2500, 5000, 10000, 25000, 50000],
)

# Health score metrics
health_score_bucket_counter = Counter(
    "fincoach_health_score_bucket",
    "Four-component health scores by bucket",
    ["bucket"],  # 0-24, 25-49, 50-74, 75-100
)

# CSV import metrics
csv_rows_imported_counter = Counter(
    "fincoach_csv_rows_imported_total",
    "Expense rows imported from CSV",
)

csv_import_failures_counter = Counter(
    "fincoach_csv_import_failures_total",
    "Rejected CSV uploads",
)

# Gamification metrics
xp_award_counter = Counter(
    "fincoach_xp_awards_total",
    "XP awards granted",
    ["action"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(band: str, potential_savings: int) -> None:
    """Record simulation metrics for band distribution and savings size"""
    simulation_counter.labels(band=band).inc()
    potential_savings_histogram.observe(potential_savings)


def record_health_score(score: int) -> None:
    """Bucket four-component health scores for distribution analysis"""
    if score < 25:
        bucket = "0-24"
    elif score < 50:
        bucket = "25-49"
    elif score < 75:
        bucket = "50-74"
    else:
        bucket = "75-100"

    health_score_bucket_counter.labels(bucket=bucket).inc()

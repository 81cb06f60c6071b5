"""Prometheus metrics declarations for mr-mirror.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never MR ids, branch names or SHAs.
"""

from prometheus_client import Counter, Histogram

# ── Webhook-level metrics ──────────────────────────────────────────

EVENTS_TOTAL = Counter(
    "mr_mirror_events_total",
    "Merge request webhook deliveries by final outcome",
    ["outcome"],
)

MIRROR_DURATION_SECONDS = Histogram(
    "mr_mirror_duration_seconds",
    "End-to-end handling time of one webhook delivery in seconds",
)

# ── Cherry-pick metrics ───────────────────────────────────────────

CHERRY_PICKS_TOTAL = Counter(
    "mr_mirror_cherry_picks_total",
    "Cherry-pick attempts by result",
    ["outcome"],
)

# ── GitLab API metrics ────────────────────────────────────────────

GITLAB_CALLS_TOTAL = Counter(
    "mr_mirror_gitlab_calls_total",
    "GitLab REST calls by operation and result",
    ["operation", "outcome"],
)

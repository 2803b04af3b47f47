"""
Centralized Prometheus metrics.

All application metrics are defined here to prevent duplication
and ensure consistent labeling across modules.
"""

from prometheus_client import Counter


# ── Directory Metrics ─────────────────────────────────────────────────────────

tool_listing_count = Counter(
    "nexushub_tool_listings_total",
    "Directory listings served",
    ["department"]
)

tool_created_count = Counter(
    "nexushub_tools_created_total",
    "Tools registered",
    ["access_level"]
)


# ── Suggestion Metrics ────────────────────────────────────────────────────────

suggestion_count = Counter(
    "nexushub_suggestions_total",
    "Tool suggestion requests by outcome",
    ["outcome"]  # ok | skipped | empty | error
)


# ── Persistence Metrics ───────────────────────────────────────────────────────

snapshot_write_count = Counter(
    "nexushub_snapshot_writes_total",
    "Snapshot writes per collection",
    ["collection"]
)

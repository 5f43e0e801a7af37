"""Prometheus metrics for the resolution pipeline."""

from prometheus_client import Counter

RESOLUTION_OUTCOMES = ("resolved", "unresolved", "transport_error", "error")

VIDEO_RESOLUTIONS_TOTAL = Counter(
    "bilifav_video_resolutions_total",
    "Video resolution attempts by outcome",
    ["outcome"],
)


def record_resolution(outcome: str) -> None:
    """Count one resolution attempt.

    Args:
        outcome: One of RESOLUTION_OUTCOMES.

    Raises:
        ValueError: If outcome is unknown.
    """
    if outcome not in RESOLUTION_OUTCOMES:
        raise ValueError(f"Unknown resolution outcome: {outcome}")
    VIDEO_RESOLUTIONS_TOTAL.labels(outcome=outcome).inc()

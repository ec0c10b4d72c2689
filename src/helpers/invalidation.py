"""CloudFront cache invalidation for the site distribution."""

from __future__ import annotations

from datetime import datetime, timezone


def caller_reference(now: datetime | None = None) -> str:
    now = now or datetime.now(timezone.utc)
    return f"site-{now.strftime('%Y%m%dT%H%M%S%fZ')}"


def create_invalidation(
    cloudfront,
    *,
    distribution_id: str,
    paths: list[str],
    reference: str | None = None,
) -> str:
    """Invalidate ``paths`` on a distribution and return the invalidation id."""
    if not paths:
        raise ValueError("At least one invalidation path is required")
    response = cloudfront.create_invalidation(
        DistributionId=distribution_id,
        InvalidationBatch={
            "Paths": {"Quantity": len(paths), "Items": list(paths)},
            "CallerReference": reference or caller_reference(),
        },
    )
    return response["Invalidation"]["Id"]

"""Runtime configuration helpers shared by the operator tools."""

from __future__ import annotations

import os


def _required_env(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def get_region() -> str:
    """Get the AWS region the site stack is deployed to."""
    return _required_env("AWS_DEFAULT_REGION")


def get_stack_name() -> str:
    """Get the CloudFormation stack name of the site."""
    return os.environ.get("SITE_STACK_NAME", "").strip() or "StaticSiteStack"


def get_required_pages() -> list[str]:
    """Get the object keys every deployment must contain (comma-separated)."""
    raw = os.environ.get("SITE_REQUIRED_PAGES", "").strip() or "index.html,403.html"
    parts = [p.strip().lstrip("/") for p in raw.split(",")]
    return [p for p in parts if p]


def get_invalidation_paths() -> list[str]:
    """Get the CloudFront paths to invalidate after a content change."""
    raw = os.environ.get("SITE_INVALIDATION_PATHS", "").strip() or "/*"
    parts = [p.strip() for p in raw.split(",")]
    return [p if p.startswith("/") else f"/{p}" for p in parts if p]

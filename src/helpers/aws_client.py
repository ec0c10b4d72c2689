"""Boto3 client factory for the site tooling (AWS or a local endpoint)."""

from __future__ import annotations

import os
from urllib.parse import urlparse

import boto3
from botocore.config import Config

# CloudFront, its certificates and CLOUDFRONT-scoped WAF resources live here.
DEFAULT_REGION = "us-east-1"


def _region() -> str:
    for name in ("AWS_DEFAULT_REGION", "AWS_REGION"):
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return DEFAULT_REGION


def _service_endpoint(service: str) -> str | None:
    specific_key = f"AWS_ENDPOINT_URL_{service.replace('-', '_').upper()}"
    return os.environ.get(specific_key) or os.environ.get("AWS_ENDPOINT_URL") or None


def _is_local_endpoint(endpoint: str | None) -> bool:
    if not endpoint:
        return False
    host = (urlparse(endpoint).hostname or "").lower()
    return host in {"localhost", "127.0.0.1", "::1"} or "localstack" in host


def _local_auth_kwargs(endpoint: str | None) -> dict[str, str]:
    if not _is_local_endpoint(endpoint):
        return {}
    return {
        "aws_access_key_id": os.environ.get("AWS_ACCESS_KEY_ID", "").strip() or "test",
        "aws_secret_access_key": os.environ.get("AWS_SECRET_ACCESS_KEY", "").strip() or "test",
        "aws_session_token": os.environ.get("AWS_SESSION_TOKEN", "").strip() or "test",
    }


def get_client(service: str):
    """Create a boto3 client for the given service."""
    endpoint = _service_endpoint(service)
    kwargs = {
        "region_name": _region(),
        "endpoint_url": endpoint,
        **_local_auth_kwargs(endpoint),
    }
    if service == "s3" and _is_local_endpoint(endpoint):
        kwargs["config"] = Config(s3={"addressing_style": "path"})
    return boto3.client(service, **kwargs)

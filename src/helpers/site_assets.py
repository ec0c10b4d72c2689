"""Checks on the content deployed to the site bucket."""

from __future__ import annotations

from collections.abc import Iterable

from botocore.exceptions import ClientError


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", "")).strip()


def object_exists(s3, *, bucket: str, key: str) -> bool:
    try:
        s3.head_object(Bucket=bucket, Key=key)
        return True
    except ClientError as exc:
        if _error_code(exc) in {"404", "NoSuchKey", "NotFound"}:
            return False
        raise


def find_missing_pages(s3, *, bucket: str, keys: Iterable[str]) -> list[str]:
    """Return the keys (in order) that are not present in ``bucket``."""
    return [key for key in keys if not object_exists(s3, bucket=bucket, key=key)]

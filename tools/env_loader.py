#!/usr/bin/env python3
"""Shared env-file loading helpers for local tooling."""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

SITE_REQUIRED_VARS = [
    "AWS_DEFAULT_REGION",
    "SITE_DOMAIN_NAME",
    "SITE_SUBDOMAIN",
    "SITE_HOSTED_ZONE_ID",
]


def _parse_env_file(path: Path) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw in path.read_text().splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if value[:1] == value[-1:] and value[:1] in {"'", '"'}:
            value = value[1:-1]
        if key:
            data[key] = value
    return data


def load_env_file(path: Path, *, required: bool, override: bool) -> None:
    if not path.exists():
        if required:
            raise SystemExit(f"Env file not found: {path}")
        return

    for key, value in _parse_env_file(path).items():
        if override or key not in os.environ:
            os.environ[key] = value


def require_env_vars(names: list[str]) -> None:
    missing = [name for name in names if not os.environ.get(name, "").strip()]
    if missing:
        raise SystemExit(f"Missing required environment variable(s): {', '.join(missing)}")


def load_site_env(shared: Path | None = None, local: Path | None = None) -> None:
    # Shared vars first, local overrides second.
    load_env_file(shared or PROJECT_ROOT / ".env.shared", required=True, override=False)
    load_env_file(local or PROJECT_ROOT / ".env.local", required=False, override=True)

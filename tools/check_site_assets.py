#!/usr/bin/env python3
"""Check that the deployed site bucket holds the pages the distribution serves.

The distribution answers `/` with `index.html` and 403s with `/403.html`;
both must exist in the bucket.

Usage:
  python tools/check_site_assets.py
  python tools/check_site_assets.py --bucket my-site-bucket --page about.html
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from env_loader import load_site_env

from src.config import get_required_pages, get_stack_name
from src.helpers.aws_client import get_client
from src.helpers.site_assets import find_missing_pages
from src.helpers.stack_outputs import StackOutputError, get_stack_outputs, require_output


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--bucket", default="", help="Site bucket (default: stack output)")
    parser.add_argument("--page", action="append", default=[], help="Extra page key to require (repeatable)")
    args = parser.parse_args()

    load_site_env()

    bucket = args.bucket.strip()
    if not bucket:
        try:
            bucket = require_output(get_stack_outputs(get_stack_name()), "SiteBucketName")
        except StackOutputError as exc:
            raise SystemExit(str(exc)) from exc

    pages = get_required_pages() + [p.lstrip("/") for p in args.page]
    missing = find_missing_pages(get_client("s3"), bucket=bucket, keys=pages)
    for page in pages:
        status = "MISSING" if page in missing else "ok"
        print(f"[assets] s3://{bucket}/{page}: {status}")
    if missing:
        raise SystemExit(1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Invalidate the site's CloudFront cache after a content change.

The distribution id is read from the site stack's `DistributionId` output
unless passed explicitly.

Examples:
  python tools/invalidate_site.py
  python tools/invalidate_site.py --path /index.html --path /403.html
  python tools/invalidate_site.py --distribution-id E1ABCDEFG
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from env_loader import load_site_env

from src.config import get_invalidation_paths, get_stack_name
from src.helpers.aws_client import get_client
from src.helpers.invalidation import create_invalidation
from src.helpers.stack_outputs import StackOutputError, get_stack_outputs, require_output


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--distribution-id", default="", help="Distribution id (default: stack output)")
    parser.add_argument("--path", action="append", default=[], help="Path to invalidate (repeatable)")
    args = parser.parse_args()

    load_site_env()

    distribution_id = args.distribution_id.strip()
    if not distribution_id:
        try:
            outputs = get_stack_outputs(get_stack_name())
            distribution_id = require_output(outputs, "DistributionId")
        except StackOutputError as exc:
            raise SystemExit(str(exc)) from exc

    paths = args.path or get_invalidation_paths()
    invalidation_id = create_invalidation(
        get_client("cloudfront"),
        distribution_id=distribution_id,
        paths=paths,
    )
    print(f"[invalidate] {distribution_id}: {', '.join(paths)} -> {invalidation_id}")


if __name__ == "__main__":
    main()

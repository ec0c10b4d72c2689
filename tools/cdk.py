#!/usr/bin/env python3
"""Small CDK wrapper that loads env files before invoking the CDK CLI.

Examples:
  python tools/cdk.py synth
  python tools/cdk.py diff
  python tools/cdk.py deploy StaticSiteStack --require-approval never
"""

from __future__ import annotations

import argparse
import os
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

from env_loader import PROJECT_ROOT, SITE_REQUIRED_VARS, load_site_env, require_env_vars


def _resolve_cdk_command() -> list[str]:
    cdk = shutil.which("cdk")
    if cdk:
        return [cdk]

    npx = shutil.which("npx")
    if npx:
        return [npx, "cdk"]

    raise SystemExit("Could not find `cdk` or `npx` on PATH. Install the AWS CDK CLI first.")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--shared-env-file",
        default=str(PROJECT_ROOT / ".env.shared"),
        help="Shared env file to load (default: .env.shared)",
    )
    parser.add_argument(
        "--env-file",
        default=str(PROJECT_ROOT / ".env.local"),
        help="Optional local env override file (default: .env.local)",
    )
    parser.add_argument("cdk_args", nargs=argparse.REMAINDER, help="Arguments passed to the CDK CLI")
    args = parser.parse_args()

    if not args.cdk_args:
        raise SystemExit("Missing CDK arguments. Example: python tools/cdk.py diff")

    load_site_env(Path(args.shared_env_file), Path(args.env_file))
    require_env_vars(SITE_REQUIRED_VARS)

    # Keep `python3 app.py` inside the interpreter (venv) running this wrapper.
    python_bin = str(Path(sys.executable).parent)
    current_path = os.environ.get("PATH", "")
    os.environ["PATH"] = f"{python_bin}{os.pathsep}{current_path}" if current_path else python_bin
    cmd = _resolve_cdk_command() + args.cdk_args

    print(f"[cdk] Running: {shlex.join(cmd)}")
    subprocess.run(cmd, cwd=PROJECT_ROOT, check=True)


if __name__ == "__main__":
    main()

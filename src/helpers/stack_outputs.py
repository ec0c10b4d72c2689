"""Read the deployed site stack's CloudFormation outputs."""

from __future__ import annotations

from botocore.exceptions import ClientError

from src.helpers.aws_client import get_client


class StackOutputError(RuntimeError):
    """The stack or one of its outputs is missing."""


def get_stack_outputs(stack_name: str, cfn=None) -> dict[str, str]:
    """Map output key to value for a deployed stack."""
    cfn = cfn or get_client("cloudformation")
    try:
        response = cfn.describe_stacks(StackName=stack_name)
    except ClientError as exc:
        raise StackOutputError(f"Stack not found: {stack_name}") from exc

    stacks = response.get("Stacks") or []
    if not stacks:
        raise StackOutputError(f"Stack not found: {stack_name}")
    return {
        out["OutputKey"]: out["OutputValue"]
        for out in stacks[0].get("Outputs", []) or []
        if "OutputKey" in out and "OutputValue" in out
    }


def require_output(outputs: dict[str, str], key: str) -> str:
    value = outputs.get(key, "").strip()
    if not value:
        raise StackOutputError(f"Stack output missing: {key}")
    return value

"""CDK environment configuration for the static site."""

import ipaddress
import logging
import os

logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "AWS_DEFAULT_REGION",
    "SITE_DOMAIN_NAME",
    "SITE_SUBDOMAIN",
    "SITE_HOSTED_ZONE_ID",
)

# CloudFront only accepts ACM certificates and CLOUDFRONT-scoped WAF resources
# created in us-east-1.
SITE_REGION = "us-east-1"


def _required(name: str) -> str:
    value = os.environ.get(name, "").strip()
    if not value:
        raise ValueError(f"Missing required environment variable: {name}")
    return value


def _required_region() -> str:
    value = _required("AWS_DEFAULT_REGION")
    if value != SITE_REGION:
        raise ValueError(f"AWS_DEFAULT_REGION must be {SITE_REGION}, got: {value}")
    return value


def _removal_policy() -> str:
    value = os.environ.get("SITE_REMOVAL_POLICY", "destroy").strip().lower() or "destroy"
    if value not in {"destroy", "retain"}:
        raise ValueError("SITE_REMOVAL_POLICY must be one of: destroy, retain")
    return value


def _get_csv(name: str) -> list[str]:
    raw = os.environ.get(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


def _blocked_ips() -> list[str]:
    addresses = []
    for item in _get_csv("SITE_BLOCKED_IPS"):
        try:
            network = ipaddress.IPv4Network(item, strict=False)
        except ValueError as exc:
            raise ValueError(f"SITE_BLOCKED_IPS contains an invalid IPv4 address or CIDR: {item}") from exc
        addresses.append(network.with_prefixlen)
    if not addresses:
        logger.warning("SITE_BLOCKED_IPS is empty; the BlockSpecificIPs rule will not block anything")
    return addresses


def get_site_config() -> dict:
    """Get the static site configuration from the environment."""
    for key in REQUIRED_KEYS:
        _required(key)

    domain_name = _required("SITE_DOMAIN_NAME").lower().rstrip(".")
    subdomain = _required("SITE_SUBDOMAIN").lower().strip(".")

    return {
        "account": os.environ.get("CDK_DEFAULT_ACCOUNT", "").strip() or None,
        "region": _required_region(),
        "domain_name": domain_name,
        "subdomain": subdomain,
        "site_domain": f"{subdomain}.{domain_name}",
        "hosted_zone_id": _required("SITE_HOSTED_ZONE_ID"),
        "asset_dir": os.environ.get("SITE_ASSET_DIR", "").strip() or "site",
        "blocked_ips": _blocked_ips(),
        "removal_policy": _removal_policy(),
        "stack_name": os.environ.get("SITE_STACK_NAME", "").strip() or "StaticSiteStack",
    }

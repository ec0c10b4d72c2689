"""Shared test fixtures."""

import os

import boto3
import pytest
from moto import mock_aws


@pytest.fixture(autouse=True)
def default_project_env(monkeypatch):
    """Provide deterministic default env vars for tests."""
    defaults = {
        "AWS_ACCESS_KEY_ID": "testing",
        "AWS_SECRET_ACCESS_KEY": "testing",
        "AWS_SECURITY_TOKEN": "testing",
        "AWS_SESSION_TOKEN": "testing",
        "AWS_DEFAULT_REGION": "us-east-1",
        "CDK_DEFAULT_ACCOUNT": "123456789012",
        "SITE_DOMAIN_NAME": "example.com",
        "SITE_SUBDOMAIN": "www",
        "SITE_HOSTED_ZONE_ID": "Z0123456789ABCDEFGHIJ",
    }
    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
    for key in (
        "AWS_ENDPOINT_URL",
        "SITE_ASSET_DIR",
        "SITE_BLOCKED_IPS",
        "SITE_REMOVAL_POLICY",
        "SITE_STACK_NAME",
        "SITE_REQUIRED_PAGES",
        "SITE_INVALIDATION_PATHS",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def aws_credentials():
    """Mock AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def s3_client(aws_credentials):
    """Create a mocked S3 client."""
    with mock_aws():
        yield boto3.client("s3", region_name="us-east-1")


@pytest.fixture
def distribution_config():
    """DistributionConfig as generated for an S3 bucket origin before OAC wiring."""
    return {
        "DefaultRootObject": "index.html",
        "Enabled": True,
        "Origins": [
            {
                "Id": "StaticSiteStackDistributionOrigin1",
                "DomainName": "site-bucket.s3-website-us-east-1.amazonaws.com",
                "S3OriginConfig": {"OriginAccessIdentity": "origin-access-identity/cloudfront/E2OAI"},
                "CustomOriginConfig": {"OriginProtocolPolicy": "http-only"},
            }
        ],
        "DefaultCacheBehavior": {
            "TargetOriginId": "StaticSiteStackDistributionOrigin1",
            "ViewerProtocolPolicy": "redirect-to-https",
        },
    }

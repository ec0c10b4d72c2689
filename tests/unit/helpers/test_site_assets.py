"""Tests for site_assets.py."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from src.helpers.site_assets import find_missing_pages, object_exists


@pytest.fixture
def site_bucket(s3_client):
    s3_client.create_bucket(Bucket="site-bucket")
    s3_client.put_object(Bucket="site-bucket", Key="index.html", Body=b"<h1>index</h1>")
    return "site-bucket"


def test_object_exists(s3_client, site_bucket):
    assert object_exists(s3_client, bucket=site_bucket, key="index.html") is True
    assert object_exists(s3_client, bucket=site_bucket, key="403.html") is False


def test_find_missing_pages(s3_client, site_bucket):
    missing = find_missing_pages(s3_client, bucket=site_bucket, keys=["index.html", "403.html", "about.html"])
    assert missing == ["403.html", "about.html"]


def test_find_missing_pages_all_present(s3_client, site_bucket):
    s3_client.put_object(Bucket=site_bucket, Key="403.html", Body=b"<h1>403</h1>")
    assert find_missing_pages(s3_client, bucket=site_bucket, keys=["index.html", "403.html"]) == []


def test_object_exists_propagates_access_errors():
    s3 = MagicMock()
    s3.head_object.side_effect = ClientError({"Error": {"Code": "403", "Message": "Forbidden"}}, "HeadObject")

    with pytest.raises(ClientError):
        object_exists(s3, bucket="site-bucket", key="index.html")

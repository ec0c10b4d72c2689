"""Origin Access Control (OAC) wiring for an S3-backed CloudFront distribution.

CloudFront distributions built from an S3 origin carry an origin access
identity (OAI) slot and, depending on the origin type, a custom origin block.
Switching the origin to OAC means rewriting four properties of the origin and
granting the distribution read access through the bucket policy:

- ``S3OriginConfig.OriginAccessIdentity`` is cleared
- ``CustomOriginConfig`` is removed (it is invalid next to OAC)
- ``DomainName`` becomes the bucket's regional domain name
- ``OriginAccessControlId`` points at the OAC

The overrides are computed once by :func:`origin_overrides` and applied either
to a plain ``DistributionConfig`` document (:func:`wire_distribution_config`)
or to a synthesized ``CfnDistribution`` (:func:`apply_origin_access`).
"""

from __future__ import annotations

import copy
import logging

from aws_cdk import Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

logger = logging.getLogger(__name__)

CLOUDFRONT_SERVICE_PRINCIPAL = "cloudfront.amazonaws.com"


class _Delete:
    def __repr__(self) -> str:
        return "DELETE"


# Marks an override path that must be structurally absent after wiring.
DELETE = _Delete()


def origin_overrides(
    *,
    bucket_regional_domain_name: str,
    origin_access_control_id: str,
    origin_index: int = 0,
) -> dict[str, object]:
    """Property overrides, relative to ``DistributionConfig``, for one origin."""
    prefix = f"Origins.{origin_index}"
    return {
        f"{prefix}.S3OriginConfig.OriginAccessIdentity": "",
        f"{prefix}.CustomOriginConfig": DELETE,
        f"{prefix}.DomainName": bucket_regional_domain_name,
        f"{prefix}.OriginAccessControlId": origin_access_control_id,
    }


def _child(node, part: str, *, create: bool):
    if isinstance(node, list):
        return node[int(part)]
    if part not in node:
        if not create:
            return None
        node[part] = {}
    return node[part]


def _set_path(document: dict, path: str, value) -> None:
    *parents, leaf = path.split(".")
    node = document
    for part in parents:
        node = _child(node, part, create=True)
    if isinstance(node, list):
        node[int(leaf)] = value
    else:
        node[leaf] = value


def _delete_path(document: dict, path: str) -> None:
    *parents, leaf = path.split(".")
    node = document
    for part in parents:
        node = _child(node, part, create=False)
        if node is None:
            return
    node.pop(leaf, None)


def wire_distribution_config(
    distribution_config: dict,
    *,
    bucket_regional_domain_name: str,
    origin_access_control_id: str,
    origin_index: int = 0,
) -> dict:
    """Return a copy of ``distribution_config`` with one origin switched to OAC.

    The input document is left untouched and wiring an already wired document
    returns an identical document.

    Raises:
        ValueError: if the document has no ``Origins`` list.
        IndexError: if ``origin_index`` does not name an existing origin.
    """
    origins = distribution_config.get("Origins")
    if not isinstance(origins, list):
        raise ValueError("DistributionConfig has no Origins list")
    if not 0 <= origin_index < len(origins):
        raise IndexError(f"Origin index {origin_index} out of range for {len(origins)} origin(s)")

    wired = copy.deepcopy(distribution_config)
    overrides = origin_overrides(
        bucket_regional_domain_name=bucket_regional_domain_name,
        origin_access_control_id=origin_access_control_id,
        origin_index=origin_index,
    )
    for path, value in overrides.items():
        if value is DELETE:
            _delete_path(wired, path)
        else:
            _set_path(wired, path, value)
    return wired


def distribution_source_arn(account: str, distribution_id: str, partition: str = "aws") -> str:
    """ARN a distribution presents as ``AWS:SourceArn`` when signing origin requests."""
    return f"arn:{partition}:cloudfront::{account}:distribution/{distribution_id}"


def bucket_read_statement(
    bucket_arn: str,
    account: str,
    distribution_id: str,
    partition: str = "aws",
) -> dict:
    """Bucket policy statement letting exactly one distribution read objects."""
    return {
        "Sid": "AllowCloudFrontServicePrincipalReadOnly",
        "Effect": "Allow",
        "Principal": {"Service": CLOUDFRONT_SERVICE_PRINCIPAL},
        "Action": ["s3:GetObject"],
        "Resource": [f"{bucket_arn}/*"],
        "Condition": {
            "StringEquals": {
                "AWS:SourceArn": distribution_source_arn(account, distribution_id, partition),
            },
        },
    }


def apply_origin_access(
    cfn_distribution: cloudfront.CfnDistribution,
    *,
    bucket_regional_domain_name: str,
    origin_access_control_id: str,
    origin_index: int = 0,
) -> None:
    """Apply the OAC overrides to a synthesized distribution via escape hatches."""
    overrides = origin_overrides(
        bucket_regional_domain_name=bucket_regional_domain_name,
        origin_access_control_id=origin_access_control_id,
        origin_index=origin_index,
    )
    for path, value in overrides.items():
        property_path = f"DistributionConfig.{path}"
        if value is DELETE:
            cfn_distribution.add_property_deletion_override(property_path)
        else:
            cfn_distribution.add_property_override(property_path, value)
    logger.info("Wired origin %d of %s to origin access control", origin_index, cfn_distribution.node.path)


class SiteOriginAccess(Construct):
    """Origin Access Control for a site bucket served by a distribution.

    Must be created after the distribution is declared: it rewrites the
    distribution's generated origin and adds the matching bucket policy.
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        bucket: s3.IBucket,
        distribution: cloudfront.Distribution,
        account: str,
        name: str,
        origin_index: int = 0,
    ) -> None:
        super().__init__(scope, construct_id)

        self.origin_access_control = cloudfront.CfnOriginAccessControl(
            self,
            "OriginAccessControl",
            origin_access_control_config=cloudfront.CfnOriginAccessControl.OriginAccessControlConfigProperty(
                name=name,
                origin_access_control_origin_type="s3",
                signing_behavior="always",
                signing_protocol="sigv4",
                description="S3 Access Control",
            ),
        )

        cfn_distribution: cloudfront.CfnDistribution = distribution.node.default_child
        apply_origin_access(
            cfn_distribution,
            bucket_regional_domain_name=bucket.bucket_regional_domain_name,
            origin_access_control_id=self.origin_access_control.attr_id,
            origin_index=origin_index,
        )

        self.policy_statement = iam.PolicyStatement.from_json(
            bucket_read_statement(
                bucket.bucket_arn,
                account,
                distribution.distribution_id,
                partition=Stack.of(self).partition,
            )
        )
        bucket.add_to_resource_policy(self.policy_statement)

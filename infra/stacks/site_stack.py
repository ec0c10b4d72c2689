"""Static site stack: private S3 bucket behind CloudFront, WAF and a custom domain."""

from aws_cdk import CfnOutput, Duration, RemovalPolicy, Stack
from aws_cdk import aws_certificatemanager as acm
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_route53 as route53
from aws_cdk import aws_route53_targets as targets
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3deploy
from aws_cdk import aws_wafv2 as wafv2
from constructs import Construct

from infra.config import get_site_config
from infra.origin_access import SiteOriginAccess


def _visibility(metric_name: str) -> wafv2.CfnWebACL.VisibilityConfigProperty:
    return wafv2.CfnWebACL.VisibilityConfigProperty(
        sampled_requests_enabled=True,
        cloud_watch_metrics_enabled=True,
        metric_name=metric_name,
    )


class StaticSiteConstruct(Construct):
    def __init__(self, scope: Construct, construct_id: str, *, account: str, config: dict) -> None:
        super().__init__(scope, construct_id)

        domain_name: str = config["domain_name"]
        subdomain: str = config["subdomain"]
        site_domain: str = config["site_domain"]
        removal = (
            RemovalPolicy.DESTROY
            if config["removal_policy"] == "destroy"
            else RemovalPolicy.RETAIN
        )

        hosted_zone = route53.PublicHostedZone.from_hosted_zone_attributes(
            self,
            "Route53PublicHostedZone",
            hosted_zone_id=config["hosted_zone_id"],
            zone_name=domain_name,
        )

        certificate = acm.Certificate(
            self,
            "SiteCertificate",
            domain_name=site_domain,
            validation=acm.CertificateValidation.from_dns(hosted_zone),
        )

        self.bucket = s3.Bucket(
            self,
            "Bucket",
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            removal_policy=removal,
            auto_delete_objects=removal == RemovalPolicy.DESTROY,
            enforce_ssl=True,
        )

        # Block list for specific client addresses; empty unless SITE_BLOCKED_IPS is set.
        ip_set = wafv2.CfnIPSet(
            self,
            "IPSet",
            addresses=config["blocked_ips"],
            ip_address_version="IPV4",
            scope="CLOUDFRONT",
        )

        web_acl = wafv2.CfnWebACL(
            self,
            "WebAcl",
            scope="CLOUDFRONT",
            default_action=wafv2.CfnWebACL.DefaultActionProperty(allow={}),
            rules=[
                wafv2.CfnWebACL.RuleProperty(
                    name="BlockSpecificIPs",
                    priority=0,
                    action=wafv2.CfnWebACL.RuleActionProperty(block={}),
                    statement=wafv2.CfnWebACL.StatementProperty(
                        ip_set_reference_statement=wafv2.CfnWebACL.IPSetReferenceStatementProperty(
                            arn=ip_set.attr_arn,
                        ),
                    ),
                    visibility_config=_visibility("BlockSpecificIPs"),
                ),
            ],
            visibility_config=_visibility("WebAcl"),
        )

        self.distribution = cloudfront.Distribution(
            self,
            "Distribution",
            default_behavior=cloudfront.BehaviorOptions(
                origin=origins.S3BucketOrigin.with_bucket_defaults(self.bucket),
                viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
            ),
            default_root_object="index.html",
            error_responses=[
                cloudfront.ErrorResponse(
                    http_status=403,
                    response_http_status=403,
                    response_page_path="/403.html",
                    ttl=Duration.minutes(30),
                ),
            ],
            web_acl_id=web_acl.attr_arn,
            domain_names=[site_domain],
            certificate=certificate,
        )

        s3deploy.BucketDeployment(
            self,
            "BucketsDeployment",
            sources=[s3deploy.Source.asset(config["asset_dir"])],
            destination_bucket=self.bucket,
            distribution=self.distribution,
            distribution_paths=["/*"],
        )

        route53.ARecord(
            self,
            "AliasRecord",
            zone=hosted_zone,
            record_name=subdomain,
            target=route53.RecordTarget.from_alias(targets.CloudFrontTarget(self.distribution)),
        )

        # Runs last: rewrites the distribution's generated origin.
        self.origin_access = SiteOriginAccess(
            self,
            "OriginAccess",
            bucket=self.bucket,
            distribution=self.distribution,
            account=account,
            name=f"{site_domain.replace('.', '-')}-oac"[:64],
        )


class StaticSiteStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, config: dict | None = None, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        config = config or get_site_config()
        site = StaticSiteConstruct(self, "StaticSiteConstruct", account=self.account, config=config)

        CfnOutput(self, "SiteBucketName", value=site.bucket.bucket_name)
        CfnOutput(self, "DistributionId", value=site.distribution.distribution_id)
        CfnOutput(self, "SiteCloudFrontDomain", value=site.distribution.distribution_domain_name)
        CfnOutput(self, "SiteUrl", value=f"https://{config['site_domain']}")

"""CloudFront distribution serving the site bucket."""

from typing import cast

from aws_cdk import Stack
from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_cloudfront_origins as origins
from aws_cdk import aws_iam as iam
from aws_cdk import aws_s3 as s3
from constructs import Construct

DEFAULT_ROOT_OBJECT = "index.html"


class CloudFrontDistribution(Construct):
  """CloudFront distribution with a private S3 bucket origin.

  The origin is reached through an Origin Access Control. The matching
  bucket policy is written by ``grant_origin_read`` rather than by the
  origin helper, so the permission is visible here.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    bucket: s3.IBucket,
  ) -> None:
    super().__init__(scope, id)

    self.bucket = bucket

    self.origin_access_control = cloudfront.S3OriginAccessControl(
      self,
      "OriginAccessControl",
      signing=cloudfront.Signing.SIGV4_ALWAYS,
    )

    self.distribution = cloudfront.Distribution(
      self,
      "Distribution",
      default_behavior=cloudfront.BehaviorOptions(
        origin=origins.S3BucketOrigin.with_bucket_defaults(bucket),
        viewer_protocol_policy=cloudfront.ViewerProtocolPolicy.REDIRECT_TO_HTTPS,
      ),
      default_root_object=DEFAULT_ROOT_OBJECT,
    )

    # Single origin, index 0
    cfn_distribution = cast(
      cloudfront.CfnDistribution, self.distribution.node.default_child
    )
    cfn_distribution.add_property_override(
      "DistributionConfig.Origins.0.OriginAccessControlId",
      self.origin_access_control.origin_access_control_id,
    )

    self.grant_origin_read()

  @property
  def distribution_arn(self) -> str:
    return Stack.of(self).format_arn(
      service="cloudfront",
      region="",
      resource="distribution",
      resource_name=self.distribution.distribution_id,
    )

  def grant_origin_read(self) -> None:
    """Allow this distribution, and only it, to read objects from the bucket."""
    self.bucket.add_to_resource_policy(
      iam.PolicyStatement(
        sid="AllowCloudFrontServicePrincipalReadOnly",
        actions=["s3:GetObject"],
        resources=[self.bucket.arn_for_objects("*")],
        principals=[iam.ServicePrincipal("cloudfront.amazonaws.com")],
        conditions={"StringEquals": {"AWS:SourceArn": self.distribution_arn}},
      )
    )

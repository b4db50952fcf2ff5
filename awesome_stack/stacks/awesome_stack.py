"""CDK stack for one stage of the static website."""

from typing import Any

import aws_cdk as cdk
from constructs import Construct

from awesome_stack.cdk_constructs import StaticSiteConstruct
from awesome_stack.config import StackConfig


class AwesomeStack(cdk.Stack):
  """Stack holding all resources of one deployment stage."""

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    config: StackConfig,
    **kwargs: Any,
  ) -> None:
    super().__init__(scope, id, **kwargs)

    self.site = StaticSiteConstruct(
      self,
      "Site",
      website_dir=config.website_dir,
    )

    # Outputs live on the stack so their keys stay stable for scripts
    cdk.CfnOutput(
      self,
      "DeploymentUrl",
      value=self.site.deployment_url,
      description="Public URL of the CloudFront distribution",
    )
    cdk.CfnOutput(
      self,
      "BucketName",
      value=self.site.storage.bucket.bucket_name,
      description="S3 bucket name",
    )
    cdk.CfnOutput(
      self,
      "DistributionId",
      value=self.site.cdn.distribution.distribution_id,
      description="CloudFront distribution ID",
    )

    cdk.Tags.of(self).add("Project", config.base_name)
    cdk.Tags.of(self).add("Stage", config.stage)
    if config.owner:
      cdk.Tags.of(self).add("Owner", config.owner)

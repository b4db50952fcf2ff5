"""Composite construct for the complete static website."""

from pathlib import Path

from constructs import Construct

from .distribution import CloudFrontDistribution
from .site_deployment import SiteDeployment
from .storage import StorageBucket


class StaticSiteConstruct(Construct):
  """Complete static website infrastructure.

  Creates:
  - S3 bucket for the built site (destroyed with the stack)
  - CloudFront distribution with HTTPS, reading the bucket through OAC
  - Bucket deployment that uploads the site and invalidates the cache
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_dir: Path | str,
  ) -> None:
    super().__init__(scope, id)

    # Storage
    self.storage = StorageBucket(self, "Storage")

    # CloudFront Distribution
    self.cdn = CloudFrontDistribution(
      self,
      "Cdn",
      bucket=self.storage.bucket,
    )

    # Upload + invalidation, into the same bucket the distribution fronts
    self.deployment = SiteDeployment(
      self,
      "Deployment",
      website_dir=website_dir,
      bucket=self.storage.bucket,
      distribution=self.cdn.distribution,
    )

  @property
  def deployment_url(self) -> str:
    return f"https://{self.cdn.distribution.distribution_domain_name}"

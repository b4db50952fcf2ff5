"""Upload of the built website and CloudFront cache invalidation."""

import logging
from pathlib import Path

from aws_cdk import aws_cloudfront as cloudfront
from aws_cdk import aws_s3 as s3
from aws_cdk import aws_s3_deployment as s3_deploy
from constructs import Construct

logger = logging.getLogger(__name__)

# Entry points only; other cached paths expire on their own TTL.
INVALIDATION_PATHS = ("/", "/index.html")


class WebsiteAssetsError(ValueError):
  """Raised when the website build directory is missing or empty."""


def validate_website_dir(path: Path | str) -> Path:
  """Check that ``path`` is a directory holding at least one file.

  Returns:
    The resolved directory path.

  Raises:
    WebsiteAssetsError: If the directory is missing, not a directory, or
      contains no files.
  """
  website_dir = Path(path).resolve()
  if not website_dir.exists():
    raise WebsiteAssetsError(f"Website directory not found: {website_dir}")
  if not website_dir.is_dir():
    raise WebsiteAssetsError(f"Website path is not a directory: {website_dir}")

  file_count = sum(1 for p in website_dir.rglob("*") if p.is_file())
  if file_count == 0:
    raise WebsiteAssetsError(
      f"Website directory is empty: {website_dir}; build the site before deploying"
    )

  logger.debug("Validated %d website files in %s", file_count, website_dir)
  return website_dir


class SiteDeployment(Construct):
  """Mirrors the local website build into the bucket.

  Objects without a local counterpart are removed. After the upload the
  distribution cache is invalidated for ``INVALIDATION_PATHS`` only.
  """

  def __init__(
    self,
    scope: Construct,
    id: str,
    *,
    website_dir: Path | str,
    bucket: s3.IBucket,
    distribution: cloudfront.IDistribution,
  ) -> None:
    super().__init__(scope, id)

    source_dir = validate_website_dir(website_dir)

    self.deployment = s3_deploy.BucketDeployment(
      self,
      "BucketDeployment",
      sources=[s3_deploy.Source.asset(str(source_dir))],
      destination_bucket=bucket,
      distribution=distribution,
      distribution_paths=list(INVALIDATION_PATHS),
      prune=True,
    )

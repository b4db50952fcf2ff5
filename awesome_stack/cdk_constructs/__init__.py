"""CDK constructs for static website infrastructure."""

from .distribution import CloudFrontDistribution
from .site_deployment import (
  INVALIDATION_PATHS,
  SiteDeployment,
  WebsiteAssetsError,
  validate_website_dir,
)
from .static_site import StaticSiteConstruct
from .storage import StorageBucket

__all__ = [
  "INVALIDATION_PATHS",
  "CloudFrontDistribution",
  "SiteDeployment",
  "StaticSiteConstruct",
  "StorageBucket",
  "WebsiteAssetsError",
  "validate_website_dir",
]

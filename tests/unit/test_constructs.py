"""Tests for the individual site constructs."""

from pathlib import Path

import aws_cdk as cdk
import pytest
from aws_cdk.assertions import Match, Template

from awesome_stack.cdk_constructs import (
  INVALIDATION_PATHS,
  CloudFrontDistribution,
  SiteDeployment,
  StorageBucket,
  WebsiteAssetsError,
  validate_website_dir,
)


class TestStorageBucket:
  """Test the StorageBucket construct."""

  def test_no_extra_bucket_rules(self, stack: cdk.Stack) -> None:
    """Verify no website hosting, versioning or lifecycle rules are declared."""
    StorageBucket(stack, "Storage")
    template = Template.from_stack(stack)

    template.has_resource_properties(
      "AWS::S3::Bucket",
      {
        "WebsiteConfiguration": Match.absent(),
        "VersioningConfiguration": Match.absent(),
        "LifecycleConfiguration": Match.absent(),
      },
    )

  def test_auto_delete_objects(self, stack: cdk.Stack) -> None:
    """Verify the auto-delete custom resource targets the bucket."""
    storage = StorageBucket(stack, "Storage")
    template = Template.from_stack(stack)
    bucket_id = stack.get_logical_id(storage.bucket.node.default_child)

    template.has_resource_properties(
      "Custom::S3AutoDeleteObjects",
      {"BucketName": {"Ref": bucket_id}},
    )


class TestCloudFrontDistribution:
  """Test the CloudFrontDistribution construct."""

  @pytest.fixture
  def template(self, stack: cdk.Stack) -> Template:
    storage = StorageBucket(stack, "Storage")
    CloudFrontDistribution(stack, "Cdn", bucket=storage.bucket)
    return Template.from_stack(stack)

  def test_single_origin(self, template: Template) -> None:
    """Verify one origin with no legacy origin access identity."""
    template.has_resource_properties(
      "AWS::CloudFront::Distribution",
      {
        "DistributionConfig": {
          "Origins": [
            Match.object_like(
              {
                "OriginAccessControlId": Match.any_value(),
                "S3OriginConfig": {"OriginAccessIdentity": ""},
              }
            )
          ],
        },
      },
    )

  def test_bucket_policy_service_principal(self, template: Template) -> None:
    """Verify the read grant targets the CloudFront service principal."""
    template.has_resource_properties(
      "AWS::S3::BucketPolicy",
      {
        "PolicyDocument": {
          "Statement": Match.array_with(
            [
              Match.object_like(
                {
                  "Action": "s3:GetObject",
                  "Effect": "Allow",
                  "Principal": {"Service": "cloudfront.amazonaws.com"},
                  "Condition": {
                    "StringEquals": {"AWS:SourceArn": Match.any_value()},
                  },
                }
              )
            ]
          ),
        },
      },
    )


class TestSiteDeployment:
  """Test the SiteDeployment construct."""

  def test_invalidation_paths_constant(self) -> None:
    """Verify the fixed invalidation set."""
    assert set(INVALIDATION_PATHS) == {"/", "/index.html"}
    assert len(INVALIDATION_PATHS) == 2

  def test_deploys_into_given_bucket(self, stack: cdk.Stack, website_dir: Path) -> None:
    """Verify the deployment uploads into the given bucket."""
    storage = StorageBucket(stack, "Storage")
    cdn = CloudFrontDistribution(stack, "Cdn", bucket=storage.bucket)
    SiteDeployment(
      stack,
      "Deployment",
      website_dir=website_dir,
      bucket=storage.bucket,
      distribution=cdn.distribution,
    )
    template = Template.from_stack(stack)
    bucket_id = stack.get_logical_id(storage.bucket.node.default_child)

    template.has_resource_properties(
      "Custom::CDKBucketDeployment",
      {
        "DestinationBucketName": {"Ref": bucket_id},
        "DistributionPaths": ["/", "/index.html"],
      },
    )

  def test_empty_dir_declares_nothing(self, stack: cdk.Stack, tmp_path: Path) -> None:
    """Verify an empty build directory fails before the deployment is added."""
    storage = StorageBucket(stack, "Storage")
    cdn = CloudFrontDistribution(stack, "Cdn", bucket=storage.bucket)

    with pytest.raises(WebsiteAssetsError):
      SiteDeployment(
        stack,
        "Deployment",
        website_dir=tmp_path,
        bucket=storage.bucket,
        distribution=cdn.distribution,
      )

    template = Template.from_stack(stack)
    template.resource_count_is("Custom::CDKBucketDeployment", 0)


class TestValidateWebsiteDir:
  """Test validate_website_dir."""

  def test_returns_resolved_path(self, website_dir: Path) -> None:
    """A directory with files is accepted."""
    assert validate_website_dir(str(website_dir)) == website_dir.resolve()

  def test_nested_files_count(self, tmp_path: Path) -> None:
    """Files in subdirectories make the directory non-empty."""
    (tmp_path / "assets").mkdir()
    (tmp_path / "assets" / "style.css").write_text("body {}")

    assert validate_website_dir(tmp_path) == tmp_path.resolve()

  def test_only_empty_subdirectories(self, tmp_path: Path) -> None:
    """Empty subdirectories do not count as content."""
    (tmp_path / "assets").mkdir()

    with pytest.raises(WebsiteAssetsError, match="empty"):
      validate_website_dir(tmp_path)

  def test_missing(self, tmp_path: Path) -> None:
    """A missing directory is rejected."""
    with pytest.raises(WebsiteAssetsError, match="not found"):
      validate_website_dir(tmp_path / "missing")

  def test_file_instead_of_directory(self, tmp_path: Path) -> None:
    """A regular file is rejected."""
    index = tmp_path / "index.html"
    index.write_text("<html></html>")

    with pytest.raises(WebsiteAssetsError, match="not a directory"):
      validate_website_dir(index)

  def test_is_value_error(self) -> None:
    """WebsiteAssetsError is a ValueError."""
    assert issubclass(WebsiteAssetsError, ValueError)

"""S3 bucket holding the built website."""

from aws_cdk import RemovalPolicy
from aws_cdk import aws_s3 as s3
from constructs import Construct


class StorageBucket(Construct):
  """S3 bucket for the site's build output.

  The bucket is removed with the stack. Objects are purged first so a
  non-empty bucket never blocks teardown.
  """

  def __init__(self, scope: Construct, id: str) -> None:
    super().__init__(scope, id)

    self.bucket = s3.Bucket(
      self,
      "Bucket",
      removal_policy=RemovalPolicy.DESTROY,
      auto_delete_objects=True,
    )

#!/usr/bin/env python3
"""Invalidate CloudFront cache paths of a deployed stage.

A deployment only invalidates "/" and "/index.html". Use this to refresh
other paths (e.g. /about.html) before their cache entries expire.
"""

import argparse
import sys
import time
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from deployment_url import get_stack_outputs

sys.path.insert(0, str(Path(__file__).parent.parent))

from awesome_stack.cdk_constructs.site_deployment import INVALIDATION_PATHS  # noqa: E402
from awesome_stack.config import DEFAULT_BASE_NAME, stack_name_for_stage  # noqa: E402


def normalize_paths(paths: list[str]) -> list[str]:
  """Prefix paths with '/' and drop duplicates, keeping order."""
  normalized: list[str] = []
  for path in paths:
    path = path.strip()
    if not path.startswith("/"):
      path = f"/{path}"
    if path not in normalized:
      normalized.append(path)
  return normalized


def create_invalidation(distribution_id: str, paths: list[str]) -> str:
  """Create a CloudFront invalidation.

  Args:
    distribution_id: CloudFront distribution ID
    paths: Paths to invalidate (e.g., ['/', '/index.html'])

  Returns:
    The invalidation ID
  """
  cloudfront = boto3.client("cloudfront")
  response = cloudfront.create_invalidation(
    DistributionId=distribution_id,
    InvalidationBatch={
      "Paths": {"Quantity": len(paths), "Items": paths},
      "CallerReference": str(time.time()),
    },
  )
  return str(response["Invalidation"]["Id"])


def main() -> None:
  """Invalidate paths on the distribution of a stage."""
  parser = argparse.ArgumentParser(
    description="Invalidate CloudFront cache paths for a static site stage"
  )
  parser.add_argument(
    "stage",
    help="Deployment stage (e.g., production)",
  )
  parser.add_argument(
    "paths",
    nargs="*",
    help=f"Paths to invalidate (default: {' '.join(INVALIDATION_PATHS)})",
  )
  parser.add_argument(
    "--base-name",
    default=DEFAULT_BASE_NAME,
    help=f"Stack base name (default: {DEFAULT_BASE_NAME})",
  )
  parser.add_argument(
    "--region",
    default=None,
    help="AWS region of the stack (default: from the environment)",
  )
  args = parser.parse_args()

  stack_name = stack_name_for_stage(args.stage, args.base_name)
  paths = normalize_paths(args.paths or list(INVALIDATION_PATHS))

  try:
    outputs = get_stack_outputs(stack_name, args.region)
    if "DistributionId" not in outputs:
      raise LookupError(f"Stack {stack_name} has no DistributionId output")
    invalidation_id = create_invalidation(outputs["DistributionId"], paths)
  except (BotoCoreError, ClientError, LookupError) as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)

  print(f"✓ Invalidation {invalidation_id} created for {stack_name}")
  for path in paths:
    print(f"  {path}")


if __name__ == "__main__":
  main()

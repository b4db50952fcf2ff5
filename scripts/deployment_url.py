#!/usr/bin/env python3
"""Print the public URL of a deployed stage for external automation."""

import argparse
import json
import sys
from pathlib import Path

import boto3
from botocore.exceptions import BotoCoreError, ClientError

sys.path.insert(0, str(Path(__file__).parent.parent))

from awesome_stack.config import DEFAULT_BASE_NAME, stack_name_for_stage  # noqa: E402


def get_stack_outputs(stack_name: str, region: str | None = None) -> dict[str, str]:
  """Read the CloudFormation outputs of a stack.

  Args:
    stack_name: The stack name (e.g., 'AwesomeStack-production')
    region: AWS region, or None for the default from the environment

  Returns:
    Mapping of output key to output value

  Raises:
    LookupError: If the stack does not exist
  """
  cloudformation = boto3.client("cloudformation", region_name=region)
  response = cloudformation.describe_stacks(StackName=stack_name)

  stacks = response.get("Stacks", [])
  if not stacks:
    raise LookupError(f"Stack not found: {stack_name}")

  return {
    output["OutputKey"]: output["OutputValue"]
    for output in stacks[0].get("Outputs", [])
  }


def get_deployment_url(stack_name: str, region: str | None = None) -> str:
  """Return the DeploymentUrl output of a stack."""
  outputs = get_stack_outputs(stack_name, region)
  try:
    return outputs["DeploymentUrl"]
  except KeyError:
    raise LookupError(f"Stack {stack_name} has no DeploymentUrl output") from None


def main() -> None:
  """Main entry point."""
  parser = argparse.ArgumentParser(
    description="Print the deployment URL of a static site stage"
  )
  parser.add_argument(
    "stage",
    help="Deployment stage (e.g., production, pr-1-awesome-branch)",
  )
  parser.add_argument(
    "--base-name",
    default=DEFAULT_BASE_NAME,
    help=f"Stack base name (default: {DEFAULT_BASE_NAME})",
  )
  parser.add_argument(
    "--region",
    default=None,
    help="AWS region (default: from the environment)",
  )
  parser.add_argument(
    "--format",
    choices=["url", "json"],
    default="url",
    help="Print only the URL, or every stack output as JSON (default: url)",
  )

  args = parser.parse_args()
  stack_name = stack_name_for_stage(args.stage, args.base_name)

  try:
    if args.format == "json":
      print(json.dumps(get_stack_outputs(stack_name, args.region), indent=2))
    else:
      print(get_deployment_url(stack_name, args.region))
  except (BotoCoreError, ClientError, LookupError) as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)


if __name__ == "__main__":
  main()

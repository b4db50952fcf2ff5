#!/usr/bin/env python3
"""CDK application entry point for the static website stack."""

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import aws_cdk as cdk

from awesome_stack.config import ConfigError, StackConfig
from awesome_stack.stacks.awesome_stack import AwesomeStack

logger = logging.getLogger(__name__)


def build_app(app: cdk.App, config: StackConfig) -> AwesomeStack:
  """Add the stack for ``config`` to ``app``."""
  logger.info("Stack %s, website from %s", config.stack_name, config.website_dir)
  return AwesomeStack(
    app,
    config.stack_name,
    config=config,
    env=cdk.Environment(
      account=os.getenv("CDK_DEFAULT_ACCOUNT"),
      region=config.region or os.getenv("CDK_DEFAULT_REGION"),
    ),
    description=f"Static website infrastructure ({config.stage})",
  )


def log_level_from_env(environ: Mapping[str, str] | None = None) -> int:
  """Resolve the LOG_LEVEL environment variable to a logging level."""
  env = os.environ if environ is None else environ
  name = env.get("LOG_LEVEL", "INFO").strip().upper()
  levels = logging.getLevelNamesMapping()
  if name not in levels:
    raise ConfigError(
      f"LOG_LEVEL={name!r} is not a logging level; use one of "
      f"{', '.join(sorted(levels))}"
    )
  return levels[name]


def main() -> None:
  """Create the CDK app with the stack for the current stage."""
  logging.basicConfig(
    level=log_level_from_env(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
  )

  app = cdk.App()

  # Stage comes from $STAGE; everything else from the optional config file
  config_path = app.node.try_get_context("config") or "stack.yaml"
  config = StackConfig.load(Path(config_path))

  build_app(app, config)
  app.synth()


if __name__ == "__main__":
  main()

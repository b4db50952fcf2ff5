"""Configuration loader for the static site stack."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_BASE_NAME = "AwesomeStack"
STAGE_ENV_VAR = "STAGE"


class ConfigError(ValueError):
  """Raised when the stack configuration cannot be resolved."""


def stack_name_for_stage(stage: str, base_name: str = DEFAULT_BASE_NAME) -> str:
  """Build the stack name for a deployment stage.

  Each stage gets its own stack so several deployments (one per branch,
  one for production) can live side by side.

  Examples:
    AwesomeStack-pr-1-awesome-branch
    AwesomeStack-production
  """
  return f"{base_name}-{stage}"


@dataclass
class StackConfig:
  """Configuration for one deployment of the static site."""

  stage: str
  base_name: str = DEFAULT_BASE_NAME
  website_dir: Path = Path("website")
  region: str | None = None
  owner: str | None = None

  @property
  def stack_name(self) -> str:
    return stack_name_for_stage(self.stage, self.base_name)

  @classmethod
  def from_yaml(cls, path: Path | str, *, stage: str) -> "StackConfig":
    """Load configuration from a YAML file for the given stage.

    Keys left empty fall back to their defaults. A relative ``website_dir``
    is resolved against the directory holding the file.

    Raises:
      ConfigError: If the file is not valid YAML, is not a mapping, or holds
        a non-string value for a known key.
    """
    try:
      with open(path) as f:
        data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
      raise ConfigError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
      raise ConfigError(f"{path}: expected a mapping at the top level")

    for key in ("base_name", "website_dir", "region", "owner"):
      value = data.get(key)
      if value is not None and not isinstance(value, str):
        raise ConfigError(
          f"{path}: {key} must be a string, got {type(value).__name__}"
        )

    website_dir = Path(data.get("website_dir") or "website")
    if not website_dir.is_absolute():
      website_dir = Path(path).parent / website_dir

    return cls(
      stage=stage,
      base_name=data.get("base_name") or DEFAULT_BASE_NAME,
      website_dir=website_dir,
      region=data.get("region") or None,
      owner=data.get("owner") or None,
    )

  @classmethod
  def load(
    cls,
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
  ) -> "StackConfig":
    """Resolve the configuration from the environment and an optional file.

    The stage is read from the ``STAGE`` environment variable. The YAML file
    is optional; when it is missing the defaults apply.
    """
    env = os.environ if environ is None else environ
    stage = env.get(STAGE_ENV_VAR, "")
    if not stage:
      raise ConfigError(
        f"{STAGE_ENV_VAR} is not set; export it to name the stack "
        f"(e.g. {STAGE_ENV_VAR}=production)"
      )

    if path is not None and Path(path).exists():
      return cls.from_yaml(path, stage=stage)
    return cls(stage=stage)

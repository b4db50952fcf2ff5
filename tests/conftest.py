"""Pytest fixtures for CDK construct tests."""

from pathlib import Path

import aws_cdk as cdk
import pytest

from awesome_stack.config import StackConfig


@pytest.fixture
def app() -> cdk.App:
  """Create a CDK App for testing."""
  return cdk.App()


@pytest.fixture
def stack(app: cdk.App) -> cdk.Stack:
  """Create a CDK Stack for testing."""
  return cdk.Stack(app, "TestStack", env=cdk.Environment(region="us-east-1"))


@pytest.fixture
def website_dir(tmp_path: Path) -> Path:
  """Create a built website with an index page."""
  site = tmp_path / "website"
  site.mkdir()
  (site / "index.html").write_text("<html><body>Hello</body></html>")
  return site


@pytest.fixture
def config(website_dir: Path) -> StackConfig:
  """Create a production configuration pointing at the test website."""
  return StackConfig(stage="production", website_dir=website_dir)

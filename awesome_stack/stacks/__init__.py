"""CDK stacks for static website infrastructure."""

from .awesome_stack import AwesomeStack

__all__ = ["AwesomeStack"]

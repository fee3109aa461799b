"""Run definition for threshold experiments."""

from .manifest import RunConfig

__all__ = ['RunConfig']

"""Testing utilities for WordTreeLib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']

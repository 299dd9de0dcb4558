"""Testing utilities for levelgraph consumers."""

from .fixtures import GraphTestHelper

__all__ = ['GraphTestHelper']

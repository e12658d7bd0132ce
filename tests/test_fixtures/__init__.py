"""Test fixtures and utilities for spatialrel testing.

Organized into logical modules:
- mocks: Mock shapes for exercising relation dispatch (MockShape)
- assertions: Custom assertion functions (assert_relation, assert_symmetric_relation)
"""

from .mocks import MockShape
from .assertions import assert_relation, assert_symmetric_relation

__all__ = [
    'MockShape',
    'assert_relation',
    'assert_symmetric_relation',
]

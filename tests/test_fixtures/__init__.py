"""Test fixtures and utilities for conefrustum testing.

- assertions: Custom assertion functions (assert_vec_close, assert_box_close)
"""

from .assertions import assert_vec_close, assert_box_close

__all__ = [
    'assert_vec_close',
    'assert_box_close',
]

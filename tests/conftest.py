"""
Pytest configuration for conefrustum tests.
Adds the src directory and the tests directory to sys.path so that test
imports work without an installed package.
"""
import sys
from pathlib import Path

_tests_path = Path(__file__).parent
_src_path = _tests_path.parent / "src"

for _path in (_src_path, _tests_path):
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

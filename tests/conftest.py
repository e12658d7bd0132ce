"""
Pytest configuration for spatialrel tests.
Adds src/ and the project root to sys.path so the suite runs without an install
and test modules can import shared helpers from tests.test_fixtures.
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
for path in (_project_root / "src", _project_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

"""
Pytest configuration for building_geometry tests.

Adds the project root to sys.path so the tests run against the working
tree without installing the package first.
"""
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

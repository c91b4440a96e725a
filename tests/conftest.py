"""Pytest configuration for the test suite."""

import sys
import os

# Add the project root and src directory to the Python path so tests can import from them
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)
sys.path.insert(0, os.path.join(ROOT, 'src'))

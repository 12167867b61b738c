# conftest.py — root-level pytest configuration
import os
import sys

# Make ``import group``, ``import uncertainty`` etc. work without an
# editable install.
sys.path.insert(0, os.path.dirname(__file__))

# Package __init__ modules hold no tests.
collect_ignore_glob = ["__init__.py"]

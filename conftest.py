"""Root conftest.py: make the local verparse package importable without installing it."""
import sys
import os

# Put the repository root first on sys.path so tests import this checkout's
# verparse/ rather than an installed copy.
_repo_root = os.path.dirname(os.path.abspath(__file__))
if _repo_root not in sys.path:
    sys.path.insert(0, _repo_root)

"""Add backend to path so 'from models import' and 'from reporting...' resolve when run from project root."""
import os
import sys

_backend_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _backend_dir not in sys.path:
    sys.path.insert(0, _backend_dir)
_tests_dir = os.path.abspath(os.path.dirname(__file__))
if _tests_dir not in sys.path:
    sys.path.insert(0, _tests_dir)

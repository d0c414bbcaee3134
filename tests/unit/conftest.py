"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

# Re-export commonly used helpers from root conftest
from tests.conftest import STORAGE, run_cmd, with_prompt

__all__ = ["STORAGE", "run_cmd", "with_prompt"]

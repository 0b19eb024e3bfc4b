"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Global registry isolation so tests registering extra backends do not leak.
- Console reset so log capture in one test does not affect the next.
"""

import sys
from pathlib import Path

import pytest

# Add src to path so we can import 'blockscribe' without installing it,
# and the repository root so 'tests.utils' resolves.
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path / "src"))
sys.path.insert(0, str(root_path))

from blockscribe.compiler.registry import _BACKENDS  # noqa: E402
from blockscribe.utils.console import reset_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_backend_registry():
  """
  Ensures that backends registered by a test (custom languages) do not leak
  between tests.
  """
  original_registry = _BACKENDS.copy()
  yield
  _BACKENDS.clear()
  _BACKENDS.update(original_registry)


@pytest.fixture(autouse=True)
def cleanup_console():
  """Ensures console output goes back to stdout after every test."""
  yield
  reset_console()

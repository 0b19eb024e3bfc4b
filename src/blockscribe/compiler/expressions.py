"""
Expression Emission Primitives.

Pure functions deciding parenthesization and classifying emitted operands.
The generator mixins build on these; rules may call them directly.
"""

import re
from typing import NamedTuple


class ValueCode(NamedTuple):
  """Value fragment returned for an expression block."""

  code: str
  order: int


_NUMBER = re.compile(r"^\s*-?\d+(\.\d+)?\s*$")
_IDENTIFIER = re.compile(r"^[A-Za-z_]\w*$")


def emit_child(required: int, code: str, child_order: int) -> str:
  """
  Places a child expression into a parent context.

  The child is wrapped in parentheses iff its precedence rank is greater
  (binds more loosely) than the rank the parent context requires.

  Args:
      required: Precedence the parent requires at this operand position.
      code: The child's emitted code.
      child_order: Precedence of the child's outermost operator.

  Returns:
      str: `code`, parenthesized when needed. Empty code is returned unchanged.
  """
  if code and child_order > required:
    return f"({code})"
  return code


def is_number(code: str) -> bool:
  """Checks whether `code` is a plain numeric literal (``3``, ``-2.5``)."""
  return bool(_NUMBER.match(code))


def is_simple_operand(code: str) -> bool:
  """
  Checks whether `code` can be repeated in generated code without caching.

  Only identifiers and numeric literals qualify; any other expression
  should be evaluated once into a temporary variable.

  Args:
      code: Emitted expression.

  Returns:
      bool: True for identifiers and numeric literals.
  """
  return bool(_IDENTIFIER.match(code)) or is_number(code)

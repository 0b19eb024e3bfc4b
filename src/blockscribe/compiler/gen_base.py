"""
Generator Base Utilities.

Defines the mixin with string helpers shared by the expression and statement
mixins and by the rule modules.
"""

import re
from typing import Any, Mapping, TypeVar

from blockscribe.blocks import Block
from blockscribe.errors import UnhandledFieldValueError

T = TypeVar("T")

_INNER_NEWLINE = re.compile(r"\n(?!\Z)")


class BaseGeneratorMixin:
  """
  Common string manipulation and field lookup helpers for code generation.
  """

  @staticmethod
  def prefix_lines(text: str, prefix: str) -> str:
    """
    Prepends `prefix` to every line of `text`.

    A trailing newline does not start a new (prefixed) line.

    Args:
        text: Possibly multi-line text.
        prefix: String to put in front of each line (indent, comment marker).

    Returns:
        str: The prefixed text.
    """
    return prefix + _INNER_NEWLINE.sub(lambda _: "\n" + prefix, text)

  @staticmethod
  def quote(text: str) -> str:
    """
    Encodes `text` as a double-quoted string literal.

    Args:
        text: Raw string contents.

    Returns:
        str: The escaped literal, quotes included.
    """
    escaped = text.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')
    return f'"{escaped}"'

  @staticmethod
  def inject_id(template: str, block_id: str) -> str:
    """Replaces every ``%1`` in `template` with the single-quoted block id."""
    return template.replace("%1", f"'{block_id}'")

  @staticmethod
  def field_option(block: Block, field: str, table: Mapping[Any, T]) -> T:
    """
    Looks up an enumerated field value in a rule's option table.

    Args:
        block: The block being generated.
        field: Field name holding the enumerated value.
        table: Known values and what they map to.

    Returns:
        The mapped entry.

    Raises:
        UnhandledFieldValueError: If the field value is not in `table`.
    """
    value = block.get_field(field)
    if value not in table:
      raise UnhandledFieldValueError(block.kind, field, value, expected=list(table))
    return table[value]

"""
Helper Function Deduplication.

Rules frequently need a small utility routine in the generated program
(a random integer in a range, a primality test, ...). `HelperDeduplicator`
makes sure each routine is defined once per run, under a collision-free name,
no matter how many blocks ask for it. Procedure bodies defined by the
program itself are collected in the same ordered registry so that the driver
can emit everything after the main program in first-requested order.
"""

import logging
from typing import Dict, List, Sequence

from blockscribe.compiler.names import NameAllocator
from blockscribe.enums import NameType

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "{leCUI8hutHZI4480Dc}"


class HelperDeduplicator:
  """
  Ordered registry of definitions emitted after the main program.

  Attributes:
      names (NameAllocator): Allocator used for helper names (PROCEDURE namespace).
      placeholder (str): Token in helper templates replaced by the allocated name.
  """

  def __init__(self, names: NameAllocator, placeholder: str = DEFAULT_PLACEHOLDER) -> None:
    self.names = names
    self.placeholder = placeholder
    # Insertion order is emission order.
    self._definitions: Dict[str, str] = {}
    self._function_names: Dict[str, str] = {}

  def reset(self) -> None:
    """Discards all definitions and helper names."""
    self._definitions.clear()
    self._function_names.clear()

  def provide(self, key: str, template_lines: Sequence[str]) -> str:
    """
    Returns the output name of helper `key`, defining it on first request.

    Args:
        key: Logical helper name (e.g. ``math_random_int``).
        template_lines: Source lines of the helper; every occurrence of the
            placeholder token is replaced with the allocated name. Ignored
            when the helper already exists.

    Returns:
        str: The callable name to use at the call site.
    """
    if key in self._function_names:
      return self._function_names[key]

    function_name = self.names.get_distinct_name(key, NameType.PROCEDURE)
    self._function_names[key] = function_name
    self._definitions[key] = "\n".join(template_lines).replace(self.placeholder, function_name)
    logger.debug("Registered helper '%s' as '%s'", key, function_name)
    return function_name

  def define(self, key: str, code: str) -> None:
    """
    Stores a finished definition (e.g. a user procedure) under `key`.

    A repeated key replaces the text but keeps its original position.

    Args:
        key: Unique definition key.
        code: The complete definition text.
    """
    self._definitions[key] = code

  def has(self, key: str) -> bool:
    """Checks whether a definition exists for `key`."""
    return key in self._definitions

  def function_name(self, key: str) -> str:
    """Returns the allocated name of an already provided helper."""
    return self._function_names[key]

  def definitions(self) -> List[str]:
    """
    Lists definition texts in first-requested order.

    Returns:
        List[str]: Definitions ready for final assembly.
    """
    return list(self._definitions.values())

  def __len__(self) -> int:
    return len(self._definitions)

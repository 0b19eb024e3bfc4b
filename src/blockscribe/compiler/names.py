"""
Name Allocator.

This module provides the `NameAllocator` class, which maps logical names
chosen by the program author (variables, procedures) to identifiers that are
legal in the target language. It handles:

- Sanitizing characters the target identifier grammar does not accept.
- Avoiding the backend's reserved words.
- Collision resolution with numeric suffixes (``count``, ``count2``, ...).
- Independent namespaces per `NameType`, or one shared namespace.
"""

import logging
import re
from typing import Dict, Iterable, Optional, Set, Tuple
from urllib.parse import quote

from blockscribe.enums import NameType
from blockscribe.errors import NameAllocationExhaustedError

logger = logging.getLogger(__name__)

# Characters left untouched by URI encoding; everything else is %-escaped first.
_URI_SAFE = ";,/?:@&=+$-_.!~*'()#"
_NON_WORD = re.compile(r"[^\w]", re.ASCII)

_SHARED = "*"


class NameAllocator:
  """
  Tracks logical-to-output identifier mappings for one generation run.

  Attributes:
      reserved (Set[str]): Identifiers that are never returned verbatim.
      shared_namespace (bool): If True all name types draw from one pool.
      variable_prefix (str): String prepended to every returned variable identifier.
      max_attempts (int): Upper bound on suffix candidates per allocation.
  """

  def __init__(
    self,
    reserved_words: Optional[Iterable[str]] = None,
    shared_namespace: bool = False,
    variable_prefix: str = "",
    max_attempts: int = 10000,
  ) -> None:
    """
    Initializes an empty allocator.

    Args:
        reserved_words: Identifiers the allocator must avoid.
        shared_namespace: Put variables and procedures in a single namespace.
        variable_prefix: Prefix added to each output variable identifier (e.g. ``$``).
        max_attempts: Suffix candidates tried before giving up.
    """
    self.reserved: Set[str] = set(reserved_words or ())
    self.shared_namespace = shared_namespace
    self.variable_prefix = variable_prefix
    self.max_attempts = max_attempts
    # (logical name, namespace) -> output name without prefix
    self._db: Dict[Tuple[str, str], str] = {}
    # namespace -> output names already handed out
    self._used: Dict[str, Set[str]] = {}

  def reset(self) -> None:
    """Forgets every allocation. Reserved words are kept."""
    self._db.clear()
    self._used.clear()

  def _namespace(self, name_type: NameType) -> str:
    return _SHARED if self.shared_namespace else NameType(name_type).value

  def _prefix(self, name_type: NameType) -> str:
    return self.variable_prefix if NameType(name_type) is NameType.VARIABLE else ""

  def get_name(self, name: str, name_type: NameType) -> str:
    """
    Resolves a logical name to its output identifier.

    Idempotent within a run: the same name and type always yield the same
    identifier.

    Args:
        name: The logical name as authored.
        name_type: The namespace the name belongs to.

    Returns:
        str: The output identifier.
    """
    key = (name, NameType(name_type).value)
    if key in self._db:
      return self._prefix(name_type) + self._db[key]
    safe = self.get_distinct_name(name, name_type)
    self._db[key] = safe[len(self._prefix(name_type)) :]
    return safe

  def get_distinct_name(self, name: str, name_type: NameType) -> str:
    """
    Allocates an identifier that is not yet used in the namespace.

    Repeated calls with the same base return ``base``, ``base2``, ``base3``...

    Args:
        name: Desired base name (sanitized first).
        name_type: The namespace to allocate in.

    Returns:
        str: A fresh output identifier.

    Raises:
        NameAllocationExhaustedError: If no free candidate is found within
            `max_attempts` tries.
    """
    base = self.safe_name(name)
    used = self._used.setdefault(self._namespace(name_type), set())

    candidate = base
    suffix = 1
    while candidate in used or candidate in self.reserved:
      suffix += 1
      if suffix > self.max_attempts:
        raise NameAllocationExhaustedError(base, self.max_attempts)
      candidate = f"{base}{suffix}"

    if candidate != base:
      logger.debug("Renamed '%s' to '%s' to avoid a collision", base, candidate)
    used.add(candidate)
    return self._prefix(name_type) + candidate

  def is_used(self, name: str, name_type: NameType) -> bool:
    """Checks whether an output identifier (without prefix) is taken in a namespace."""
    return name in self._used.get(self._namespace(name_type), set())

  @staticmethod
  def safe_name(name: str) -> str:
    """
    Turns an arbitrary string into a legal identifier.

    Spaces become underscores, non-ASCII characters are percent-encoded and
    every remaining non-word character becomes an underscore. Names starting
    with a digit are prefixed with ``my_``.

    Args:
        name: The raw name.

    Returns:
        str: A name matching ``[A-Za-z_][A-Za-z0-9_]*``.
    """
    if not name:
      return "unnamed"
    cleaned = quote(name.replace(" ", "_"), safe=_URI_SAFE)
    cleaned = _NON_WORD.sub("_", cleaned)
    if cleaned[0].isdigit():
      cleaned = "my_" + cleaned
    return cleaned

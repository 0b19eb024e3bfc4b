"""
Emission Rule Registry.

Each backend owns a `RuleTable` mapping block kinds to rule functions. Rule
groups (logic, loops, ...) live in their own modules with their own table,
and a backend composes the groups it supports by listing them as parents.

A rule is called as ``rule(generator, block)`` and returns a statement
fragment (str), a value fragment (``(code, order)``) or None.
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

RuleFunction = Callable[[Any, Any], Any]


class RuleTable:
  """
  Kind -> rule lookup with ordered fallback to parent tables.

  Attributes:
      name (str): Diagnostic name of the table.
      parents (List[RuleTable]): Tables consulted, in order, for unknown kinds.
  """

  def __init__(self, name: str, parents: Iterable["RuleTable"] = ()) -> None:
    self.name = name
    self.parents: List[RuleTable] = list(parents)
    self._rules: Dict[str, RuleFunction] = {}

  def register(self, *kinds: str) -> Callable[[RuleFunction], RuleFunction]:
    """
    Decorator registering a rule for one or more block kinds.

    Args:
        *kinds: Block kinds handled by the decorated function.
    """

    def decorator(func: RuleFunction) -> RuleFunction:
      for kind in kinds:
        self._rules[kind] = func
      return func

    return decorator

  def lookup(self, kind: str) -> Optional[RuleFunction]:
    """
    Finds the rule for `kind`, searching own rules first, then parents.

    Args:
        kind: Block kind tag.

    Returns:
        Optional[RuleFunction]: The rule, or None when no table knows the kind.
    """
    if kind in self._rules:
      return self._rules[kind]
    for parent in self.parents:
      rule = parent.lookup(kind)
      if rule is not None:
        return rule
    return None

  def kinds(self) -> List[str]:
    """Lists every kind this table can handle (own and inherited), sorted."""
    found = set(self._rules)
    for parent in self.parents:
      found.update(parent.kinds())
    return sorted(found)

  def __contains__(self, kind: str) -> bool:
    return self.lookup(kind) is not None

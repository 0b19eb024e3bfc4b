"""
Block Program Representation.

This module defines the immutable-by-convention snapshot handed over by the
visual editor: a forest of `Block` nodes connected through value sockets,
statement sockets and next-statement links, wrapped in a `Workspace` that
also carries the logical variable names used anywhere in the program.

It is the contract between the editor (producer) and the generators
(consumers). Generation never mutates a block.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

_ID_COUNTER = itertools.count(1)


def _next_block_id() -> str:
  return f"block{next(_ID_COUNTER)}"


@dataclass
class Block:
  """
  A node of the visual program.
  """

  kind: str
  """Block type tag used to select an emission rule (e.g. 'controls_if')."""

  fields: Dict[str, Any] = field(default_factory=dict)
  """Literal field values (text, numbers, dropdown choices)."""

  inputs: Dict[str, Optional["Block"]] = field(default_factory=dict)
  """Value sockets: socket name -> connected value block."""

  statements: Dict[str, Optional["Block"]] = field(default_factory=dict)
  """Statement sockets: socket name -> first block of the nested chain."""

  next: Optional["Block"] = None
  """The following statement in the same chain."""

  comment: Optional[str] = None
  """Free-text comment attached by the author."""

  output: bool = False
  """True for value-producing blocks."""

  disabled: bool = False
  """Disabled blocks are skipped during generation."""

  mutation: Dict[str, Any] = field(default_factory=dict)
  """Shape data for mutable blocks (elseif/else counts, procedure arguments, ...)."""

  id: str = field(default_factory=_next_block_id)
  """Stable identifier, used by statement prefixes and loop traps."""

  parent: Optional["Block"] = field(default=None, init=False, repr=False, compare=False)
  is_inline: bool = field(default=False, init=False, repr=False, compare=False)

  def __post_init__(self) -> None:
    for child in self.inputs.values():
      if child is not None:
        child.parent = self
        child.is_inline = True
    for child in self.statements.values():
      if child is not None:
        child.parent = self
    if self.next is not None:
      self.next.parent = self

  def get_field(self, name: str, default: Any = None) -> Any:
    """Returns a field value, or `default` when the field is absent."""
    return self.fields.get(name, default)

  def get_input(self, name: str) -> Optional["Block"]:
    """Returns the block connected to a value socket, if any."""
    return self.inputs.get(name)

  def get_statement(self, name: str) -> Optional["Block"]:
    """Returns the first block of a statement socket, if any."""
    return self.statements.get(name)

  def get_vars(self) -> List[str]:
    """
    Lists the logical variable names this block references directly.

    Variable references live in the ``VAR`` field; procedure definitions
    additionally declare their parameters in ``mutation['arguments']``.

    Returns:
        List[str]: Variable names in declaration order.
    """
    names: List[str] = []
    var = self.fields.get("VAR")
    if var:
      names.append(str(var))
    for arg in self.mutation.get("arguments", []):
      names.append(str(arg))
    return names

  def children(self) -> Iterator["Block"]:
    """Yields every directly connected block: value inputs, statement sockets, next."""
    for child in self.inputs.values():
      if child is not None:
        yield child
    for child in self.statements.values():
      if child is not None:
        yield child
    if self.next is not None:
      yield self.next

  def descendants(self) -> Iterator["Block"]:
    """Yields this block and everything connected below it, parent first."""
    yield self
    for child in self.children():
      yield from child.descendants()


@dataclass
class Workspace:
  """
  A snapshot of the editor canvas at generation time.
  """

  top_blocks: List[Block] = field(default_factory=list)
  """Unconnected root blocks, in editor order."""

  variables: List[str] = field(default_factory=list)
  """Every logical variable name used anywhere in the program."""

  @classmethod
  def from_blocks(cls, blocks: List[Block]) -> "Workspace":
    """
    Builds a workspace and collects its variable names up front.

    Args:
        blocks: The top-level blocks.

    Returns:
        Workspace: The snapshot with `variables` populated in first-seen order.
    """
    return cls(top_blocks=list(blocks), variables=all_variables(blocks))

  def all_blocks(self) -> Iterator[Block]:
    """Yields every block reachable from the top-level blocks."""
    for root in self.top_blocks:
      yield from root.descendants()


def all_variables(blocks: List[Block]) -> List[str]:
  """
  Collects distinct variable names referenced anywhere under `blocks`.

  Args:
      blocks: Root blocks to scan.

  Returns:
      List[str]: Distinct names, first-seen order.
  """
  seen: Dict[str, None] = {}
  for root in blocks:
    for block in root.descendants():
      for name in block.get_vars():
        seen.setdefault(name, None)
  return list(seen)

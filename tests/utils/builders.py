"""
Block construction shortcuts for tests.
"""

from typing import Optional

from blockscribe.blocks import Block


def num(value, **kwargs) -> Block:
  """A ``math_number`` value block."""
  return Block("math_number", fields={"NUM": value}, output=True, **kwargs)


def var(name: str, **kwargs) -> Block:
  """A ``variables_get`` value block."""
  return Block("variables_get", fields={"VAR": name}, output=True, **kwargs)


def arith(op: str, a: Optional[Block], b: Optional[Block], **kwargs) -> Block:
  """A ``math_arithmetic`` value block."""
  return Block("math_arithmetic", fields={"OP": op}, inputs={"A": a, "B": b}, output=True, **kwargs)


def text(value: str, **kwargs) -> Block:
  """A ``text`` value block."""
  return Block("text", fields={"TEXT": value}, output=True, **kwargs)


def assign(name: str, value: Optional[Block], **kwargs) -> Block:
  """A ``variables_set`` statement block."""
  return Block("variables_set", fields={"VAR": name}, inputs={"VALUE": value}, **kwargs)


def chain(*statements: Block) -> Block:
  """Links statements through `next` and returns the head."""
  for current, following in zip(statements, statements[1:]):
    current.next = following
    following.parent = current
  return statements[0]

"""
Statement Generation Mixin.

Handles nested statement sockets, chaining of `next` blocks, comment
attachment and loop trap insertion.
"""

from typing import List

from blockscribe.blocks import Block
from blockscribe.compiler.gen_base import BaseGeneratorMixin
from blockscribe.errors import InvalidEmissionError


class StatementGeneratorMixin(BaseGeneratorMixin):
  """
  Mixin for generating statement sequences.
  Assumes `self.block_to_code`, `self.indent`, `self.comment_prefix` and
  `self.config` are available on the host class.
  """

  def statement_to_code(self, block: Block, socket: str) -> str:
    """
    Generates the indented code of the chain plugged into a statement socket.

    Args:
        block: The parent block.
        socket: Name of the statement input.

    Returns:
        str: The body, every line prefixed with one indent unit. Empty string
        for an empty socket.

    Raises:
        InvalidEmissionError: If the chain head produced a value fragment.
    """
    target = block.get_statement(socket)
    if target is None:
      return ""

    code = self.block_to_code(target)
    if not isinstance(code, str):
      raise InvalidEmissionError(
        f'Block "{target.kind}" in statement socket "{socket}" of "{block.kind}" produced a value, expected a statement.'
      )
    if code:
      code = self.prefix_lines(code, self.indent)
    return code

  def add_loop_trap(self, branch: str, block: Block) -> str:
    """
    Decorates a loop or procedure body with the configured trap and prefix.

    The trap comes first, the statement prefix (re-targeted at the loop
    block) last, both indented as body lines. With neither configured the
    body is returned unchanged.

    Args:
        branch: Already indented body code.
        block: The loop or procedure block owning the body.

    Returns:
        str: The decorated body.
    """
    trap = self.config.infinite_loop_trap
    if trap:
      branch = self.prefix_lines(self.inject_id(trap, block.id), self.indent) + branch
    prefix = self.config.statement_prefix
    if prefix:
      branch += self.prefix_lines(self.inject_id(prefix, block.id), self.indent)
    return branch

  def all_nested_comments(self, block: Block) -> str:
    """
    Collects comments of `block` and all value blocks nested below it.

    Deeper comments come before shallower ones. Each comment ends with a
    newline.
    """
    comments: List[str] = []
    self._collect_value_comments(block, comments)
    if not comments:
      return ""
    return "\n".join(comments) + "\n"

  def _collect_value_comments(self, block: Block, out: List[str]) -> None:
    for child in block.inputs.values():
      if child is not None:
        self._collect_value_comments(child, out)
    if block.comment:
      out.append(block.comment)

  def sequence(self, block: Block, code: str) -> str:
    """
    Attaches comments and the following chain to a block's own code.

    Blocks rendered inline inside an expression contribute no comments;
    their comments are hoisted by the enclosing statement instead.

    Args:
        block: The block whose code was just generated.
        code: That code.

    Returns:
        str: comments + code + code of the `next` chain.
    """
    comment_code = ""
    if not block.is_inline:
      if block.comment:
        comment_code += self.prefix_lines(block.comment, self.comment_prefix) + "\n"
      for child in block.inputs.values():
        if child is None:
          continue
        nested = self.all_nested_comments(child)
        if nested:
          comment_code += self.prefix_lines(nested, self.comment_prefix)

    next_code = ""
    if block.next is not None:
      next_code = self.block_to_code(block.next)
      if not isinstance(next_code, str):
        raise InvalidEmissionError(f'Block "{block.next.kind}" chained after "{block.kind}" produced a value.')
    return comment_code + code + next_code

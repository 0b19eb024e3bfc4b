"""
Expression Generation Mixin.

Handles pulling value fragments out of a block's input sockets and placing
them into the parent's operator context.
"""

from typing import Optional

from blockscribe.blocks import Block
from blockscribe.compiler.expressions import emit_child
from blockscribe.compiler.gen_base import BaseGeneratorMixin
from blockscribe.errors import InvalidEmissionError


class ExpressionGeneratorMixin(BaseGeneratorMixin):
  """
  Mixin for generating value code from input sockets.
  Assumes `self.block_to_code` is available on the host class.
  """

  def block_to_code(self, block: Optional[Block]):
    """
    Abstract placeholder.
    Must be implemented by the main Generator class to dispatch rules.
    """
    raise NotImplementedError

  def value_to_code(self, block: Block, socket: str, required: int) -> str:
    """
    Generates the code of the block plugged into a value socket.

    Args:
        block: The parent block.
        socket: Name of the value input.
        required: Precedence the parent requires at this operand position.

    Returns:
        str: The child's code, parenthesized if it binds more loosely than
        `required`. Empty string if the socket is empty or the child is
        disabled.

    Raises:
        InvalidEmissionError: If the child produced a statement fragment.
    """
    target = block.get_input(socket)
    if target is None:
      return ""

    result = self.block_to_code(target)
    if not result:
      # Disabled child, or a rule that emitted nothing.
      return ""
    if isinstance(result, str):
      raise InvalidEmissionError(
        f'Block "{target.kind}" in value socket "{socket}" of "{block.kind}" produced a statement, expected a value.'
      )

    code, child_order = result
    return emit_child(required, code, child_order)

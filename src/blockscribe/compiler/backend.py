"""
Compiler Backend Protocol.

Defines the abstract interface for backends that consume a block program
snapshot and emit target language source text.
"""

from abc import ABC, abstractmethod
from typing import Any


class CompilerBackend(ABC):
  """
  Abstract base class for code generation backends.
  """

  @abstractmethod
  def compile(self, workspace: Any) -> str:
    """
    Compiles a block program into source text.

    Args:
        workspace (Any): The program snapshot (a `Workspace`, a list of
            top-level blocks, or an editor dictionary).

    Returns:
        str: The generated program.
    """
    pass

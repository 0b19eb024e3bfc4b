"""
Tests for Compiler Backend Protocol.

Verifies:
1. CompilerBackend abstract class enforcement.
2. Implementation of a concrete backend (CountingBackend).
3. The shipped generators satisfy the protocol.
"""

import pytest

from blockscribe.backends.divgames import DivGamesGenerator
from blockscribe.blocks import Block, Workspace
from blockscribe.compiler.backend import CompilerBackend


class CountingBackend(CompilerBackend):
  """
  A minimal backend that returns the block count as 'compiled' output.
  """

  def compile(self, workspace: Workspace) -> str:
    return f"Compiled {len(list(workspace.all_blocks()))} blocks."


def test_backend_protocol_enforcement():
  """Verify that CompilerBackend cannot be instantiated directly."""
  with pytest.raises(TypeError):
    CompilerBackend()  # Abstract class


def test_counting_backend_compile():
  workspace = Workspace.from_blocks([Block("a", next=Block("b")), Block("c")])
  assert CountingBackend().compile(workspace) == "Compiled 3 blocks."


def test_backend_type_hints():
  assert hasattr(CompilerBackend, "compile")
  assert CompilerBackend.compile.__isabstractmethod__


def test_generators_are_backends():
  gen = DivGamesGenerator()
  assert isinstance(gen, CompilerBackend)
  assert gen.compile([]) == gen.generate([])

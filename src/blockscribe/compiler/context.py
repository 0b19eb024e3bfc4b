"""
Per-Run Generation State.

A `GenerationContext` bundles the registries a single generation run mutates:
the name allocator and the helper/definition registry. The driver builds a
new context for every run, so nothing leaks from one run into the next.
"""

from typing import Iterable

from blockscribe.compiler.helpers import HelperDeduplicator
from blockscribe.compiler.names import NameAllocator
from blockscribe.config import GeneratorConfig


class GenerationContext:
  """
  Exclusive state of one generation run.

  Attributes:
      config (GeneratorConfig): The run configuration (read-only).
      names (NameAllocator): Identifier allocator.
      helpers (HelperDeduplicator): Ordered definition registry.
  """

  def __init__(self, config: GeneratorConfig, reserved_words: Iterable[str], shared_namespace: bool) -> None:
    """
    Builds fresh registries for one run.

    Args:
        config: The run configuration.
        reserved_words: Complete reserved word set (backend list plus config extras).
        shared_namespace: Effective namespace policy for the allocator.
    """
    self.config = config
    self.names = NameAllocator(
      reserved_words=reserved_words,
      shared_namespace=shared_namespace,
      variable_prefix=config.variable_prefix,
      max_attempts=config.max_suffix_attempts,
    )
    self.helpers = HelperDeduplicator(self.names, placeholder=config.name_placeholder_token)

  def reset(self) -> None:
    """Clears both registries."""
    self.names.reset()
    self.helpers.reset()

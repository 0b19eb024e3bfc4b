"""
blockscribe Package.

A rule-driven source generator turning visual block programs (as produced by
a Blockly-style editor) into text for retro game languages such as DIV Games
Studio and FUZE BASIC.

Usage
-----

Simple Generation
^^^^^^^^^^^^^^^^^

.. code-block:: python

    import blockscribe

    snapshot = {
      "blocks": [
        {"type": "variables_set", "fields": {"VAR": "x"},
         "inputs": {"VALUE": {"type": "logic_boolean", "fields": {"BOOL": "TRUE"}}}}
      ]
    }
    print(blockscribe.generate(snapshot, language="divgames"))

Advanced Usage (Generator Instances)
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from blockscribe import GeneratorConfig, create_generator

    config = GeneratorConfig(language="fuzebasic", infinite_loop_trap="checkTimeout(%1)\\n")
    gen = create_generator(config=config)
    code = gen.generate(workspace)
"""

from typing import Optional

from blockscribe.blocks import Block, Workspace
from blockscribe.compiler.generator import CodeGenerator, WorkspaceInput
from blockscribe.compiler.registry import available_languages, create_generator, get_backend_class
from blockscribe.config import GeneratorConfig
from blockscribe.schema import load_workspace

__version__ = "0.1.0"


def generate(
  workspace: WorkspaceInput,
  language: Optional[str] = None,
  config: Optional[GeneratorConfig] = None,
) -> str:
  """
  Generates program text for a block program.

  This is a high-level convenience wrapper around `create_generator`. For
  repeated runs with the same settings, keep a generator instance instead.

  Args:
      workspace: A `Workspace`, a list of top-level `Block`s, or an editor
          snapshot dictionary.
      language (str, optional): Backend key. Defaults to `config.language`,
          or to the ``[tool.blockscribe]`` setting of the nearest pyproject.
      config (GeneratorConfig, optional): Run configuration. If None, it is
          loaded with `GeneratorConfig.load`.

  Returns:
      str: The generated program.

  Raises:
      blockscribe.errors.GenerationError: If generation fails.
      ValueError: If the language is unknown.
  """
  if config is None:
    config = GeneratorConfig.load(language=language)
  return create_generator(language, config).generate(workspace)


__all__ = [
  "Block",
  "CodeGenerator",
  "GeneratorConfig",
  "Workspace",
  "available_languages",
  "create_generator",
  "generate",
  "get_backend_class",
  "load_workspace",
  "__version__",
]

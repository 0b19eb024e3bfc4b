"""
Code Generation Driver.

`CodeGenerator` turns a `Workspace` into one text blob. Backends subclass it
and supply a `RuleTable` plus their textual conventions (reserved words,
prologue/epilogue, comment marker). Every call to `generate` owns a fresh
`GenerationContext`, so repeated runs are independent and byte-identical.
"""

import logging
import re
from string import Template
from typing import Any, Dict, FrozenSet, List, Optional, Sequence, Union

from rich.markup import escape

from blockscribe.blocks import Block, Workspace
from blockscribe.compiler.backend import CompilerBackend
from blockscribe.compiler.context import GenerationContext
from blockscribe.compiler.expressions import ValueCode
from blockscribe.compiler.gen_expressions import ExpressionGeneratorMixin
from blockscribe.compiler.gen_statements import StatementGeneratorMixin
from blockscribe.compiler.helpers import HelperDeduplicator
from blockscribe.compiler.names import NameAllocator
from blockscribe.compiler.rules import RuleTable
from blockscribe.config import GeneratorConfig
from blockscribe.enums import NameType
from blockscribe.errors import GenerationError, InvalidEmissionError, UnknownBlockKindError
from blockscribe.schema import load_workspace
from blockscribe.utils.console import log_error

logger = logging.getLogger(__name__)

WorkspaceInput = Union[Workspace, Sequence[Block], Dict[str, Any]]
Emission = Union[str, ValueCode]

_LEADING_BLANK = re.compile(r"\A\s*\n")
_TRAILING_SPACES = re.compile(r"[ \t]+\n")


class CodeGenerator(CompilerBackend, ExpressionGeneratorMixin, StatementGeneratorMixin):
  """
  Rule-driven generator shared by all backends.

  Subclasses override the class attributes below; rule modules register into
  the table assigned to `RULES`.
  """

  NAME: str = "generic"
  RULES: RuleTable = RuleTable("generic")
  RESERVED_WORDS: FrozenSet[str] = frozenset()
  PROLOGUE: str = ""
  EPILOGUE: str = ""
  COMMENT_PREFIX: str = "// "
  STATEMENT_TERMINATOR: str = ";"
  SHARED_NAMESPACE: bool = False

  def __init__(self, config: Optional[GeneratorConfig] = None) -> None:
    """
    Args:
        config: Run configuration. Defaults to `GeneratorConfig()`; options
            left as None fall back to this backend's class attributes.
    """
    self.config = config or GeneratorConfig()
    self._context: Optional[GenerationContext] = None
    self._variables: List[str] = []

  # --- Run state -------------------------------------------------------------

  @property
  def context(self) -> GenerationContext:
    """The state of the current (or most recent) run."""
    if self._context is None:
      raise RuntimeError(f"{type(self).__name__} has no active generation run; call init() or generate() first.")
    return self._context

  @property
  def names(self) -> NameAllocator:
    return self.context.names

  @property
  def helpers(self) -> HelperDeduplicator:
    return self.context.helpers

  @property
  def indent(self) -> str:
    return self.config.indent_unit

  @property
  def comment_prefix(self) -> str:
    if self.config.comment_prefix is not None:
      return self.config.comment_prefix
    return self.COMMENT_PREFIX

  @property
  def placeholder(self) -> str:
    """Token rules put in helper templates where the helper's name goes."""
    return self.config.name_placeholder_token

  @property
  def reserved_words(self) -> FrozenSet[str]:
    return frozenset(self.RESERVED_WORDS) | frozenset(self.config.reserved_words)

  @property
  def shared_namespace(self) -> bool:
    if self.config.shared_namespace is not None:
      return self.config.shared_namespace
    return self.SHARED_NAMESPACE

  def init(self, workspace: Workspace) -> None:
    """
    Starts a run: builds a fresh context and registers workspace variables.

    Variables are resolved before any rule runs so that user names claim
    their preferred spelling ahead of generated temporaries.

    Args:
        workspace: The program about to be generated.
    """
    self._context = GenerationContext(self.config, self.reserved_words, self.shared_namespace)
    self._variables = [self.names.get_name(name, NameType.VARIABLE) for name in workspace.variables]

  # --- Rule helpers ----------------------------------------------------------

  def variable_name(self, logical: str) -> str:
    """Resolves a user variable to its output identifier."""
    return self.names.get_name(logical, NameType.VARIABLE)

  def procedure_name(self, logical: str) -> str:
    """Resolves a user procedure to its output identifier."""
    return self.names.get_name(logical, NameType.PROCEDURE)

  def provide_function(self, key: str, template_lines: Sequence[str]) -> str:
    """Shortcut for `HelperDeduplicator.provide` on the current run."""
    return self.helpers.provide(key, template_lines)

  def statement(self, code: str) -> str:
    """Terminates a single-line statement the way this language does."""
    return f"{code}{self.STATEMENT_TERMINATOR}\n"

  # --- Driver ----------------------------------------------------------------

  def compile(self, workspace: WorkspaceInput) -> str:
    return self.generate(workspace)

  def generate(self, workspace: WorkspaceInput) -> str:
    """
    Generates the complete program text.

    Args:
        workspace: A `Workspace`, a list of top-level blocks, or an editor
            snapshot dictionary.

    Returns:
        str: The program.

    Raises:
        GenerationError: On the first fatal problem; no partial output is
            returned.
    """
    ws = self._coerce_workspace(workspace)
    logger.debug("Generating %s code for %d top-level block(s)", self.NAME, len(ws.top_blocks))

    self.init(ws)
    parts: List[str] = []
    try:
      for block in ws.top_blocks:
        line = self.block_to_code(block)
        if isinstance(line, ValueCode):
          line = self.scrub_naked_value(line.code)
        if line:
          parts.append(line)
    except GenerationError as e:
      log_error(f"{self.NAME}: generation aborted: {escape(str(e))}")
      raise

    return self.finish("\n".join(parts))

  def block_to_code(self, block: Optional[Block]) -> Emission:
    """
    Generates code for one block and everything chained after it.

    Args:
        block: The block, or None.

    Returns:
        Emission: A statement string, or a `ValueCode` for expression blocks.
        Empty string for None and for rules that emit nothing.

    Raises:
        UnknownBlockKindError: If no rule handles the block kind.
        InvalidEmissionError: If the rule returned something unusable.
    """
    if block is None:
      return ""
    if block.disabled:
      return self.block_to_code(block.next)

    rule = self.RULES.lookup(block.kind)
    if rule is None:
      raise UnknownBlockKindError(block.kind, self.NAME)

    result = rule(self, block)
    if result is None:
      return ""
    if isinstance(result, tuple):
      if len(result) != 2 or not isinstance(result[0], str):
        raise InvalidEmissionError(f'Rule for "{block.kind}" must return (code, order), got {result!r}.')
      code, order = result
      return ValueCode(self.sequence(block, code), order)
    if isinstance(result, str):
      return self.sequence(block, self._wrap_statement(block, result))
    raise InvalidEmissionError(f'Rule for "{block.kind}" returned unsupported type {type(result).__name__}.')

  def _wrap_statement(self, block: Block, code: str) -> str:
    prefix = self.config.statement_prefix
    suffix = self.config.statement_suffix
    if prefix:
      code = self.inject_id(prefix, block.id) + code
    if suffix:
      code = code + self.inject_id(suffix, block.id)
    return code

  def scrub_naked_value(self, line: str) -> str:
    """Turns a value with no statement parent into a line of its own."""
    return line + "\n"

  def declare_variables(self, names: List[str]) -> str:
    """
    Renders the declarations substituted for ``$variables`` in the prologue.

    Args:
        names: Output identifiers of all workspace variables.

    Returns:
        str: Declaration text; empty by default.
    """
    return ""

  def finish(self, code: str) -> str:
    """
    Assembles prologue, program, epilogue and definitions.

    Args:
        code: The joined top-level code.

    Returns:
        str: The whitespace-normalised program text.
    """
    declarations = self.declare_variables(self._variables)
    prologue = self.config.prologue_template if self.config.prologue_template is not None else self.PROLOGUE
    epilogue = self.config.epilogue_template if self.config.epilogue_template is not None else self.EPILOGUE

    text = Template(prologue).safe_substitute(variables=declarations)
    text += code
    text += Template(epilogue).safe_substitute(variables=declarations)

    definitions = self.helpers.definitions()
    if definitions:
      text += "\n\n" + "\n\n".join(definitions)
    return self.normalize_whitespace(text)

  @staticmethod
  def normalize_whitespace(code: str) -> str:
    """
    Drops leading blank lines and trailing spaces on every line, and ends
    non-empty output with exactly one newline.
    """
    code = _LEADING_BLANK.sub("", code)
    code = _TRAILING_SPACES.sub("\n", code).rstrip()
    return code + "\n" if code else ""

  @staticmethod
  def _coerce_workspace(workspace: WorkspaceInput) -> Workspace:
    if isinstance(workspace, Workspace):
      return workspace
    if isinstance(workspace, dict):
      return load_workspace(workspace)
    return Workspace.from_blocks(list(workspace))

"""
Compiler Package.

This package holds the shared code generation core: precedence-aware
expression emission, name allocation, helper deduplication, statement
sequencing and the generation driver that backends build upon.
"""

from blockscribe.compiler.backend import CompilerBackend
from blockscribe.compiler.context import GenerationContext
from blockscribe.compiler.expressions import ValueCode, emit_child, is_number, is_simple_operand
from blockscribe.compiler.generator import CodeGenerator
from blockscribe.compiler.helpers import HelperDeduplicator
from blockscribe.compiler.names import NameAllocator
from blockscribe.compiler.rules import RuleTable

__all__ = [
  "CompilerBackend",
  "CodeGenerator",
  "GenerationContext",
  "HelperDeduplicator",
  "NameAllocator",
  "RuleTable",
  "ValueCode",
  "emit_child",
  "is_number",
  "is_simple_operand",
]

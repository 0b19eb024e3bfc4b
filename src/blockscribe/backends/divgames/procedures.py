"""
Procedure Rules for DIV Games Studio.

User procedures become ``PROCESS`` definitions placed after the main
program. Definition blocks emit nothing in place; their text is stored in
the run's definition registry.
"""

from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order

PROCEDURE_RULES = RuleTable("procedures")


def _arguments(block):
  return [str(arg) for arg in block.mutation.get("arguments", [])]


def _call_arguments(gen, block):
  return ", ".join(
    gen.value_to_code(block, f"ARG{i}", Order.COMMA) or "null" for i in range(len(_arguments(block)))
  )


@PROCEDURE_RULES.register("procedures_defreturn", "procedures_defnoreturn")
def procedures_defreturn(gen, block):
  """Defines a process, with or without a RETURN value."""
  function_name = gen.procedure_name(block.get_field("NAME"))
  branch = gen.statement_to_code(block, "STACK")
  if gen.config.statement_prefix:
    branch = gen.prefix_lines(gen.inject_id(gen.config.statement_prefix, block.id), gen.indent) + branch
  if gen.config.infinite_loop_trap:
    branch = gen.prefix_lines(gen.inject_id(gen.config.infinite_loop_trap, block.id), gen.indent) + branch

  return_value = gen.value_to_code(block, "RETURN", Order.NONE)
  if return_value:
    return_value = gen.indent + gen.statement(f"RETURN({return_value})")

  args = ", ".join(gen.variable_name(arg) for arg in _arguments(block))
  code = f"PROCESS {function_name}({args})\nBEGIN\n{branch}{return_value}END\n"
  gen.helpers.define(f"process:{function_name}", gen.sequence(block, code))
  return None


@PROCEDURE_RULES.register("procedures_callreturn")
def procedures_callreturn(gen, block):
  function_name = gen.procedure_name(block.get_field("NAME"))
  return f"{function_name}({_call_arguments(gen, block)})", Order.FUNCTION_CALL


@PROCEDURE_RULES.register("procedures_callnoreturn")
def procedures_callnoreturn(gen, block):
  function_name = gen.procedure_name(block.get_field("NAME"))
  return gen.statement(f"{function_name}({_call_arguments(gen, block)})")


@PROCEDURE_RULES.register("procedures_ifreturn")
def procedures_ifreturn(gen, block):
  """Returns early from a process when CONDITION holds."""
  condition = gen.value_to_code(block, "CONDITION", Order.NONE) or "false"
  has_value = bool(block.mutation.get("has_return", "VALUE" in block.inputs))
  if has_value:
    value = gen.value_to_code(block, "VALUE", Order.NONE) or "null"
    body = gen.statement(f"RETURN({value})")
  else:
    body = gen.statement("RETURN")
  return f"IF ({condition})\n{gen.indent}{body}END\n"

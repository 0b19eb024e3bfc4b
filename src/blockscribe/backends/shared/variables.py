"""
Variable Rules.
"""

from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order

VARIABLE_RULES = RuleTable("variables")


@VARIABLE_RULES.register("variables_get")
def variables_get(gen, block):
  return gen.variable_name(block.get_field("VAR")), Order.ATOMIC


@VARIABLE_RULES.register("variables_set")
def variables_set(gen, block):
  value = gen.value_to_code(block, "VALUE", Order.ASSIGNMENT) or "0"
  return gen.statement(f"{gen.variable_name(block.get_field('VAR'))} = {value}")

"""
Logic Rules.

Conditionals, comparisons, boolean operators and literals.
"""

from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order

LOGIC_RULES = RuleTable("logic")

COMPARISON_OPERATORS = {
  "EQ": ("==", Order.EQUALITY),
  "NEQ": ("!=", Order.EQUALITY),
  "LT": ("<", Order.RELATIONAL),
  "LTE": ("<=", Order.RELATIONAL),
  "GT": (">", Order.RELATIONAL),
  "GTE": (">=", Order.RELATIONAL),
}

BOOLEAN_OPERATORS = {
  "AND": ("&&", Order.LOGICAL_AND, "true"),
  "OR": ("||", Order.LOGICAL_OR, "false"),
}


@LOGIC_RULES.register("controls_if")
def controls_if(gen, block):
  """If / else-if / else chain. The shape comes from the ``elseif`` and ``else`` mutation keys."""
  elseif_count = int(block.mutation.get("elseif", 0))
  has_else = bool(block.mutation.get("else", 0))

  code = ""
  for n in range(elseif_count + 1):
    condition = gen.value_to_code(block, f"IF{n}", Order.NONE) or "false"
    branch = gen.statement_to_code(block, f"DO{n}")
    keyword = "if" if n == 0 else " else if"
    code += f"{keyword} ({condition}) {{\n{branch}}}"
  if has_else:
    branch = gen.statement_to_code(block, "ELSE")
    code += f" else {{\n{branch}}}"
  return code + "\n"


@LOGIC_RULES.register("logic_compare")
def logic_compare(gen, block):
  operator, order = gen.field_option(block, "OP", COMPARISON_OPERATORS)
  # Comparisons do not chain; a nested comparison on either side keeps its parentheses.
  left = gen.value_to_code(block, "A", order - 1) or "0"
  right = gen.value_to_code(block, "B", order - 1) or "0"
  return f"{left} {operator} {right}", order


@LOGIC_RULES.register("logic_operation")
def logic_operation(gen, block):
  operator, order, neutral = gen.field_option(block, "OP", BOOLEAN_OPERATORS)
  left = gen.value_to_code(block, "A", order)
  right = gen.value_to_code(block, "B", order)
  if not left and not right:
    left = right = "false"
  else:
    # A single missing operand must not change the result.
    left = left or neutral
    right = right or neutral
  return f"{left} {operator} {right}", order


@LOGIC_RULES.register("logic_negate")
def logic_negate(gen, block):
  operand = gen.value_to_code(block, "BOOL", Order.LOGICAL_NOT) or "true"
  return f"!{operand}", Order.LOGICAL_NOT


@LOGIC_RULES.register("logic_boolean")
def logic_boolean(gen, block):
  code = gen.field_option(block, "BOOL", {"TRUE": "true", "FALSE": "false"})
  return code, Order.ATOMIC


@LOGIC_RULES.register("logic_null")
def logic_null(gen, block):
  return "null", Order.ATOMIC


@LOGIC_RULES.register("logic_ternary")
def logic_ternary(gen, block):
  condition = gen.value_to_code(block, "IF", Order.CONDITIONAL - 1) or "false"
  then = gen.value_to_code(block, "THEN", Order.CONDITIONAL) or "null"
  otherwise = gen.value_to_code(block, "ELSE", Order.CONDITIONAL) or "null"
  return f"{condition} ? {then} : {otherwise}", Order.CONDITIONAL

"""
Loop Rules for DIV Games Studio.

Counted loops use DIV's ``FROM var = a TO b STEP s; ... END`` form when the
bounds are literals, and a C-style ``FOR`` otherwise. Bounds that are neither
identifiers nor numeric literals are evaluated once into temporaries before
the loop.
"""

from blockscribe.compiler.expressions import is_number, is_simple_operand
from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import NameType, Order

LOOP_RULES = RuleTable("loops")

FLOW_STATEMENTS = {
  "BREAK": "BREAK",
  "CONTINUE": "CONTINUE",
}


def format_number(value: float) -> str:
  """Renders a number without a trailing ``.0`` for whole values."""
  if float(value).is_integer():
    return str(int(value))
  return str(value)


def _counted_loop(loop_var: str, end: str, branch: str) -> str:
  """Runs `branch` with `loop_var` counting 1, 2, ... up to `end` inclusive."""
  if is_number(end) and float(end) >= 1:
    return f"FROM {loop_var} = 1 TO {end.strip()};\n{branch}END\n"
  # FROM counts down when the end is below the start; FOR runs zero times instead.
  return f"FOR ({loop_var} = 1; {loop_var} <= {end}; {loop_var}++)\n{branch}END\n"


def _cached(gen, code: str, base: str, out: list) -> str:
  """Returns `code` if it is safe to repeat, otherwise the name of a temporary holding it."""
  if is_simple_operand(code):
    return code
  temp = gen.names.get_distinct_name(base, NameType.VARIABLE)
  out.append(gen.statement(f"{temp} = {code}"))
  return temp


@LOOP_RULES.register("controls_repeat")
def controls_repeat(gen, block):
  """Repeat a fixed number of times (count held in the TIMES field)."""
  repeats = format_number(float(block.get_field("TIMES", 0)))
  loop_var = gen.names.get_distinct_name("count", NameType.VARIABLE)
  branch = gen.add_loop_trap(gen.statement_to_code(block, "DO"), block)
  return _counted_loop(loop_var, repeats, branch)


@LOOP_RULES.register("controls_repeat_ext")
def controls_repeat_ext(gen, block):
  """Repeat a computed number of times."""
  repeats = gen.value_to_code(block, "TIMES", Order.ASSIGNMENT) or "0"
  loop_var = gen.names.get_distinct_name("count", NameType.VARIABLE)
  setup: list = []
  end = _cached(gen, repeats, "repeat_end", setup)
  branch = gen.add_loop_trap(gen.statement_to_code(block, "DO"), block)
  return "".join(setup) + _counted_loop(loop_var, end, branch)


@LOOP_RULES.register("controls_whileUntil")
def controls_while_until(gen, block):
  until = gen.field_option(block, "MODE", {"WHILE": False, "UNTIL": True})
  if until:
    condition = "!" + (gen.value_to_code(block, "BOOL", Order.LOGICAL_NOT) or "false")
  else:
    condition = gen.value_to_code(block, "BOOL", Order.NONE) or "false"
  branch = gen.add_loop_trap(gen.statement_to_code(block, "DO"), block)
  return f"WHILE ({condition})\n{branch}END\n"


@LOOP_RULES.register("controls_for")
def controls_for(gen, block):
  """
  Counts a user variable from FROM to TO in steps of BY.

  With literal bounds the direction is known up front and a plain ``FROM``
  loop is emitted. Otherwise the direction is decided when the loop starts,
  so a bound changing inside the body cannot flip it.
  """
  logical = block.get_field("VAR")
  variable = gen.variable_name(logical)
  start = gen.value_to_code(block, "FROM", Order.ASSIGNMENT) or "0"
  end = gen.value_to_code(block, "TO", Order.ASSIGNMENT) or "0"
  increment = gen.value_to_code(block, "BY", Order.ASSIGNMENT) or "1"
  branch = gen.add_loop_trap(gen.statement_to_code(block, "DO"), block)

  if is_number(start) and is_number(end) and is_number(increment):
    step = abs(float(increment))
    if float(start) > float(end):
      step = -step
    return f"FROM {variable} = {start.strip()} TO {end.strip()} STEP {format_number(step)};\n{branch}END\n"

  setup: list = []
  start_var = _cached(gen, start, f"{logical}_start", setup)
  end_var = _cached(gen, end, f"{logical}_end", setup)
  inc_var = gen.names.get_distinct_name(f"{logical}_inc", NameType.VARIABLE)
  if is_number(increment):
    setup.append(gen.statement(f"{inc_var} = {format_number(abs(float(increment)))}"))
  else:
    setup.append(gen.statement(f"{inc_var} = abs({increment})"))
  setup.append(f"IF ({start_var} > {end_var})\n{gen.indent}{gen.statement(f'{inc_var} = -{inc_var}')}END\n")
  condition = f"{inc_var} >= 0 && {variable} <= {end_var} || {inc_var} < 0 && {variable} >= {end_var}"
  return "".join(setup) + f"FOR ({variable} = {start_var}; {condition}; {variable} += {inc_var})\n{branch}END\n"


@LOOP_RULES.register("controls_flow_statements")
def controls_flow_statements(gen, block):
  return gen.statement(gen.field_option(block, "FLOW", FLOW_STATEMENTS))

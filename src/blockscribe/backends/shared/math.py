"""
Math Rules.

Covers numeric literals, arithmetic, single-operand functions, constants,
number properties, list statistics and random numbers. Operations without
a native one-liner are emitted as helper functions after the program.
"""

import math

from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order
from blockscribe.errors import UnhandledFieldValueError

MATH_RULES = RuleTable("math")

ARITHMETIC_OPERATORS = {
  "ADD": (" + ", Order.ADDITION),
  "MINUS": (" - ", Order.SUBTRACTION),
  "MULTIPLY": (" * ", Order.MULTIPLICATION),
  "DIVIDE": (" / ", Order.DIVISION),
  "POWER": (None, Order.COMMA),
}

# Right operands of these need parentheses even at equal precedence: a - (b - c), x * (5 % 3).
NON_ASSOCIATIVE = {"MINUS", "MULTIPLY", "DIVIDE"}

# Functions whose result is a plain call.
SINGLE_CALLS = {
  "ABS": "abs({})",
  "ROOT": "sqrt({})",
  "LN": "log({})",
  "EXP": "exp({})",
  "POW10": "pow(10, {})",
  "ROUND": "round({})",
  "ROUNDUP": "ceil({})",
  "ROUNDDOWN": "floor({})",
  "SIN": "sin({} / 180 * pi())",
  "COS": "cos({} / 180 * pi())",
  "TAN": "tan({} / 180 * pi())",
}

# Functions whose result ends in a division and may need wrapping.
SINGLE_QUOTIENTS = {
  "LOG10": "log({}) / log(10)",
  "ASIN": "asin({}) / pi() * 180",
  "ACOS": "acos({}) / pi() * 180",
  "ATAN": "atan({}) / pi() * 180",
}

CONSTANTS = {
  "PI": ("M_PI", Order.ATOMIC),
  "E": ("M_E", Order.ATOMIC),
  "GOLDEN_RATIO": ("(1 + sqrt(5)) / 2", Order.DIVISION),
  "SQRT2": ("M_SQRT2", Order.ATOMIC),
  "SQRT1_2": ("M_SQRT1_2", Order.ATOMIC),
  "INFINITY": ("INF", Order.ATOMIC),
}

NUMBER_PROPERTIES = {
  "EVEN": ("{} % 2 == 0", Order.EQUALITY),
  "ODD": ("{} % 2 == 1", Order.EQUALITY),
  "WHOLE": ("is_int({})", Order.FUNCTION_CALL),
  "POSITIVE": ("{} > 0", Order.RELATIONAL),
  "NEGATIVE": ("{} < 0", Order.RELATIONAL),
  "DIVISIBLE_BY": (None, Order.EQUALITY),
  "PRIME": (None, Order.FUNCTION_CALL),
}

LIST_BUILTINS = {
  "SUM": "array_sum",
  "MIN": "min",
  "MAX": "max",
}

LIST_HELPERS = {
  "AVERAGE": (
    "math_mean",
    [
      "function {name}($myList) {{",
      "  return array_sum($myList) / count($myList);",
      "}}",
    ],
  ),
  "MEDIAN": (
    "math_median",
    [
      "function {name}($arr) {{",
      "  sort($arr, SORT_NUMERIC);",
      "  return (count($arr) % 2) ? $arr[floor(count($arr) / 2)] :",
      "      ($arr[floor(count($arr) / 2)] + $arr[floor(count($arr) / 2) - 1]) / 2;",
      "}}",
    ],
  ),
  "MODE": (
    "math_modes",
    [
      "function {name}($values) {{",
      "  $v = array_count_values($values);",
      "  arsort($v);",
      "  foreach ($v as $k => $v) {{ $total = $k; break; }}",
      "  return array($total);",
      "}}",
    ],
  ),
  "STD_DEV": (
    "math_standard_deviation",
    [
      "function {name}($numbers) {{",
      "  $n = count($numbers);",
      "  if (!$n) return null;",
      "  $mean = array_sum($numbers) / count($numbers);",
      "  foreach ($numbers as $key => $num) $devs[$key] = pow($num - $mean, 2);",
      "  return sqrt(array_sum($devs) / (count($devs) - 1));",
      "}}",
    ],
  ),
  "RANDOM": (
    "math_random_list",
    [
      "function {name}($list) {{",
      "  $x = rand(0, count($list) - 1);",
      "  return $list[$x];",
      "}}",
    ],
  ),
}


def _helper(gen, key, lines):
  return gen.provide_function(key, [line.format(name=gen.placeholder) for line in lines])


@MATH_RULES.register("math_number")
def math_number(gen, block):
  raw = block.get_field("NUM", 0)
  try:
    value = float(raw)
  except (TypeError, ValueError):
    raise UnhandledFieldValueError(block.kind, "NUM", raw) from None
  if math.isnan(value):
    raise UnhandledFieldValueError(block.kind, "NUM", raw)
  if not math.isfinite(value):
    return ("-INF", Order.UNARY_NEGATION) if value < 0 else ("INF", Order.ATOMIC)
  code = str(int(value)) if value.is_integer() else str(value)
  return code, Order.UNARY_NEGATION if value < 0 else Order.ATOMIC


@MATH_RULES.register("math_arithmetic")
def math_arithmetic(gen, block):
  """Binary arithmetic. Power has no operator and becomes ``pow(a, b)``."""
  op = block.get_field("OP")
  operator, order = gen.field_option(block, "OP", ARITHMETIC_OPERATORS)
  right_order = order - 1 if op in NON_ASSOCIATIVE else order
  left = gen.value_to_code(block, "A", order) or "0"
  right = gen.value_to_code(block, "B", right_order) or "0"
  if operator is None:
    return f"pow({left}, {right})", Order.FUNCTION_CALL
  return f"{left}{operator}{right}", order


@MATH_RULES.register("math_single", "math_round", "math_trig")
def math_single(gen, block):
  """Single-operand functions; also serves the rounding and trigonometry blocks."""
  op = block.get_field("OP")
  if op == "NEG":
    arg = gen.value_to_code(block, "NUM", Order.UNARY_NEGATION) or "0"
    if arg.startswith("-"):
      # "--x" would read as a decrement.
      arg = " " + arg
    return f"-{arg}", Order.UNARY_NEGATION

  if op in ("SIN", "COS", "TAN"):
    arg = gen.value_to_code(block, "NUM", Order.DIVISION) or "0"
  else:
    arg = gen.value_to_code(block, "NUM", Order.NONE) or "0"

  if op in SINGLE_CALLS:
    return SINGLE_CALLS[op].format(arg), Order.FUNCTION_CALL
  if op in SINGLE_QUOTIENTS:
    return SINGLE_QUOTIENTS[op].format(arg), Order.DIVISION
  raise UnhandledFieldValueError(block.kind, "OP", op, expected=["NEG", *SINGLE_CALLS, *SINGLE_QUOTIENTS])


@MATH_RULES.register("math_constant")
def math_constant(gen, block):
  return gen.field_option(block, "CONSTANT", CONSTANTS)


@MATH_RULES.register("math_number_property")
def math_number_property(gen, block):
  """Tests a number for evenness, primality, sign, divisibility, ..."""
  template, order = gen.field_option(block, "PROPERTY", NUMBER_PROPERTIES)
  prop = block.get_field("PROPERTY")

  if prop == "PRIME":
    number = gen.value_to_code(block, "NUMBER_TO_CHECK", Order.NONE) or "0"
    function_name = gen.provide_function(
      "math_isPrime",
      [
        f"function {gen.placeholder}($n) {{",
        "  // https://en.wikipedia.org/wiki/Primality_test#Naive_methods",
        "  if ($n == 2 || $n == 3) {",
        "    return true;",
        "  }",
        "  // False if n is NaN, negative, is 1, or not whole.",
        "  // And false if n is divisible by 2 or 3.",
        "  if (!is_numeric($n) || $n <= 1 || $n % 1 != 0 || $n % 2 == 0 || $n % 3 == 0) {",
        "    return false;",
        "  }",
        "  // Check all the numbers of form 6k +/- 1, up to sqrt(n).",
        "  for ($x = 6; $x <= sqrt($n) + 1; $x += 6) {",
        "    if ($n % ($x - 1) == 0 || $n % ($x + 1) == 0) {",
        "      return false;",
        "    }",
        "  }",
        "  return true;",
        "}",
      ],
    )
    return f"{function_name}({number})", order

  if prop == "WHOLE":
    number = gen.value_to_code(block, "NUMBER_TO_CHECK", Order.NONE) or "0"
    return template.format(number), order

  number = gen.value_to_code(block, "NUMBER_TO_CHECK", Order.MODULUS) or "0"
  if prop == "DIVISIBLE_BY":
    divisor = gen.value_to_code(block, "DIVISOR", Order.MODULUS - 1) or "0"
    return f"{number} % {divisor} == 0", order
  return template.format(number), order


@MATH_RULES.register("math_change")
def math_change(gen, block):
  delta = gen.value_to_code(block, "DELTA", Order.ADDITION) or "0"
  variable = gen.variable_name(block.get_field("VAR"))
  return gen.statement(f"{variable} = {variable} + {delta}")


@MATH_RULES.register("math_on_list")
def math_on_list(gen, block):
  """Aggregates over a list: built-ins for sum/min/max, helpers for the rest."""
  op = block.get_field("OP")
  lst = gen.value_to_code(block, "LIST", Order.NONE) or "array()"
  if op in LIST_BUILTINS:
    return f"{LIST_BUILTINS[op]}({lst})", Order.FUNCTION_CALL
  key, lines = gen.field_option(block, "OP", LIST_HELPERS)
  return f"{_helper(gen, key, lines)}({lst})", Order.FUNCTION_CALL


@MATH_RULES.register("math_modulo")
def math_modulo(gen, block):
  dividend = gen.value_to_code(block, "DIVIDEND", Order.MODULUS) or "0"
  divisor = gen.value_to_code(block, "DIVISOR", Order.MODULUS - 1) or "0"
  return f"{dividend} % {divisor}", Order.MODULUS


@MATH_RULES.register("math_constrain")
def math_constrain(gen, block):
  value = gen.value_to_code(block, "VALUE", Order.COMMA) or "0"
  low = gen.value_to_code(block, "LOW", Order.COMMA) or "0"
  high = gen.value_to_code(block, "HIGH", Order.COMMA) or "INF"
  return f"min(max({value}, {low}), {high})", Order.FUNCTION_CALL


@MATH_RULES.register("math_random_int")
def math_random_int(gen, block):
  """Random integer between FROM and TO inclusive, in either order."""
  low = gen.value_to_code(block, "FROM", Order.COMMA) or "0"
  high = gen.value_to_code(block, "TO", Order.COMMA) or "0"
  function_name = gen.provide_function(
    "math_random_int",
    [
      f"function {gen.placeholder}($a, $b) {{",
      "  if ($a > $b) {",
      "    return rand($b, $a);",
      "  }",
      "  return rand($a, $b);",
      "}",
    ],
  )
  return f"{function_name}({low}, {high})", Order.FUNCTION_CALL


@MATH_RULES.register("math_random_float")
def math_random_float(gen, block):
  return "(float)rand() / (float)getrandmax()", Order.DIVISION

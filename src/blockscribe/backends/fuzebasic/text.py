"""
Text Rules for FUZE BASIC.

String literals, concatenation, searching, slicing, case changes and
console input/output.
"""

from blockscribe.compiler.expressions import is_number
from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order
from blockscribe.errors import UnhandledFieldValueError

TEXT_RULES = RuleTable("text")

EMPTY = '""'

CHANGE_CASE = {
  "UPPERCASE": "strtoupper({})",
  "LOWERCASE": "strtolower({})",
  "TITLECASE": "ucwords(strtolower({}))",
}

TRIM_FUNCTIONS = {
  "LEFT": "ltrim",
  "RIGHT": "rtrim",
  "BOTH": "trim",
}

SEARCH_FUNCTIONS = {
  "FIRST": ("text_indexOf", "strpos"),
  "LAST": ("text_lastIndexOf", "strrpos"),
}

CHAR_POSITIONS = ("FIRST", "LAST", "FROM_START", "FROM_END", "RANDOM")
SUBSTRING_POSITIONS = ("FROM_START", "FROM_END", "FIRST", "LAST")


@TEXT_RULES.register("text")
def text(gen, block):
  return gen.quote(str(block.get_field("TEXT", ""))), Order.ATOMIC


@TEXT_RULES.register("text_join")
def text_join(gen, block):
  """Concatenates the ``items`` count of ADDn sockets with ``+``."""
  count = int(block.mutation.get("items", 0))
  if count == 0:
    return EMPTY, Order.ATOMIC
  if count == 1:
    return gen.value_to_code(block, "ADD0", Order.ATOMIC) or EMPTY, Order.ATOMIC
  parts = [gen.value_to_code(block, "ADD0", Order.ADDITION) or EMPTY]
  for n in range(1, count):
    # Left-to-right: a later "1 + 2" must not merge into the running string.
    parts.append(gen.value_to_code(block, f"ADD{n}", Order.ADDITION - 1) or EMPTY)
  return " + ".join(parts), Order.ADDITION


@TEXT_RULES.register("text_append")
def text_append(gen, block):
  variable = gen.variable_name(block.get_field("VAR"))
  value = gen.value_to_code(block, "TEXT", Order.ADDITION - 1) or EMPTY
  return gen.statement(f"{variable} = {variable} + {value}")


@TEXT_RULES.register("text_length")
def text_length(gen, block):
  value = gen.value_to_code(block, "VALUE", Order.NONE) or EMPTY
  return f"strlen({value})", Order.FUNCTION_CALL


@TEXT_RULES.register("text_isEmpty")
def text_is_empty(gen, block):
  value = gen.value_to_code(block, "VALUE", Order.NONE) or EMPTY
  return f"empty({value})", Order.FUNCTION_CALL


@TEXT_RULES.register("text_indexOf")
def text_index_of(gen, block):
  """1-based position of FIND in VALUE, 0 when absent."""
  key, builtin = gen.field_option(block, "END", SEARCH_FUNCTIONS)
  find = gen.value_to_code(block, "FIND", Order.COMMA) or EMPTY
  value = gen.value_to_code(block, "VALUE", Order.COMMA) or EMPTY
  function_name = gen.provide_function(
    key,
    [
      f"function {gen.placeholder}($text, $search) {{",
      f"  $pos = {builtin}($text, $search);",
      "  return $pos === false ? 0 : $pos + 1;",
      "}",
    ],
  )
  return f"{function_name}({value}, {find})", Order.FUNCTION_CALL


@TEXT_RULES.register("text_charAt")
def text_char_at(gen, block):
  """Letter at a 1-based position, counted from either end, or a random one."""
  where = block.get_field("WHERE") or "FROM_START"
  if where not in CHAR_POSITIONS:
    raise UnhandledFieldValueError(block.kind, "WHERE", where, expected=CHAR_POSITIONS)
  value = gen.value_to_code(block, "VALUE", Order.COMMA) or EMPTY

  if where == "FIRST":
    return f"substr({value}, 0, 1)", Order.FUNCTION_CALL
  if where == "LAST":
    return f"substr({value}, -1, 1)", Order.FUNCTION_CALL
  if where == "RANDOM":
    function_name = gen.provide_function(
      "text_random_letter",
      [
        f"function {gen.placeholder}($text) {{",
        "  return $text[rand(0, strlen($text) - 1)];",
        "}",
      ],
    )
    return f"{function_name}({value})", Order.FUNCTION_CALL

  if where == "FROM_START":
    at = gen.value_to_code(block, "AT", Order.SUBTRACTION) or "1"
    if is_number(at):
      # Literal indexes are shifted to 0-based right away.
      offset = float(at) - 1
      at = str(int(offset)) if offset.is_integer() else str(offset)
    else:
      at = f"{at} - 1"
    return f"substr({value}, {at}, 1)", Order.FUNCTION_CALL

  at = gen.value_to_code(block, "AT", Order.UNARY_NEGATION) or "1"
  if at.startswith("-"):
    # "--x" would read as a decrement.
    at = " " + at
  return f"substr({value}, -{at}, 1)", Order.FUNCTION_CALL


@TEXT_RULES.register("text_getSubstring")
def text_get_substring(gen, block):
  """Substring between two positions, each relative to either end."""
  where1 = block.get_field("WHERE1")
  where2 = block.get_field("WHERE2")
  if where1 == "FIRST" and where2 == "LAST":
    return gen.value_to_code(block, "STRING", Order.ATOMIC) or EMPTY, Order.ATOMIC
  value = gen.value_to_code(block, "STRING", Order.COMMA) or EMPTY
  for field, where in (("WHERE1", where1), ("WHERE2", where2)):
    if where not in SUBSTRING_POSITIONS:
      raise UnhandledFieldValueError(block.kind, field, where, expected=SUBSTRING_POSITIONS)

  at1 = gen.value_to_code(block, "AT1", Order.COMMA) or "1"
  at2 = gen.value_to_code(block, "AT2", Order.COMMA) or "1"
  function_name = gen.provide_function(
    "text_get_substring",
    [
      f"function {gen.placeholder}($text, $where1, $at1, $where2, $at2) {{",
      "  if ($where1 == 'FROM_START') {",
      "    $at1--;",
      "  } else if ($where1 == 'FROM_END') {",
      "    $at1 = strlen($text) - $at1;",
      "  } else if ($where1 == 'FIRST') {",
      "    $at1 = 0;",
      "  } else if ($where1 == 'LAST') {",
      "    $at1 = strlen($text) - 1;",
      "  }",
      "  if ($where2 == 'FROM_START') {",
      "    $at2--;",
      "  } else if ($where2 == 'FROM_END') {",
      "    $at2 = strlen($text) - $at2;",
      "  } else if ($where2 == 'FIRST') {",
      "    $at2 = 0;",
      "  } else if ($where2 == 'LAST') {",
      "    $at2 = strlen($text) - 1;",
      "  }",
      "  return substr($text, $at1, $at2 - $at1 + 1);",
      "}",
    ],
  )
  return f"{function_name}({value}, '{where1}', {at1}, '{where2}', {at2})", Order.FUNCTION_CALL


@TEXT_RULES.register("text_changeCase")
def text_change_case(gen, block):
  template = gen.field_option(block, "CASE", CHANGE_CASE)
  value = gen.value_to_code(block, "TEXT", Order.NONE) or EMPTY
  return template.format(value), Order.FUNCTION_CALL


@TEXT_RULES.register("text_trim")
def text_trim(gen, block):
  function = gen.field_option(block, "MODE", TRIM_FUNCTIONS)
  value = gen.value_to_code(block, "TEXT", Order.NONE) or EMPTY
  return f"{function}({value})", Order.FUNCTION_CALL


@TEXT_RULES.register("text_print")
def text_print(gen, block):
  value = gen.value_to_code(block, "TEXT", Order.NONE) or EMPTY
  return f"PRINT {value}\n"


def _prompt(block, message):
  code = f"readline({message})"
  if block.get_field("TYPE") == "NUMBER":
    code = f"floatval({code})"
  return code, Order.FUNCTION_CALL


@TEXT_RULES.register("text_prompt")
def text_prompt(gen, block):
  return _prompt(block, gen.quote(str(block.get_field("TEXT", ""))))


@TEXT_RULES.register("text_prompt_ext")
def text_prompt_ext(gen, block):
  return _prompt(block, gen.value_to_code(block, "TEXT", Order.NONE) or EMPTY)

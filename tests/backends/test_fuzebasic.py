"""
Tests for the FUZE BASIC Backend.

Verifies:
1. Program layout (no prologue, END, helpers after END).
2. Operator precedence and minimal parenthesization.
3. Helper deduplication and naming.
4. Text, number and logic rules.
5. Fatal errors for unknown kinds and field values.
"""

import pytest

from blockscribe.backends.fuzebasic import FuzeBasicGenerator
from blockscribe.blocks import Block
from blockscribe.errors import UnhandledFieldValueError, UnknownBlockKindError
from tests.utils.builders import arith, assign, chain, num, text, var


def modulo(dividend, divisor):
  return Block("math_modulo", inputs={"DIVIDEND": dividend, "DIVISOR": divisor}, output=True)


def gen_value(block):
  """Generates `y = <block>` and returns the right-hand side."""
  out = FuzeBasicGenerator().generate([assign("y", block)])
  first_line = out.splitlines()[0]
  assert first_line.startswith("y = ")
  return first_line[len("y = ") :]


def test_program_layout():
  assert FuzeBasicGenerator().generate([assign("x", num(1))]) == "x = 1\nEND\n"


def test_empty_program_still_ends():
  assert FuzeBasicGenerator().generate([]) == "END\n"


def test_naked_value_becomes_a_line():
  assert FuzeBasicGenerator().generate([var("x")]) == "x\nEND\n"


@pytest.mark.parametrize(
  "block, expected",
  [
    (arith("MULTIPLY", arith("ADD", var("a"), var("b")), var("c")), "(a + b) * c"),
    (arith("ADD", arith("MULTIPLY", var("a"), var("b")), var("c")), "a * b + c"),
    (arith("MINUS", var("a"), arith("MINUS", var("b"), var("c"))), "a - (b - c)"),
    (arith("MINUS", arith("MINUS", var("a"), var("b")), var("c")), "a - b - c"),
    (arith("DIVIDE", var("a"), arith("MULTIPLY", var("b"), var("c"))), "a / (b * c)"),
    (arith("ADD", var("a"), arith("ADD", var("b"), var("c"))), "a + b + c"),
    (arith("MULTIPLY", var("x"), modulo(num(5), num(3))), "x * (5 % 3)"),
    (arith("MULTIPLY", var("x"), arith("DIVIDE", num(3), num(2))), "x * (3 / 2)"),
    (arith("MULTIPLY", arith("DIVIDE", var("a"), var("b")), var("c")), "a / b * c"),
    (arith("POWER", var("a"), var("b")), "pow(a, b)"),
    (arith("MULTIPLY", arith("POWER", var("a"), num(2)), num(3)), "pow(a, 2) * 3"),
    (arith("ADD", None, None), "0 + 0"),
  ],
)
def test_arithmetic_precedence(block, expected):
  assert gen_value(block) == expected


def test_numbers():
  assert gen_value(num("2.50")) == "2.5"
  assert gen_value(num(7.0)) == "7"
  assert gen_value(num("inf")) == "INF"


def test_negating_a_negative_literal_keeps_a_space():
  neg = Block("math_single", fields={"OP": "NEG"}, inputs={"NUM": num(-3)}, output=True)
  assert gen_value(neg) == "- -3"


def test_invalid_number_literal():
  with pytest.raises(UnhandledFieldValueError) as exc:
    FuzeBasicGenerator().generate([assign("y", num("abc"))])
  assert exc.value.field == "NUM"
  assert exc.value.value == "abc"


def test_single_functions():
  sine = Block("math_trig", fields={"OP": "SIN"}, inputs={"NUM": arith("ADD", var("a"), num(1))}, output=True)
  assert gen_value(sine) == "sin((a + 1) / 180 * pi())"

  log10 = Block("math_single", fields={"OP": "LOG10"}, inputs={"NUM": var("x")}, output=True)
  assert gen_value(arith("MULTIPLY", log10, num(2))) == "log(x) / log(10) * 2"
  log10 = Block("math_single", fields={"OP": "LOG10"}, inputs={"NUM": var("x")}, output=True)
  assert gen_value(arith("DIVIDE", num(2), log10)) == "2 / (log(x) / log(10))"


def test_math_modulo_and_constrain():
  modulo = Block(
    "math_modulo",
    inputs={"DIVIDEND": var("a"), "DIVISOR": Block("math_modulo", inputs={"DIVIDEND": var("b"), "DIVISOR": var("c")}, output=True)},
    output=True,
  )
  assert gen_value(modulo) == "a % (b % c)"

  constrain = Block("math_constrain", inputs={"VALUE": var("x"), "LOW": num(0), "HIGH": num(100)}, output=True)
  assert gen_value(constrain) == "min(max(x, 0), 100)"


def test_math_change():
  change = Block("math_change", fields={"VAR": "x"}, inputs={"DELTA": num(1)})
  assert FuzeBasicGenerator().generate([change]) == "x = x + 1\nEND\n"


def test_random_int_helper_defined_once_after_end():
  first = Block("math_random_int", inputs={"FROM": num(1), "TO": num(6)}, output=True)
  second = Block("math_random_int", inputs={"FROM": num(10), "TO": var("a")}, output=True)
  out = FuzeBasicGenerator().generate([chain(assign("a", first), assign("b", second))])

  assert out == (
    "a = math_random_int(1, 6)\n"
    "b = math_random_int(10, a)\n"
    "END\n"
    "\n\n"
    "function math_random_int($a, $b) {\n"
    "  if ($a > $b) {\n"
    "    return rand($b, $a);\n"
    "  }\n"
    "  return rand($a, $b);\n"
    "}\n"
  )


def test_helpers_follow_first_request_order():
  prime = Block("math_number_property", fields={"PROPERTY": "PRIME"}, inputs={"NUMBER_TO_CHECK": num(7)}, output=True)
  average = Block("math_on_list", fields={"OP": "AVERAGE"}, inputs={"LIST": var("l")}, output=True)
  out = FuzeBasicGenerator().generate([chain(assign("p", prime), assign("m", average))])

  assert "p = math_isPrime(7)\nm = math_mean(l)\nEND\n" in out
  assert out.index("function math_isPrime($n)") < out.index("function math_mean($myList)")


def test_number_properties():
  even = Block("math_number_property", fields={"PROPERTY": "EVEN"}, inputs={"NUMBER_TO_CHECK": var("x")}, output=True)
  assert gen_value(even) == "x % 2 == 0"

  divisible = Block(
    "math_number_property",
    fields={"PROPERTY": "DIVISIBLE_BY"},
    inputs={"NUMBER_TO_CHECK": arith("ADD", var("x"), num(1)), "DIVISOR": num(3)},
    output=True,
  )
  assert gen_value(divisible) == "(x + 1) % 3 == 0"


def test_unknown_number_property():
  block = Block("math_number_property", fields={"PROPERTY": "PERFECT"}, inputs={"NUMBER_TO_CHECK": num(6)}, output=True)
  with pytest.raises(UnhandledFieldValueError) as exc:
    FuzeBasicGenerator().generate([assign("y", block)])
  assert exc.value.kind == "math_number_property"
  assert exc.value.field == "PROPERTY"


# --- Text ----------------------------------------------------------------------


def test_print_uses_basic_keyword():
  out = FuzeBasicGenerator().generate([Block("text_print", inputs={"TEXT": text("hi")})])
  assert out == 'PRINT "hi"\nEND\n'


def test_string_literal_escaping():
  assert gen_value(text('say "hi"\\')) == '"say \\"hi\\"\\\\"'


def test_text_join():
  join = Block(
    "text_join",
    mutation={"items": 3},
    inputs={"ADD0": text("a"), "ADD1": var("x"), "ADD2": arith("ADD", num(1), num(2))},
    output=True,
  )
  assert gen_value(join) == '"a" + x + (1 + 2)'
  single = Block("text_join", mutation={"items": 1}, inputs={"ADD0": arith("ADD", var("a"), var("b"))}, output=True)
  assert gen_value(single) == "(a + b)"
  assert gen_value(Block("text_join", mutation={"items": 0}, output=True)) == '""'
  assert gen_value(Block("text_join", mutation={"items": 2}, output=True)) == '"" + ""'


def test_text_append():
  append = Block("text_append", fields={"VAR": "s"}, inputs={"TEXT": text("!")})
  assert FuzeBasicGenerator().generate([append]) == 's = s + "!"\nEND\n'


@pytest.mark.parametrize(
  "where, at, expected",
  [
    ("FROM_START", num(3), "substr(s, 2, 1)"),
    ("FROM_START", var("i"), "substr(s, i - 1, 1)"),
    ("FROM_END", num(2), "substr(s, -2, 1)"),
    ("FROM_END", num(-2), "substr(s, - -2, 1)"),
    ("FIRST", None, "substr(s, 0, 1)"),
    ("LAST", None, "substr(s, -1, 1)"),
  ],
)
def test_text_char_at(where, at, expected):
  inputs = {"VALUE": var("s")}
  if at is not None:
    inputs["AT"] = at
  block = Block("text_charAt", fields={"WHERE": where}, inputs=inputs, output=True)
  assert gen_value(block) == expected


def test_text_char_at_unknown_position():
  block = Block("text_charAt", fields={"WHERE": "MIDDLE"}, inputs={"VALUE": var("s")}, output=True)
  with pytest.raises(UnhandledFieldValueError):
    FuzeBasicGenerator().generate([assign("y", block)])


def test_whole_substring_is_the_string_itself():
  block = Block("text_getSubstring", fields={"WHERE1": "FIRST", "WHERE2": "LAST"}, inputs={"STRING": var("s")}, output=True)
  assert gen_value(block) == "s"


def test_text_index_of_uses_helper():
  block = Block("text_indexOf", fields={"END": "LAST"}, inputs={"VALUE": var("s"), "FIND": text("a")}, output=True)
  out = FuzeBasicGenerator().generate([assign("y", block)])
  assert out.startswith('y = text_lastIndexOf(s, "a")\nEND\n')
  assert "  $pos = strrpos($text, $search);\n" in out


def test_numeric_prompt():
  block = Block("text_prompt_ext", fields={"TYPE": "NUMBER"}, inputs={"TEXT": text("Age?")}, output=True)
  assert gen_value(block) == 'floatval(readline("Age?"))'


# --- Logic and naming -----------------------------------------------------------


def test_logic_operation_defaults_and_wrapping():
  half = Block("logic_operation", fields={"OP": "AND"}, inputs={"A": var("a")}, output=True)
  assert gen_value(Block("logic_negate", inputs={"BOOL": half}, output=True)) == "!(a && true)"

  empty = Block("logic_operation", fields={"OP": "OR"}, output=True)
  assert gen_value(Block("logic_negate", inputs={"BOOL": empty}, output=True)) == "!(false || false)"


def test_nested_comparison_keeps_parentheses():
  inner = Block("logic_compare", fields={"OP": "LT"}, inputs={"A": var("a"), "B": var("b")}, output=True)
  outer = Block("logic_compare", fields={"OP": "EQ"}, inputs={"A": inner, "B": Block("logic_boolean", fields={"BOOL": "TRUE"}, output=True)}, output=True)
  assert gen_value(outer) == "a < b == true"

  inner = Block("logic_compare", fields={"OP": "EQ"}, inputs={"A": var("a"), "B": var("b")}, output=True)
  outer = Block("logic_compare", fields={"OP": "EQ"}, inputs={"A": inner, "B": var("c")}, output=True)
  assert gen_value(outer) == "(a == b) == c"


def test_ternary():
  block = Block("logic_ternary", inputs={"IF": var("c"), "THEN": num(1), "ELSE": num(2)}, output=True)
  assert gen_value(block) == "c ? 1 : 2"


def test_reserved_word_variable():
  assert FuzeBasicGenerator().generate([assign("print", num(1))]) == "print2 = 1\nEND\n"


def test_comments_are_hoisted_in_basic_style():
  statement = assign("x", num(1, comment="one"), comment="set x")
  assert FuzeBasicGenerator().generate([statement]) == "// set x\n// one\nx = 1\nEND\n"


def test_unknown_kind_is_fatal():
  loop = Block("controls_repeat", fields={"TIMES": 3})
  with pytest.raises(UnknownBlockKindError) as exc:
    FuzeBasicGenerator().generate([loop])
  assert exc.value.kind == "controls_repeat"
  assert exc.value.language == "fuzebasic"
  assert str(exc.value) == 'Language "fuzebasic" does not know how to generate code for block type "controls_repeat".'

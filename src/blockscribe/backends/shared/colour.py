"""
Colour Rules.

Colours are represented as ``'#rrggbb'`` strings; anything beyond a literal
goes through a helper routine emitted once per program.
"""

from blockscribe.compiler.rules import RuleTable
from blockscribe.enums import Order

COLOUR_RULES = RuleTable("colour")

_TO_HEX = [
  '  $hex = "#";',
  '  $hex .= str_pad(dechex($r), 2, "0", STR_PAD_LEFT);',
  '  $hex .= str_pad(dechex($g), 2, "0", STR_PAD_LEFT);',
  '  $hex .= str_pad(dechex($b), 2, "0", STR_PAD_LEFT);',
  "  return $hex;",
]


@COLOUR_RULES.register("colour_picker")
def colour_picker(gen, block):
  return f"'{block.get_field('COLOUR', '#000000')}'", Order.ATOMIC


@COLOUR_RULES.register("colour_random")
def colour_random(gen, block):
  function_name = gen.provide_function(
    "colour_random",
    [
      f"function {gen.placeholder}() {{",
      "  $r = rand(0, 255);",
      "  $g = rand(0, 255);",
      "  $b = rand(0, 255);",
      *_TO_HEX,
      "}",
    ],
  )
  return f"{function_name}()", Order.FUNCTION_CALL


@COLOUR_RULES.register("colour_rgb")
def colour_rgb(gen, block):
  """Composes a colour from red, green and blue percentages."""
  red = gen.value_to_code(block, "RED", Order.COMMA) or "0"
  green = gen.value_to_code(block, "GREEN", Order.COMMA) or "0"
  blue = gen.value_to_code(block, "BLUE", Order.COMMA) or "0"
  function_name = gen.provide_function(
    "colour_rgb",
    [
      f"function {gen.placeholder}($r, $g, $b) {{",
      "  $r = round(max(min($r, 100), 0) * 2.55);",
      "  $g = round(max(min($g, 100), 0) * 2.55);",
      "  $b = round(max(min($b, 100), 0) * 2.55);",
      *_TO_HEX,
      "}",
    ],
  )
  return f"{function_name}({red}, {green}, {blue})", Order.FUNCTION_CALL


@COLOUR_RULES.register("colour_blend")
def colour_blend(gen, block):
  """Mixes two colours; a ratio of 0 gives the first, 1 the second."""
  first = gen.value_to_code(block, "COLOUR1", Order.COMMA) or "'#000000'"
  second = gen.value_to_code(block, "COLOUR2", Order.COMMA) or "'#000000'"
  ratio = gen.value_to_code(block, "RATIO", Order.COMMA) or "0.5"
  function_name = gen.provide_function(
    "colour_blend",
    [
      f"function {gen.placeholder}($c1, $c2, $ratio) {{",
      "  $ratio = max(min($ratio, 1), 0);",
      "  $r1 = hexdec(substr($c1, 1, 2));",
      "  $g1 = hexdec(substr($c1, 3, 2));",
      "  $b1 = hexdec(substr($c1, 5, 2));",
      "  $r2 = hexdec(substr($c2, 1, 2));",
      "  $g2 = hexdec(substr($c2, 3, 2));",
      "  $b2 = hexdec(substr($c2, 5, 2));",
      "  $r = round($r1 * (1 - $ratio) + $r2 * $ratio);",
      "  $g = round($g1 * (1 - $ratio) + $g2 * $ratio);",
      "  $b = round($b1 * (1 - $ratio) + $b2 * $ratio);",
      *_TO_HEX,
      "}",
    ],
  )
  return f"{function_name}({first}, {second}, {ratio})", Order.FUNCTION_CALL

"""
Tests for the Helper Deduplicator.

Verifies:
1. A helper is defined once no matter how often it is requested.
2. The placeholder token is replaced with the allocated name.
3. Helper names never collide with procedures or reserved words.
4. Definitions keep first-requested order.
"""

from blockscribe.compiler.helpers import DEFAULT_PLACEHOLDER, HelperDeduplicator
from blockscribe.compiler.names import NameAllocator
from blockscribe.enums import NameType

TEMPLATE = [f"function {DEFAULT_PLACEHOLDER}($a) {{", "  return $a;", "}"]


def test_provide_defines_once():
  helpers = HelperDeduplicator(NameAllocator())
  names = [helpers.provide("identity", TEMPLATE) for _ in range(5)]

  assert names == ["identity"] * 5
  assert len(helpers) == 1
  assert helpers.definitions() == ["function identity($a) {\n  return $a;\n}"]


def test_later_templates_are_ignored():
  helpers = HelperDeduplicator(NameAllocator())
  helpers.provide("identity", TEMPLATE)
  helpers.provide("identity", ["something else"])
  assert "something else" not in helpers.definitions()[0]


def test_helper_name_avoids_user_procedure():
  names = NameAllocator()
  assert names.get_name("math_random_int", NameType.PROCEDURE) == "math_random_int"

  helpers = HelperDeduplicator(names)
  name = helpers.provide("math_random_int", [f"function {DEFAULT_PLACEHOLDER}() {{}}"])

  assert name == "math_random_int2"
  assert helpers.definitions() == ["function math_random_int2() {}"]
  assert helpers.function_name("math_random_int") == "math_random_int2"


def test_helper_name_avoids_reserved_words():
  helpers = HelperDeduplicator(NameAllocator(reserved_words={"print"}))
  assert helpers.provide("print", ["x"]) == "print2"


def test_custom_placeholder():
  helpers = HelperDeduplicator(NameAllocator(), placeholder="@@NAME@@")
  helpers.provide("pick", ["def @@NAME@@(): @@NAME@@"])
  assert helpers.definitions() == ["def pick(): pick"]


def test_definitions_keep_first_requested_order():
  helpers = HelperDeduplicator(NameAllocator())
  helpers.provide("b_helper", ["B"])
  helpers.define("process:main", "PROCESS main()")
  helpers.provide("a_helper", ["A"])
  helpers.provide("b_helper", ["B again"])
  helpers.define("process:main", "PROCESS main(x)")

  assert helpers.definitions() == ["B", "PROCESS main(x)", "A"]
  assert helpers.has("process:main")
  assert not helpers.has("missing")


def test_reset_clears_definitions():
  helpers = HelperDeduplicator(NameAllocator())
  helpers.provide("a", ["A"])
  helpers.reset()
  assert len(helpers) == 0
  assert helpers.definitions() == []

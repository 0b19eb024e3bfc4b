"""
Tests for GeneratorConfig validation and its effect on generation.

Verifies:
1. Defaults and language normalization.
2. Rejection of unknown languages and invalid option values.
3. Options overriding backend defaults (reserved words, prefixes, templates).
"""

import pytest
from pydantic import ValidationError

from blockscribe.backends.divgames import DivGamesGenerator
from blockscribe.backends.fuzebasic import FuzeBasicGenerator
from blockscribe.blocks import Block
from blockscribe.config import GeneratorConfig
from tests.utils.builders import assign, chain, num, var


def test_defaults():
  config = GeneratorConfig()
  assert config.language == "divgames"
  assert config.indent_unit == "  "
  assert config.name_placeholder_token == "{leCUI8hutHZI4480Dc}"
  assert config.reserved_words == set()
  assert config.shared_namespace is None
  assert config.prologue_template is None


def test_language_is_normalized():
  assert GeneratorConfig(language="  FuzeBasic ").language == "fuzebasic"


def test_unknown_language_is_rejected():
  with pytest.raises(ValidationError) as exc:
    GeneratorConfig(language="cobol")
  assert "Unknown language: 'cobol'" in str(exc.value)
  assert "divgames" in str(exc.value)


@pytest.mark.parametrize(
  "options",
  [
    {"indent_unit": "-"},
    {"name_placeholder_token": ""},
    {"max_suffix_attempts": 0},
  ],
)
def test_invalid_options_are_rejected(options):
  with pytest.raises(ValidationError):
    GeneratorConfig(**options)


def test_extra_reserved_words_merge_with_backend_list():
  config = GeneratorConfig(reserved_words={"hero"})
  out = DivGamesGenerator(config).generate([chain(assign("hero", num(1)), assign("end", num(2)))])
  assert "hero2 = 1;\nend2 = 2;\n" in out


def test_variable_prefix_only_touches_variables():
  config = GeneratorConfig(language="fuzebasic", variable_prefix="$")
  roll = Block("math_random_int", inputs={"FROM": num(1), "TO": var("n")}, output=True)
  out = FuzeBasicGenerator(config).generate([assign("x", roll)])
  assert out.startswith("$x = math_random_int(1, $n)\nEND\n")


def test_epilogue_and_comment_prefix_override_backend():
  config = GeneratorConfig(language="fuzebasic", epilogue_template="STOP\n", comment_prefix="REM ")
  out = FuzeBasicGenerator(config).generate([assign("x", num(1), comment="start")])
  assert out == "REM start\nx = 1\nSTOP\n"


def test_config_is_not_mutated_by_generation():
  config = GeneratorConfig(reserved_words={"hero"})
  DivGamesGenerator(config).generate([assign("hero", num(1))])
  assert config.reserved_words == {"hero"}

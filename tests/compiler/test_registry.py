"""
Tests for the Backend Registry.
"""

import pytest

from blockscribe.backends.divgames import DivGamesGenerator
from blockscribe.backends.fuzebasic import FuzeBasicGenerator
from blockscribe.compiler.generator import CodeGenerator
from blockscribe.compiler.registry import _BACKENDS, available_languages, create_generator, get_backend_class
from blockscribe.config import GeneratorConfig


def test_available_languages():
  assert available_languages() == ["divgames", "fuzebasic"]


@pytest.mark.parametrize("key, cls", [("divgames", DivGamesGenerator), (" FuzeBasic ", FuzeBasicGenerator)])
def test_get_backend_class(key, cls):
  assert get_backend_class(key) is cls


def test_unknown_language():
  with pytest.raises(ValueError, match="No backend registered"):
    get_backend_class("cobol")


def test_create_generator_from_language():
  gen = create_generator("fuzebasic")
  assert isinstance(gen, FuzeBasicGenerator)
  assert gen.config.language == "fuzebasic"


def test_create_generator_from_config():
  config = GeneratorConfig(language="divgames", indent_unit="    ")
  gen = create_generator(config=config)
  assert isinstance(gen, DivGamesGenerator)
  assert gen.config is config


def test_custom_backend_registration():
  class EchoGenerator(CodeGenerator):
    NAME = "echo"

  _BACKENDS["echo"] = EchoGenerator
  assert "echo" in available_languages()
  assert GeneratorConfig(language="echo").language == "echo"
  assert isinstance(create_generator("echo"), EchoGenerator)

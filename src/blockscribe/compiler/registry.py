"""
Backend Registry.

Maps language keys to their generator classes. Configuration validation and
the package-level `generate` helper resolve languages through this module.
"""

from typing import Dict, List, Optional, Type

from blockscribe.backends.divgames import DivGamesGenerator
from blockscribe.backends.fuzebasic import FuzeBasicGenerator
from blockscribe.compiler.generator import CodeGenerator
from blockscribe.config import GeneratorConfig

_BACKENDS: Dict[str, Type[CodeGenerator]] = {
  "divgames": DivGamesGenerator,
  "fuzebasic": FuzeBasicGenerator,
}


def available_languages() -> List[str]:
  """Returns the registered language keys, sorted."""
  return sorted(_BACKENDS)


def get_backend_class(language: str) -> Type[CodeGenerator]:
  """
  Retrieves the generator class for a language.

  Args:
      language (str): The language key (case-insensitive).

  Returns:
      Type[CodeGenerator]: The generator class.

  Raises:
      ValueError: If no backend is registered under that key.
  """
  key = language.lower().strip()
  if key not in _BACKENDS:
    raise ValueError(f"No backend registered for language '{language}'. Supported languages: {available_languages()}")
  return _BACKENDS[key]


def create_generator(language: Optional[str] = None, config: Optional[GeneratorConfig] = None) -> CodeGenerator:
  """
  Instantiates the generator for a language.

  Args:
      language: Language key. Defaults to `config.language`.
      config: Run configuration. Defaults to `GeneratorConfig(language=language)`.

  Returns:
      CodeGenerator: A ready-to-use generator.
  """
  if config is None:
    config = GeneratorConfig(language=language) if language else GeneratorConfig()
  return get_backend_class(language or config.language)(config)

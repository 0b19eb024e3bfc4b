"""
Generator Configuration.

`GeneratorConfig` holds every knob of a generation run. Values can be given
directly, or loaded from the ``[tool.blockscribe]`` table of the nearest
``pyproject.toml`` with keyword overrides taking precedence.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Set, Tuple

from pydantic import BaseModel, Field, field_validator
from rich.markup import escape

from blockscribe.utils.console import log_warning


class GeneratorConfig(BaseModel):
  """
  Configuration container for a code generator.

  Options left as None fall back to the selected backend's defaults.
  """

  language: str = Field("divgames", description="Target backend key (e.g. 'divgames', 'fuzebasic').")
  reserved_words: Set[str] = Field(
    default_factory=set,
    description="Extra identifiers the name allocator must avoid (merged with the backend list).",
  )
  prologue_template: Optional[str] = Field(
    None,
    description="Text placed before the program. '$variables' expands to the variable declarations.",
  )
  epilogue_template: Optional[str] = Field(None, description="Text placed after the program.")
  name_placeholder_token: str = Field(
    "{leCUI8hutHZI4480Dc}",
    description="Token inside helper templates replaced with the helper's allocated name.",
  )
  indent_unit: str = Field("  ", description="One level of indentation for nested statements.")
  comment_prefix: Optional[str] = Field(None, description="Line comment marker (e.g. '// ').")
  statement_prefix: Optional[str] = Field(
    None,
    description="Code inserted before every statement. '%1' expands to the quoted block id.",
  )
  statement_suffix: Optional[str] = Field(
    None,
    description="Code inserted after every statement. '%1' expands to the quoted block id.",
  )
  infinite_loop_trap: Optional[str] = Field(
    None,
    description="Code inserted at the top of loop and procedure bodies. '%1' expands to the quoted block id.",
  )
  shared_namespace: Optional[bool] = Field(
    None,
    description="If True, variables and procedures share one identifier namespace.",
  )
  variable_prefix: str = Field("", description="Prefix added to every variable identifier (e.g. '$').")
  max_suffix_attempts: int = Field(10000, description="Numeric suffixes tried before name allocation fails.")

  @field_validator("language")
  @classmethod
  def validate_language(cls, v: str) -> str:
    """
    Ensures the language is a registered backend.

    Args:
        v (str): The backend key to validate.

    Returns:
        str: The normalized (lowercase) key.

    Raises:
        ValueError: If no backend is registered under that key.
    """
    from blockscribe.compiler.registry import available_languages

    v_clean = v.lower().strip()
    known = available_languages()
    if v_clean not in known:
      raise ValueError(f"Unknown language: '{v_clean}'. Supported languages: {known}")
    return v_clean

  @field_validator("name_placeholder_token")
  @classmethod
  def validate_placeholder(cls, v: str) -> str:
    if not v:
      raise ValueError("name_placeholder_token must not be empty")
    return v

  @field_validator("indent_unit")
  @classmethod
  def validate_indent(cls, v: str) -> str:
    if v.strip():
      raise ValueError(f"indent_unit must only contain whitespace, got {v!r}")
    return v

  @field_validator("max_suffix_attempts")
  @classmethod
  def validate_attempts(cls, v: int) -> int:
    if v < 1:
      raise ValueError("max_suffix_attempts must be at least 1")
    return v

  @classmethod
  def load(cls, search_path: Optional[Path] = None, **overrides: Any) -> "GeneratorConfig":
    """
    Loads configuration from pyproject.toml and applies keyword overrides.

    Overrides set to None are ignored so callers can forward optional values
    untouched.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        **overrides: Field values that win over the TOML settings.

    Returns:
        GeneratorConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = dict(toml_config)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return cls.model_validate(merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches `start_path` and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The ``[tool.blockscribe]`` table and the
      directory it was found in. A malformed file counts as no configuration.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        log_warning(f"Ignoring malformed {escape(str(toml_path))}: {escape(str(e))}")
        return {}, None
      return data.get("tool", {}).get("blockscribe", {}), parent

  return {}, None

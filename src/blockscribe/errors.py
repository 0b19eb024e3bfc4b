"""
Generation Error Taxonomy.

Every error raised here is fatal for the current generation run: the driver
stops immediately and no partial output is returned. Missing value sockets
are not errors; rules substitute a default literal instead.
"""

from typing import Any, Iterable, Optional


class GenerationError(Exception):
  """Base class for fatal code generation failures."""


class UnknownBlockKindError(GenerationError):
  """
  Raised when no rule is registered for a block kind.

  Attributes:
      kind (str): The unrecognized block kind tag.
      language (str): Name of the backend that was asked to generate it.
  """

  def __init__(self, kind: str, language: str) -> None:
    self.kind = kind
    self.language = language
    super().__init__(f'Language "{language}" does not know how to generate code for block type "{kind}".')


class UnhandledFieldValueError(GenerationError):
  """
  Raised when a rule meets a field value outside its known enumeration.

  Attributes:
      kind (str): Kind of the offending block.
      field (str): Field name that was inspected.
      value (Any): The unexpected value.
  """

  def __init__(self, kind: str, field: str, value: Any, expected: Optional[Iterable[Any]] = None) -> None:
    self.kind = kind
    self.field = field
    self.value = value
    message = f"Unhandled value {value!r} for field '{field}' of block '{kind}'."
    if expected is not None:
      message += f" Expected one of: {', '.join(str(e) for e in expected)}."
    super().__init__(message)


class InvalidEmissionError(GenerationError):
  """Raised when a rule returns something that is neither a statement nor a value fragment."""


class NameAllocationExhaustedError(GenerationError):
  """
  Raised when the name allocator runs out of suffix attempts.

  Attributes:
      base (str): The sanitized name that could not be disambiguated.
      attempts (int): Number of candidates tried.
  """

  def __init__(self, base: str, attempts: int) -> None:
    self.base = base
    self.attempts = attempts
    super().__init__(f"Could not allocate a free name for '{base}' after {attempts} attempts.")

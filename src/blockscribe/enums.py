"""
Enumerations for blockscribe.

This module defines the operator precedence table shared by the shipped
backends and the naming namespaces used by the name allocator.
"""

from enum import Enum, IntEnum


class Order(IntEnum):
  """
  Operator precedence ranks.

  A higher rank binds more loosely. A child expression is wrapped in
  parentheses when its rank is greater than the rank its parent requires.
  """

  ATOMIC = 0  # literals, names
  CLONE = 1  # clone
  NEW = 1  # new
  MEMBER = 2  # . []
  FUNCTION_CALL = 2  # ()
  INCREMENT = 3  # ++
  DECREMENT = 3  # --
  LOGICAL_NOT = 4  # !
  BITWISE_NOT = 4  # ~
  UNARY_PLUS = 4  # +
  UNARY_NEGATION = 4  # -
  MULTIPLICATION = 5  # *
  DIVISION = 5  # /
  MODULUS = 5  # %
  ADDITION = 6  # +
  SUBTRACTION = 6  # -
  BITWISE_SHIFT = 7  # << >>
  RELATIONAL = 8  # < <= > >=
  IN = 8  # in
  INSTANCEOF = 8  # instanceof
  EQUALITY = 9  # == !=
  BITWISE_AND = 10  # &
  BITWISE_XOR = 11  # ^
  BITWISE_OR = 12  # |
  CONDITIONAL = 13  # ?:
  ASSIGNMENT = 14  # = += -=
  LOGICAL_AND = 15  # &&
  LOGICAL_OR = 16  # ||
  COMMA = 17  # ,
  NONE = 99  # (...)


class NameType(str, Enum):
  """
  Independent identifier buckets for the name allocator.
  """

  VARIABLE = "VARIABLE"
  PROCEDURE = "PROCEDURE"

"""
DIV Games Studio Backend.

Wraps the program in DIV's ``PROGRAM`` / ``GLOBAL`` / ``BEGIN`` ... ``END``
skeleton, declares every workspace variable as a global and emits user
procedures as ``PROCESS`` blocks after the main program.
"""

from typing import List

from blockscribe.backends.divgames.loops import LOOP_RULES
from blockscribe.backends.divgames.procedures import PROCEDURE_RULES
from blockscribe.backends.shared import COLOUR_RULES, LOGIC_RULES, MATH_RULES, PHP_RESERVED_WORDS, VARIABLE_RULES
from blockscribe.compiler.generator import CodeGenerator
from blockscribe.compiler.rules import RuleTable

DIV_KEYWORDS = (
  "and,begin,break,case,clone,const,continue,debug,default,dup,else,end,frame,from,function,global,id,if,"
  "import,include,local,loop,not,offset,or,pointer,private,process,program,repeat,return,setup_program,"
  "sizeof,step,string,struct,switch,to,type,until,while,xor"
)

DIVGAMES_RULES = RuleTable(
  "divgames", parents=[LOGIC_RULES, COLOUR_RULES, VARIABLE_RULES, MATH_RULES, LOOP_RULES, PROCEDURE_RULES]
)


class DivGamesGenerator(CodeGenerator):
  """
  Generator for DIV Games Studio programs.
  """

  NAME = "divgames"
  RULES = DIVGAMES_RULES
  RESERVED_WORDS = frozenset(DIV_KEYWORDS.split(",")) | PHP_RESERVED_WORDS
  PROLOGUE = "PROGRAM myprogram;\n\nGLOBAL\n$variables\n\n\nBEGIN\n"
  EPILOGUE = "END\n"
  COMMENT_PREFIX = "// "
  STATEMENT_TERMINATOR = ";"

  def declare_variables(self, names: List[str]) -> str:
    return "\n".join(self.statement(name).rstrip("\n") for name in names)


__all__ = ["DIVGAMES_RULES", "DivGamesGenerator"]

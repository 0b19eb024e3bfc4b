"""
FUZE BASIC Backend.

Emits the main program followed by ``END`` and then the helper functions
requested by the rules. Statements carry no terminator.
"""

from blockscribe.backends.fuzebasic.text import TEXT_RULES
from blockscribe.backends.shared import COLOUR_RULES, LOGIC_RULES, MATH_RULES, PHP_RESERVED_WORDS, VARIABLE_RULES
from blockscribe.compiler.generator import CodeGenerator
from blockscribe.compiler.rules import RuleTable

BASIC_KEYWORDS = (
  "and,break,case,clear,cls,continue,data,def,dim,else,end,endif,endproc,endswitch,for,func,gosub,goto,"
  "if,input,let,local,loop,next,not,or,print,proc,read,rem,repeat,restore,return,step,stop,switch,then,"
  "to,until,wend,while,xor"
)

FUZEBASIC_RULES = RuleTable("fuzebasic", parents=[LOGIC_RULES, COLOUR_RULES, VARIABLE_RULES, MATH_RULES, TEXT_RULES])


class FuzeBasicGenerator(CodeGenerator):
  """
  Generator for FUZE BASIC programs.
  """

  NAME = "fuzebasic"
  RULES = FUZEBASIC_RULES
  RESERVED_WORDS = frozenset(BASIC_KEYWORDS.split(",")) | PHP_RESERVED_WORDS
  PROLOGUE = ""
  EPILOGUE = "END\n"
  COMMENT_PREFIX = "// "
  STATEMENT_TERMINATOR = ""


__all__ = ["FUZEBASIC_RULES", "FuzeBasicGenerator"]

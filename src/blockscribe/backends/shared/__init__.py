"""
Rule groups shared by the bundled dialects.
"""

from blockscribe.backends.shared.colour import COLOUR_RULES
from blockscribe.backends.shared.logic import LOGIC_RULES
from blockscribe.backends.shared.math import MATH_RULES
from blockscribe.backends.shared.variables import VARIABLE_RULES

# Both dialects emit PHP-flavoured helpers, so PHP keywords and constants stay reserved.
PHP_RESERVED_WORDS = frozenset(
  (
    "__halt_compiler,abstract,and,array,as,break,callable,case,catch,class,clone,const,continue,declare,"
    "default,die,do,echo,else,elseif,empty,enddeclare,endfor,endforeach,endif,endswitch,endwhile,eval,exit,"
    "extends,final,for,foreach,function,global,goto,if,implements,include,include_once,instanceof,insteadof,"
    "interface,isset,list,namespace,new,or,print,private,protected,public,require,require_once,return,"
    "static,switch,throw,trait,try,unset,use,var,while,xor,"
    "E_ERROR,E_WARNING,E_PARSE,E_NOTICE,E_ALL,E_STRICT,TRUE,FALSE,NULL,"
    "__CLASS__,__DIR__,__FILE__,__FUNCTION__,__LINE__,__METHOD__,__NAMESPACE__,__TRAIT__"
  ).split(",")
)

__all__ = ["COLOUR_RULES", "LOGIC_RULES", "MATH_RULES", "PHP_RESERVED_WORDS", "VARIABLE_RULES"]

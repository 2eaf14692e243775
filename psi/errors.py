from __future__ import annotations

# -------------------------------
# Error kinds carried by ErrorValue
# -------------------------------
SYNTAX_ERROR = "SyntaxError"
TYPE_ERROR = "TypeError"
ARITY_ERROR = "ArityError"
DIVISION_BY_ZERO_ERROR = "DivisionByZeroError"
UNBOUND_ERROR = "UnboundError"
INAPPLICABLE_HEAD_ERROR = "InapplicableHeadError"
MEMORY_ERROR = "MemoryError"
CAPACITY_ERROR = "CapacityError"
EVAL_ERROR = "EvalError"
LIST_ERROR = "ListError"
INPUT_ERROR = "InputError"

ERROR_KINDS = frozenset({
    SYNTAX_ERROR,
    TYPE_ERROR,
    ARITY_ERROR,
    DIVISION_BY_ZERO_ERROR,
    UNBOUND_ERROR,
    INAPPLICABLE_HEAD_ERROR,
    MEMORY_ERROR,
    CAPACITY_ERROR,
    EVAL_ERROR,
    LIST_ERROR,
    INPUT_ERROR,
})


# -------------------------------
# Host exceptions
# -------------------------------
class PsiError(Exception):
    """ Base class for all psi host errors"""
    pass

class PsiCapacityError(PsiError):
    """ Raised when a list cannot grow past its maximum capacity"""

class PsiConfigError(PsiError):
    """ Raised when a configuration value is malformed"""

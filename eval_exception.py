#!/usr/bin/python

# Error kinds. Every one of them is fatal to the evaluation run.
SYNTAX_ERROR = "SyntaxError"
STACK_UNDERFLOW = "StackUnderflow"
TYPE_MISMATCH = "TypeMismatch"
DIVISION_BY_ZERO = "DivisionByZero"
PARSE_ERROR = "ParseError"

# Custom exception for evaluation errors.
# The token describes the error position best, it can be None if no token
# is involved.
class EvalException(Exception):
    def __init__(self, kind, msg, tok=None):
        super().__init__(msg)
        self.kind = kind
        self.msg = msg
        self.token = tok
    def __str__(self):
        return self.kind + ": " + self.msg

# Human-readable description, used by the command line tools
def format_error(e):
    t = e.token
    if t == None:
        return str(e)
    return "{} in {}, line {}, column {}: {}".format(e.kind, t.filepath, t.line, t.col, e.msg)

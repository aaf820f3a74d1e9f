import operator
import token_def as token
from token_def import Token
import lexer
from lexer import Lexer, TokenizeException
from stackvalues import Integer, Text, RuntimeStack
from eval_exception import (EvalException, SYNTAX_ERROR, TYPE_MISMATCH,
        DIVISION_BY_ZERO, PARSE_ERROR)
import typing

RUNNING = "running"
HALTED_OK = "halted ok"
HALTED_ERROR = "halted error"

# Integer division truncating toward zero, like C/C++. Python's // floors.
def trunc_div(left : int, right : int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient

# Remainder matching trunc_div, its sign follows the left operand
def trunc_mod(left : int, right : int) -> int:
    return left - right * trunc_div(left, right)

OPERATIONS = {
        token.ADD: operator.add,
        token.SUB: operator.sub,
        token.MUL: operator.mul,
        token.DIV: trunc_div,
        token.MOD: trunc_mod,
        }

class Result:
    def __init__(self, stack, error=None):
        self.stack = stack
        self.error : typing.Optional[EvalException] = error
    def ok(self):
        return self.error == None
    def __str__(self):
        if self.error != None:
            return str(self.error)
        return "[" + ", ".join(map(str,self.stack)) + "]"

class Eval:
    def __init__(self, tracefunc=None):
        # Called with (token, stack) after each executed instruction
        self.tracefunc = tracefunc
        self.state = RUNNING
        self.error : typing.Optional[EvalException] = None
        self.lexer : typing.Optional[Lexer] = None
        self.stack = RuntimeStack()

    def evaluate(self, code, filepath="<input>") -> Result:
        return self.run(Lexer(code, filepath))

    def run(self, lex : Lexer) -> Result:
        if self.state != RUNNING:
            raise RuntimeError("This evaluator has already halted,"
                    " create a new one for every run.")
        self.lexer = lex
        try:
            while self.state == RUNNING:
                self.step(self.next_token())
        except EvalException as e:
            self.state = HALTED_ERROR
            self.error = e
        return Result(self.stack.snapshot(), self.error)

    def next_token(self) -> Token:
        try:
            return self.lexer.get_token()
        except TokenizeException as e:
            tok = Token(token.INVALID, "\"", e.filepath, e.line, e.col, e.length)
            raise EvalException(SYNTAX_ERROR, e.msg, tok)

    def step(self, tok : Token):
        if tok.type == token.EOF or (tok.type == token.INVALID and tok.lexeme == ""):
            self.state = HALTED_OK
            return
        if tok.type == token.PUSH:
            self.push(tok)
        elif tok.type == token.POP:
            self.stack.pop(tok)
        elif tok.type in OPERATIONS:
            self.binary_op(tok)
        elif tok.type == token.INVALID:
            raise EvalException(SYNTAX_ERROR, f"Unknown instruction '{tok.lexeme}'.", tok)
        else:
            raise EvalException(SYNTAX_ERROR, f"Unexpected {tok.type.lower()}"
                    f" '{tok.lexeme}', literals are only allowed after push.", tok)
        if self.tracefunc != None:
            self.tracefunc(tok, self.stack)

    def push(self, tok : Token):
        operand = self.next_token()
        if operand.type == token.NUMBER:
            self.stack.push(parse_integer(operand))
        elif operand.type == token.STRING:
            self.stack.push(Text(operand.lexeme))
        else:
            raise EvalException(SYNTAX_ERROR, "push expects a number or a"
                    f" string, {operand} found instead.", operand)

    def binary_op(self, tok : Token):
        left, right = self.stack.peek_operands(tok)
        for operand in (left, right):
            if not isinstance(operand, Integer):
                raise EvalException(TYPE_MISMATCH, f"{tok.type} requires two"
                        f" integers but got {left!r} and {right!r}.", tok)
        if tok.type in [token.DIV, token.MOD] and right.value == 0:
            raise EvalException(DIVISION_BY_ZERO, "Division by zero.", tok)
        self.stack.replace_operands(Integer(OPERATIONS[tok.type](left.value, right.value)))

def parse_integer(tok : Token) -> Integer:
    # int() would also accept signs, underscores and surrounding whitespace
    if tok.lexeme == "" or not all(lexer.is_number(c) for c in tok.lexeme):
        raise EvalException(PARSE_ERROR, f"'{tok.lexeme}' is not a decimal integer.", tok)
    try:
        return Integer(int(tok.lexeme))
    except ValueError as e:
        # Literals beyond the interpreter's digit limit (sys.get_int_max_str_digits)
        raise EvalException(PARSE_ERROR, f"Integer literal with {len(tok.lexeme)}"
                f" digits can not be converted: {e}", tok)

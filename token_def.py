from collections import namedtuple

_TokenTuple = namedtuple("Token", "type lexeme filepath line col length")

class Token(_TokenTuple):
    """Immutable token. Positions are only used for error reporting."""
    __slots__ = ()
    def __new__(cls, typ, lexeme="", filepath="<input>", line=1, col=1, length=0):
        return super().__new__(cls, typ, lexeme, filepath, line, col, length)
    def __str__(self):
        if self.lexeme != "":
            return self.type + "(" + str(self.lexeme) + ")"
        return self.type

PUSH = "push"
ADD = "add"
SUB = "sub"
MUL = "mul"
DIV = "div"
MOD = "mod"
POP = "pop"
NUMBER = "NUMBER"
STRING = "STRING"
LITERAL = "LITERAL" # bare identifier, never produced by the lexer
INVALID = "INVALID"
EOF = "EOF"

# Keywords and their symbol synonyms map to one instruction each
INSTRUCTIONS = {
        "push": PUSH,
        "add": ADD,
        "sub": SUB,
        "mul": MUL,
        "div": DIV,
        "mod": MOD,
        "pop": POP,
        "+": ADD,
        "-": SUB,
        "*": MUL,
        "/": DIV,
        "%": MOD,
        ":": POP,
        }

import token_def as token
from token_def import Token

class Lexer:
    def __init__(self, code, filepath="<input>"):
        self.code = code
        self.current_pos = 0
        # Fields for reporting (error) positions
        self.filepath = filepath
        self.line = 1
        self.col = 1
        # Position where the token currently being scanned started
        self.start_line = 1
        self.start_col = 1

    def create_token(self, typ, lexeme, length=None):
        if length == None:
            length = len(lexeme)
        # DEBUG: Print what kinds of tokens are generated
        #print(typ, self.filepath, self.start_line, self.start_col, length, lexeme)
        return Token(typ, lexeme, self.filepath, self.start_line, self.start_col, length)

    def get_token(self):
        while is_whitespace(self.peek()):
            self.next()
        self.start_line = self.line
        self.start_col = self.col
        c = self.next()
        if c == "": # EOF
            return self.create_token(token.EOF, "")
        if is_number(c):
            lex = c
            while is_number(self.peek()):
                lex += self.next()
            return self.create_token(token.NUMBER, lex)
        if is_alpha(c):
            lex = c
            while is_alpha(self.peek()):
                lex += self.next()
            if lex in token.INSTRUCTIONS:
                return self.create_token(token.INSTRUCTIONS[lex], lex)
            return self.create_token(token.INVALID, lex)
        if "\"" == c: # begin of a string
            lex = ""
            while not self.match("\""):
                char = self.next()
                if char == "":
                    raise TokenizeException("Unterminated string.", self.filepath,
                            self.start_line, self.start_col, len(lex)+1)
                lex += char
            return self.create_token(token.STRING, lex, len(lex)+2)
        if c in SYMBOLS:
            return self.create_token(token.INSTRUCTIONS[c], c)
        return self.create_token(token.INVALID, c)

    def peek(self):
        return self.code[self.current_pos] if self.current_pos < len(self.code) else ""

    def next(self):
        c = self.peek()
        if c == "":
            return c
        self.current_pos += 1
        if c == "\n":
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        return c

    def match(self, compare):
        c = self.peek()
        if c == compare:
            self.next()
            return True
        return False

    def __iter__(self):
        return self

    def __next__(self):
        tok = self.get_token()
        if tok.type == token.EOF:
            raise StopIteration
        return tok

# Yields all tokens of the given code. Every call scans from the start again.
def tokenize(code, filepath="<input>"):
    yield from Lexer(code, filepath)

SYMBOLS = "+-*/%:"

def is_number(arg):
    return arg != "" and arg >= "0" and arg <= "9"

def is_alpha(arg):
    return arg != "" and ((arg >= "a" and arg <= "z") or (arg >= "A" and arg <= "Z"))

def is_whitespace(arg):
    return arg != "" and arg in " \t\n\r\f\v"

# Custom exception for lexer errors.
class TokenizeException(Exception):
    def __init__(self, msg, filepath, line, col, length):
        super().__init__(msg)
        self.msg = msg
        self.filepath = filepath
        self.line = line
        self.col = col
        self.length = length
    def __str__(self):
        return self.msg

from eval_exception import EvalException, STACK_UNDERFLOW
import typing

class Integer:
    def __init__(self, value : int):
        self.value = value
    def __eq__(self, other):
        if not isinstance(other, Integer):
            return NotImplemented
        return self.value == other.value
    def __hash__(self):
        return hash((Integer, self.value))
    def __repr__(self):
        return "Integer(" + str(self) + ")"
    def __str__(self):
        try:
            return str(self.value)
        except ValueError:
            # Too many digits for the interpreter's int-to-str limit
            return f"<{self.value.bit_length()}-bit integer>"

class Text:
    def __init__(self, value : str):
        self.value = value
    def __eq__(self, other):
        if not isinstance(other, Text):
            return NotImplemented
        return self.value == other.value
    def __hash__(self):
        return hash((Text, self.value))
    def __repr__(self):
        return "Text(" + repr(self.value) + ")"
    def __str__(self):
        # Quoted like in the source code
        return "\"" + self.value + "\""

StackValue = typing.Union[Integer, Text]

class RuntimeStack:
    def __init__(self):
        self.elements : typing.List[StackValue] = []
    def push(self, value : StackValue):
        self.elements.append(value)
    def pop(self, tok=None) -> StackValue:
        if len(self.elements) == 0:
            raise EvalException(STACK_UNDERFLOW, "Stack is empty.", tok)
        return self.elements.pop()
    # Returns (left, right) where right was pushed last. The stack is left
    # untouched so that failing operations keep their operands.
    def peek_operands(self, tok=None) -> typing.Tuple[StackValue, StackValue]:
        if len(self.elements) < 2:
            raise EvalException(STACK_UNDERFLOW, "Not enough values on stack,"
                    f" 2 required but {len(self.elements)} found.", tok)
        return self.elements[-2], self.elements[-1]
    # Replaces the two operands with the result of the operation
    def replace_operands(self, result : StackValue):
        del self.elements[-2:]
        self.elements.append(result)
    def snapshot(self) -> typing.List[StackValue]:
        return list(self.elements)
    def __len__(self):
        return len(self.elements)
    def __iter__(self):
        return iter(self.elements)
    def __str__(self):
        return "[" + ", ".join(map(str,self.elements)) + "]"

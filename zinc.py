import argparse
import sys
import lexer
import evaluator
import repl
from eval_exception import format_error

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="zinc",
        description="Interpreter for the zinc stack language."
    )
    parser.add_argument("filepath", nargs="?", help="Path to the source file to execute."
            " Without a file (and without -c), the REPL is started.")
    parser.add_argument("-c", "--code", help="Execute the given code instead of a file.")
    parser.add_argument("-d", "--debug", action="store_true", help="Trace every instruction"
            " and print the final stack state after execution.")
    parser.add_argument("-t", "--tokens", action="store_true", help="Print the token stream"
            " instead of executing it.")
    args = parser.parse_args(argv)
    if args.code != None and args.filepath != None:
        parser.error("give either a file or -c CODE, not both")

    if args.code != None:
        code = args.code
        filepath = "<command line>"
    elif args.filepath != None:
        filepath = args.filepath
        try:
            with open(filepath, encoding="utf-8") as f:
                code = f.read()
        except OSError as e:
            print(f"Error: Could not read file '{filepath}': {e.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"Error: File '{filepath}' is not valid UTF-8: {e}", file=sys.stderr)
            return 1
    else:
        return repl.main()

    if args.tokens:
        return print_tokens(code, filepath)
    return execute(code, filepath, args.debug)

def print_tokens(code, filepath):
    try:
        for tok in lexer.tokenize(code, filepath):
            print(f"{tok.line}:{tok.col}\t{tok}")
    except lexer.TokenizeException as e:
        print(f"SyntaxError in {e.filepath}, line {e.line},"
                f" column {e.col}: {e.msg}", file=sys.stderr)
        return 1
    return 0

def execute(code, filepath, debug=False):
    tracefunc = trace if debug else None
    result = evaluator.Eval(tracefunc).evaluate(code, filepath)
    if debug:
        print(f"Final stack state: {result.stack}", file=sys.stderr)
    if not result.ok():
        print(format_error(result.error), file=sys.stderr)
        return 1
    return 0

def trace(tok, stack):
    print(f"{tok.line}:{tok.col}\t{tok.type:<5} {stack}", file=sys.stderr)

if __name__ == "__main__":
    sys.exit(main())

from evaluator import Eval
from eval_exception import format_error

import readline # just this line enables command-history :)

# Every line is evaluated on its own, nothing is kept between two lines.
def main(inputfunc=input, printfunc=print):
    while True:
        try:
            inp = inputfunc("zinc> ")
        except EOFError:
            printfunc()
            return 0
        except KeyboardInterrupt:
            printfunc()
            continue
        if inp == "quit" or inp == "q" or inp == "exit":
            return 0
        if inp.strip() == "":
            continue
        result = Eval().evaluate(inp, "<repl>")
        if result.ok():
            printfunc(str(result))
        else:
            printfunc(format_error(result.error))

if __name__ == "__main__":
    exit(main())

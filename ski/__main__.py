import sys

from parsable import parsable

from ski import engine, util
from ski.engine import DidNotTerminate
from ski.errors import ParseError
from ski.parser import parse
from ski.syntax import FULL, MINIMAL, render, var_name


def get_budget():
    return util.BUDGET or None


def get_mode(full):
    return FULL if full else MINIMAL


@parsable
def rep(string, full=False):
    """Normalize and reduce one expression, printing 'Sabc = ac(bc)'.

    Args:
        string: an SKI expression, Iota program or Jot program
        full: whether to fully parenthesize output
    """
    mode = get_mode(full)
    budget = get_budget()
    term = engine.normalize(parse(string), budget)
    reduced, arity = engine.reduce_to_arity(term, budget)
    args = "".join(var_name(rank) for rank in range(1, 1 + arity))
    result = "{}{} = {}".format(render(term, mode), args, render(reduced, mode))
    print(result)
    return result


@parsable
def reps(*strings, **kwargs):
    """Normalize and reduce each expression in turn.

    Kwargs:
      full = False
    """
    full = kwargs.get('full', False)
    return [rep(string, full) for string in strings]


@parsable
def repl(full=False, verbose=False):
    """Read eval print loop."""
    if verbose:
        util.set_log_level(util.LOG_LEVEL_DEBUG)
    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()
        try:
            string = input()
        except (KeyboardInterrupt, EOFError):
            sys.stderr.write("Bye!\n")
            sys.stderr.flush()
            return
        try:
            rep(string, full)
        except (ParseError, DidNotTerminate) as e:
            sys.stderr.write(str(e))
            sys.stderr.write("\n")
            sys.stderr.flush()
            continue


@parsable
def normalize(string, full=False):
    """Normalize an expression without applying it to any arguments."""
    print("In: {}".format(string))
    term = engine.normalize(parse(string), get_budget())
    result = render(term, get_mode(full))
    print("Out: {}".format(result))
    return result


@parsable
def reduce(string, full=False):
    """Apply a normalized expression to as many variables as it needs."""
    print("In: {}".format(string))
    budget = get_budget()
    term = engine.normalize(parse(string), budget)
    term, arity = engine.reduce_to_arity(term, budget)
    result = render(term, get_mode(full))
    print("Arity: {}".format(arity))
    print("Out: {}".format(result))
    return result


if __name__ == "__main__":
    parsable()

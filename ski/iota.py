"""Iota and Jot, two single-combinator encodings of combinatory logic.

Both compile to I, K, S using the identities
    iota F = F S K
    F iota = S (K F)
"""

from ski.errors import IncompleteExpression, InvalidCharacter, TrailingTerms
from ski.syntax import APP, I, K, S
from ski.util import UnreachableError, logged


def left_iota(term):
    """Applies iota to term: F -> F S K."""
    return APP(APP(term, S), K)


def right_iota(term):
    """Applies term to iota: F -> S (K F)."""
    return APP(S, APP(K, term))


# Stack placeholder for a bare iota; never part of a returned term.
_IOTA = object()


@logged(str, returns=str)
def parse_iota(string):
    """Parse an Iota program in prefix notation, eg '*i*i*ii'."""
    check_iota(string)
    stack = []
    for char in reversed(string):
        if char == 'i':
            stack.append(_IOTA)
            continue
        fun = stack.pop()
        arg = stack.pop()
        if fun is _IOTA and arg is _IOTA:
            stack.append(I)
        elif fun is _IOTA:
            stack.append(left_iota(arg))
        elif arg is _IOTA:
            stack.append(right_iota(fun))
        else:
            stack.append(APP(fun, arg))
    if len(stack) != 1:
        raise UnreachableError(stack)
    if stack[0] is _IOTA:
        return left_iota(I)
    return stack[0]


def check_iota(string):
    """Raises a ParseError unless string is a well-formed Iota program.

    An Iota program is well-formed iff its last character is an i, the
    characters to its left contain equally many *s and is, and every proper
    prefix contains at least as many *s as is.
    """
    stars = 0
    iotas = 0
    for pos, char in enumerate(string):
        if char == '*':
            stars += 1
        elif char == 'i':
            iotas += 1
            if iotas == stars + 1 and pos < len(string) - 1:
                raise TrailingTerms(
                    'Unexpected terms following {}'.format(string[:pos + 1]),
                    position=pos + 1)
        else:
            raise InvalidCharacter(
                'Invalid Iota character {!r}'.format(char), char=char)
    expected = stars + 1 - iotas
    if expected == 1:
        raise IncompleteExpression(
            'Incomplete expression (expected 1 more term)', expected=1)
    elif expected > 1:
        raise IncompleteExpression(
            'Incomplete expression (expected {} more terms)'.format(expected),
            expected=expected)
    elif expected < 0:
        raise UnreachableError(string)


@logged(str, returns=str)
def parse_jot(string):
    """Parse a Jot program, eg '11100'.

    The empty program denotes I.
    """
    term = I
    for char in string:
        if char == '0':
            term = left_iota(term)
        elif char == '1':
            term = right_iota(term)
        else:
            raise InvalidCharacter(
                'Invalid Jot character {!r}'.format(char), char=char)
    return term

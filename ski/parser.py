from ski.errors import (InvalidCharacter, TooFewTerms, TooManyTerms,
                        UnbalancedParentheses)
from ski.iota import parse_iota, parse_jot
from ski.syntax import APP, LETTERS, make_leaf
from ski.util import UnreachableError

SKI_CHARS = frozenset(LETTERS + '()')
IOTA_CHARS = frozenset('*i')
JOT_CHARS = frozenset('01')


def parse(string):
    """Parse a combinatory expression, Iota program or Jot program.

    The notation is chosen by the first non-space character.

    Args:
      string: eg '((SK)K)', 'SKK', '*i*ii' or '11100'.

    Returns:
      a term built from I, K, S, B, C, W.

    Raises:
      ParseError if string is not a valid program in any notation.
    """
    assert isinstance(string, str), type(string)
    stripped = string.lstrip(' ')
    if not stripped:
        raise TooFewTerms('Empty expression', count=0)
    first = stripped[0]
    if first in SKI_CHARS:
        return parse_ski(stripped)
    elif first in IOTA_CHARS:
        return parse_iota(stripped)
    elif first in JOT_CHARS:
        return parse_jot(stripped)
    else:
        raise InvalidCharacter(
            'Invalid character {!r}'.format(first), char=first)


# ----------------------------------------------------------------------------
# SKI notation

def parse_ski(string, strict=False):
    """Parse a combinatory expression in I, K, S, B, C, W.

    Spaces are ignored. By default juxtaposition is left-associative
    application, so 'SKK' and '((SK)K)' denote the same term. With
    strict=True every application must be explicitly bracketed, as in
    '((SK)K)'.
    """
    string = string.replace(' ', '')
    check_ski(string, strict)
    frames = [None]
    for char in string:
        if char == '(':
            frames.append(None)
            continue
        if char == ')':
            term = frames.pop()
        else:
            term = make_leaf(char)
        lhs = frames[-1]
        frames[-1] = term if lhs is None else APP(lhs, term)
    if len(frames) != 1 or frames[0] is None:
        raise UnreachableError(frames)
    return frames[0]


def check_ski(string, strict=False):
    """Raises a ParseError unless string is a well-formed SKI expression."""
    opened = 0
    closed = 0
    for char in string:
        if char == '(':
            opened += 1
        elif char == ')':
            closed += 1
        elif char not in SKI_CHARS:
            raise InvalidCharacter(
                'Invalid SKI character {!r}'.format(char), char=char)
    if opened != closed:
        raise UnbalancedParentheses(
            'Mismatched parentheses in {}'.format(string),
            opened=opened,
            closed=closed)

    # Each frame counts the first-level subterms of one parenthesized group,
    # the bottom frame counts those of the whole expression.
    frames = [[0, 0]]  # : [start, count]
    for pos, char in enumerate(string):
        if char == '(':
            frames[-1][1] += 1
            frames.append([pos, 0])
        elif char == ')':
            if len(frames) == 1:
                raise UnbalancedParentheses(
                    'Unexpected ) at position {} in {}'.format(pos, string),
                    opened=opened,
                    closed=closed)
            start, count = frames.pop()
            if count < 2:
                raise TooFewTerms(
                    '{} terms in {}'.format(count, string[start: pos + 1]),
                    count=count)
            if strict and count > 2:
                raise TooManyTerms(
                    '{} terms in {}'.format(count, string[start: pos + 1]),
                    count=count)
        else:
            frames[-1][1] += 1
    assert len(frames) == 1, frames
    count = frames[0][1]
    if count == 0:
        raise TooFewTerms('No terms in {!r}'.format(string), count=count)
    if strict and count > 1:
        raise TooManyTerms(
            '{} terms in {}'.format(count, string), count=count)

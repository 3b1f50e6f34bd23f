"""Combinator terms: I, K, S, B, C, W, free variables and application."""

import re
from sys import intern

from ski.util import UnreachableError

# ----------------------------------------------------------------------------
# Signature


class Term(tuple):
    def __repr__(self):
        if len(self) == 1:
            return self[0]
        return '{}({})'.format(self[0], ', '.join(repr(a) for a in self[1:]))

    def __str__(self):
        return print_minimal(self)

    def __reduce__(self):
        return (Term.make, tuple(self))

    @staticmethod
    def make(*args):
        # Atoms are unique, so copies and unpickled atoms collapse to them.
        if len(args) == 1 and args[0] in _atoms:
            return _atoms[args[0]]
        return Term(args)


class InvalidCombinator(ValueError):
    pass


re_keyword = re.compile('[A-Z]+$')
_keywords = {}  # : name -> arity
_atoms = {}  # : name -> term


def make_keyword(name, arity):
    assert re_keyword.match(name)
    assert name not in _keywords
    assert arity in [0, 1, 2]
    name = intern(name)
    _keywords[name] = arity
    return name


def make_atom(name):
    assert name not in _atoms
    name = make_keyword(name, arity=0)
    term = Term.make(name)
    _atoms[name] = term
    return term


_VAR = make_keyword('VAR', 1)  # Free variable introduced by reduction.
_APP = make_keyword('APP', 2)

# Order matters: this is the closed set of builtin combinators.
I = make_atom('I')  # I a = a
K = make_atom('K')  # K a b = a
S = make_atom('S')  # S a b c = a c (b c)
B = make_atom('B')  # B a b c = a (b c)
C = make_atom('C')  # C a b c = a c b
W = make_atom('W')  # W a b = a b b

COMBINATORS = (I, K, S, B, C, W)
LETTERS = ''.join(c[0] for c in COMBINATORS)


def make_leaf(name):
    """Returns the builtin combinator named by a single letter."""
    try:
        return _atoms[name]
    except (KeyError, TypeError):
        raise InvalidCombinator('Invalid combinator: {!r}'.format(name))


def VAR(rank):
    """Free variable number rank, counting from 1."""
    if not (isinstance(rank, int) and rank >= 1):
        raise ValueError(
            'Variable index must be a positive integer: {}'.format(rank))
    return Term.make(_VAR, rank)


def APP(lhs, rhs):
    check_node(lhs)
    check_node(rhs)
    return Term.make(_APP, lhs, rhs)


def isa_atom(term):
    assert isinstance(term, Term), term
    return len(term) == 1


def isa_var(term):
    assert isinstance(term, Term), term
    return term[0] == _VAR


def isa_app(term):
    assert isinstance(term, Term), term
    return term[0] == _APP


def isa_leaf(term):
    return not isa_app(term)


def check_node(term):
    """Enforces that term is either a tagged leaf or a binary application.

    Atoms must be the unique instances registered in _atoms.
    """
    if not isinstance(term, Term):
        raise UnreachableError('Not a term: {!r}'.format(term))
    if not term:
        raise UnreachableError('Empty term')
    try:
        arity = _keywords[term[0]]
    except (KeyError, TypeError):
        raise UnreachableError('Unknown keyword: {!r}'.format(term))
    if len(term) != 1 + arity:
        ok = False
    elif arity == 0:
        ok = term is _atoms.get(term[0])
    elif term[0] == _VAR:
        ok = isinstance(term[1], int) and term[1] >= 1
    else:
        ok = all(isinstance(arg, Term) for arg in term[1:])
    if not ok:
        raise UnreachableError('Malformed node: {!r}'.format(term))


def head(term):
    """Returns the leftmost leaf of a term, walking down its function spine."""
    while isa_app(term):
        term = term[1]
    return term


def unapply(term):
    """Splits a term into its head and arguments, rightmost argument first."""
    args = []
    while isa_app(term):
        args.append(term[2])
        term = term[1]
    return term, args


# ----------------------------------------------------------------------------
# Printing

MINIMAL = 'minimal'
FULL = 'full'

_LPAREN = '('
_RPAREN = ')'


def var_name(rank):
    """Names free variables a, b, ..., z, then [27], [28], ..."""
    if rank <= 26:
        return chr(ord('a') - 1 + rank)
    return '[{}]'.format(rank)


def leaf_name(term):
    if isa_atom(term):
        return term[0]
    elif isa_var(term):
        return var_name(term[1])
    raise UnreachableError(term)


def print_minimal(term):
    """Prints with parentheses only around compound arguments.

    Application associates to the left, so the function part of an
    application is never parenthesized:

        >>> print_minimal(APP(APP(S, K), K))
        'SKK'
        >>> print_minimal(APP(B, APP(C, W)))
        'B(CW)'

    """
    tokens = []
    pending = [term]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            tokens.append(item)
            continue
        fun, args = unapply(item)
        tokens.append(leaf_name(fun))
        for arg in args:
            if isa_app(arg):
                pending.append(_RPAREN)
                pending.append(arg)
                pending.append(_LPAREN)
            else:
                pending.append(leaf_name(arg))
    return ''.join(tokens)


def print_full(term):
    """Prints with every application wrapped in parentheses.

        >>> print_full(APP(APP(S, K), K))
        '((SK)K)'

    """
    tokens = []
    pending = [term]
    while pending:
        item = pending.pop()
        if isinstance(item, str):
            tokens.append(item)
        elif isa_app(item):
            pending.append(_RPAREN)
            pending.append(item[2])
            pending.append(item[1])
            pending.append(_LPAREN)
        else:
            tokens.append(leaf_name(item))
    return ''.join(tokens)


PRINTERS = {
    MINIMAL: print_minimal,
    FULL: print_full,
}


def render(term, mode=MINIMAL):
    try:
        printer = PRINTERS[mode]
    except KeyError:
        raise ValueError(
            'Unknown render mode {}, try one of: {}'.format(
                mode, ', '.join(sorted(PRINTERS))))
    return printer(term)

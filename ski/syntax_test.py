import copy
import pickle

import hypothesis
import pytest

from ski.parser import parse_ski
from ski.syntax import (APP, FULL, MINIMAL, VAR, B, C, I, InvalidCombinator,
                        K, S, Term, W, check_node, head, isa_app, isa_atom,
                        isa_var, make_leaf, print_full, print_minimal, render,
                        unapply, var_name)
from ski.testing import s_open_terms, s_terms
from ski.util import UnreachableError
from ski.util.testing import for_each

a = VAR(1)
b = VAR(2)
c = VAR(3)

iota_K = APP(APP(APP(APP(I, S), K), S), K)


@for_each([
    ('I', I),
    ('K', K),
    ('S', S),
    ('B', B),
    ('C', C),
    ('W', W),
])
def test_make_leaf(name, expected):
    assert make_leaf(name) is expected


@for_each(['', 'i', 'Z', 'IK', 'VAR', 'APP', None, 1])
def test_make_leaf_rejects(name):
    with pytest.raises(InvalidCombinator):
        make_leaf(name)


@for_each([0, -1, 1.0, '1'])
def test_var_rejects(rank):
    with pytest.raises(ValueError):
        VAR(rank)


@for_each([
    Term(()),
    Term(('X',)),
    Term(('I',)),
    Term(('APP',)),
    Term(('VAR',)),
    Term(('VAR', 0)),
    Term(('APP', I)),
    Term(('APP', I, 'K')),
    Term(('APP', I, K, S)),
    ('I',),
])
def test_check_node_rejects(term):
    with pytest.raises(UnreachableError):
        check_node(term)


def test_app_rejects_malformed_children():
    with pytest.raises(UnreachableError):
        APP(I, Term(('APP', K)))


def test_make_returns_unique_atoms():
    for atom in (I, K, S, B, C, W):
        assert Term.make(atom[0]) is atom


@for_each([
    copy.copy,
    copy.deepcopy,
    lambda term: pickle.loads(pickle.dumps(term)),
])
def test_copies_keep_unique_atoms(clone):
    term = APP(APP(K, S), APP(a, I))
    actual = clone(term)
    assert actual == term
    assert actual[1][1] is K
    assert actual[1][2] is S
    assert actual[2][2] is I
    check_node(actual)
    assert isa_app(actual)
    assert isa_var(actual[2][1])


@for_each([
    (I, True, False, False),
    (a, False, True, False),
    (APP(I, K), False, False, True),
])
def test_predicates(term, atom, var, app):
    assert isa_atom(term) is atom
    assert isa_var(term) is var
    assert isa_app(term) is app


@for_each([
    (I, I),
    (a, a),
    (APP(S, K), S),
    (APP(APP(S, K), K), S),
    (APP(a, APP(K, I)), a),
    (iota_K, I),
])
def test_head(term, expected):
    assert head(term) is expected


def test_head_does_not_recurse():
    term = W
    for _ in range(100000):
        term = APP(term, K)
    assert head(term) is W


def test_unapply():
    term = APP(APP(APP(S, a), b), c)
    assert unapply(term) == (S, [c, b, a])
    assert unapply(K) == (K, [])


@for_each([
    (1, 'a'),
    (2, 'b'),
    (26, 'z'),
    (27, '[27]'),
])
def test_var_name(rank, expected):
    assert var_name(rank) == expected


PRINT_EXAMPLES = [
    {'term': I, 'minimal': 'I', 'full': 'I'},
    {'term': a, 'minimal': 'a', 'full': 'a'},
    {'term': APP(K, I), 'minimal': 'KI', 'full': '(KI)'},
    {
        'term': APP(APP(S, K), K),
        'minimal': 'SKK',
        'full': '((SK)K)',
    },
    {
        'term': APP(B, APP(C, W)),
        'minimal': 'B(CW)',
        'full': '(B(CW))',
    },
    {
        'term': APP(APP(c, APP(a, b)), APP(a, b)),
        'minimal': 'c(ab)(ab)',
        'full': '((c(ab))(ab))',
    },
    {
        'term': iota_K,
        'minimal': 'ISKSK',
        'full': '((((IS)K)S)K)',
    },
    {
        'term': APP(S, APP(K, APP(S, APP(K, I)))),
        'minimal': 'S(K(S(KI)))',
        'full': '(S(K(S(KI))))',
    },
]


@for_each(PRINT_EXAMPLES)
def test_print_minimal(example):
    assert print_minimal(example['term']) == example['minimal']
    assert render(example['term'], MINIMAL) == example['minimal']
    assert str(example['term']) == example['minimal']


@for_each(PRINT_EXAMPLES)
def test_print_full(example):
    assert print_full(example['term']) == example['full']
    assert render(example['term'], FULL) == example['full']


def test_render_rejects_unknown_mode():
    with pytest.raises(ValueError):
        render(I, 'tiny')


def test_print_deep_term():
    term = I
    for _ in range(10000):
        term = APP(S, APP(K, term))
    assert print_minimal(term) == 'S(K(' * 9999 + 'S(KI)' + '))' * 9999


# ----------------------------------------------------------------------------
# Property-based tests

@hypothesis.given(s_terms)
def test_print_minimal_parse(term):
    assert parse_ski(print_minimal(term)) == term


@hypothesis.given(s_terms)
def test_print_full_parse(term):
    assert parse_ski(print_full(term), strict=True) == term


@hypothesis.given(s_open_terms)
def test_print_full_is_longer(term):
    assert len(print_full(term)) >= len(print_minimal(term))

"""Normalization of combinator terms.

The rewrite rules, in priority order, are:

    I a     -> a
    K a b   -> a
    W a b   -> a b b
    S a b c -> a c (b c)
    B a b c -> a (b c)
    C a b c -> a c b

Terms without a normal form (eg S I I (S I I)) make normalize() loop forever
unless it is given a budget.
"""

import logging

from ski.syntax import (APP, VAR, B, C, I, K, S, W, check_node, head, isa_app,
                        isa_atom, isa_leaf, print_minimal)
from ski.util import LOG, logged

__all__ = ['normalize', 'reduce_to_arity', 'DidNotTerminate']


class DidNotTerminate(RuntimeError):

    def __init__(self, message, budget):
        RuntimeError.__init__(self, message)
        self.budget = budget


# ----------------------------------------------------------------------------
# Rewriting

def simplify_node(term):
    """Applies at most one rewrite rule at the root of term.

    Returns:
      a pair (term, changed).
    """
    check_node(term)
    if not isa_app(term):
        return term, False
    x = term[1]
    if isa_leaf(x):
        if x is I:
            return term[2], True
        return term, False
    xx = x[1]
    if isa_leaf(xx):
        if xx is K:
            return x[2], True
        elif xx is W:
            a = x[2]
            b = term[2]
            return APP(APP(a, b), b), True
        return term, False
    xxx = xx[1]
    if isa_leaf(xxx):
        a = xx[2]
        b = x[2]
        c = term[2]
        if xxx is S:
            return APP(APP(a, c), APP(b, c)), True
        elif xxx is B:
            return APP(a, APP(b, c)), True
        elif xxx is C:
            return APP(APP(a, c), b), True
    return term, False


_VISIT = 0
_BUILD = 1


def simplify_tree(term):
    """Makes one pass over term, rewriting each node top-down.

    The root is rewritten first; unless that yields a leaf, both children of
    the result are then processed independently in the same way.

    Returns:
      a pair (term, changed).
    """
    changed = False
    results = []
    tasks = [(_VISIT, term)]
    while tasks:
        action, node = tasks.pop()
        if action == _VISIT:
            if isa_leaf(node):
                check_node(node)
                results.append(node)
                continue
            node, node_changed = simplify_node(node)
            changed = changed or node_changed
            if isa_leaf(node):
                results.append(node)
                continue
            tasks.append((_BUILD, node))
            tasks.append((_VISIT, node[2]))
            tasks.append((_VISIT, node[1]))
        else:
            rhs = results.pop()
            lhs = results.pop()
            if lhs is node[1] and rhs is node[2]:
                results.append(node)
            else:
                results.append(APP(lhs, rhs))
    assert len(results) == 1, results
    return results[0], changed


def _normalize(term, budget):
    """Returns the normal form and the number of passes spent finding it."""
    passes = 0
    changed = True
    while changed:
        if budget is not None and passes >= budget:
            raise DidNotTerminate(
                'No normal form within {} passes: {}'.format(
                    budget, print_minimal(term)),
                budget=budget)
        if LOG.isEnabledFor(logging.DEBUG):
            LOG.debug('  {}'.format(print_minimal(term)))
        term, changed = simplify_tree(term)
        passes += 1
    return term, passes


@logged(str, returns=str)
def normalize(term, budget=None):
    """Rewrites term until no rule applies.

    Args:
      term: a term.
      budget: optional maximum number of passes over the term.

    Raises:
      DidNotTerminate if budget is exhausted.
    """
    term, _ = _normalize(term, budget)
    return term


# ----------------------------------------------------------------------------
# Reduction

@logged(str, returns=repr)
def reduce_to_arity(term, budget=None):
    """Applies term to fresh variables until its head is one of them.

    For a single combinator this finds its arity, eg S a b c = a c (b c)
    so reduce_to_arity(S) returns (a c (b c), 3).

    Args:
      term: a normalized term.
      budget: optional maximum number of passes, shared by all the
        normalizations needed along the way.

    Returns:
      a pair (term, arity), where arity is the number of variables applied.

    Raises:
      DidNotTerminate if budget is exhausted.
    """
    arity = 0
    while isa_atom(head(term)):
        arity += 1
        term = APP(term, VAR(arity))
        term, passes = _normalize(term, budget)
        if budget is not None:
            budget -= passes
    return term, arity

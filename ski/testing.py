"""Tools for testing parse(), normalize() and reduce_to_arity()."""

import os

import hypothesis.strategies as s

from ski.syntax import APP, VAR, B, C, I, K, S, W
from ski.util.testing import xfail_param

DIR = os.path.dirname(os.path.abspath(__file__))
TESTDATA = os.path.join(DIR, "testdata")


# ----------------------------------------------------------------------------
# parameterized testing


def iter_test_cases(suite):
    """Yields (line, comment, message) for each nonempty line of a suite.

    Suites live in testdata/<suite>.txt; text after ; is a comment.
    """
    basename = "{}.txt".format(suite)
    filename = os.path.join(TESTDATA, basename)
    with open(filename) as f:
        for i, line in enumerate(f):
            parts = line.split(";", 1)
            data = parts[0].strip()
            if data:
                message = "In {}:{}\n{}".format(basename, 1 + i, line)
                comment = None if len(parts) < 2 else parts[1].strip()
                yield data, comment, message


def iter_equations(suite):
    """Yields (lhs, rhs, message) string triples from lines 'lhs = rhs'.

    Lines commented with 'xfail' are marked as expected failures.
    """
    for data, comment, message in iter_test_cases(suite):
        try:
            lhs, rhs = data.split("=")
        except ValueError:
            raise ValueError("{}Expected one '='".format(message))
        example = lhs.strip(), rhs.strip(), message
        if comment and comment.startswith("xfail"):
            example = xfail_param(*example, reason=comment)
        yield example


# ----------------------------------------------------------------------------
# property-based testing

s_vars = s.builds(VAR, s.integers(min_value=1, max_value=26))

s_combinators = s.one_of(
    s.just(I),
    s.just(K),
    s.just(S),
    s.just(B),
    s.just(C),
    s.just(W),
)

# I, K, B and C never duplicate an argument, so their terms always normalize.
s_affine_combinators = s.one_of(
    s.just(I),
    s.just(K),
    s.just(B),
    s.just(C),
)


def s_app_extend(terms):
    return s.builds(APP, terms, terms)


s_terms = s.recursive(s_combinators, s_app_extend, max_leaves=50)
s_open_terms = s.recursive(
    s.one_of(s_combinators, s_vars),
    s_app_extend,
    max_leaves=50,
)
s_affine_terms = s.recursive(s_affine_combinators, s_app_extend, max_leaves=30)

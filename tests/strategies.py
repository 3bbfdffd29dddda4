"""Hypothesis strategies for property-based testing of guards."""

import msgspec
from hypothesis import strategies as st

from klaw_guard import ValueGuard

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

absent_values = st.sampled_from([None, msgspec.UNSET])

integers = st.integers()
finite_floats = st.floats(allow_nan=False, allow_infinity=False)
numbers = st.one_of(integers, finite_floats)
texts = st.text(min_size=0, max_size=50)
booleans = st.booleans()

present_values = st.one_of(
    integers,
    finite_floats,
    texts,
    booleans,
    st.lists(integers, max_size=5),
    st.dictionaries(texts, integers, max_size=5),
)

parameter_names = st.text(
    alphabet=st.sampled_from('abcdefghijklmnopqrstuvwxyz_'),
    min_size=1,
    max_size=20,
)

# -----------------------------------------------------------------------------
# Check strategies
# -----------------------------------------------------------------------------

# Every built-in check, bound to arguments where it needs them.
CHECKS = {
    'array': lambda g: g.array(),
    'object': lambda g: g.object(),
    'string': lambda g: g.string(),
    'number': lambda g: g.number(),
    'date': lambda g: g.date(),
    'integer': lambda g: g.integer(),
    'equal': lambda g: g.equal(1),
    'not_equal': lambda g: g.not_equal(1),
    'in_': lambda g: g.in_([1, 2]),
    'not_in': lambda g: g.not_in([1, 2]),
    'min': lambda g: g.min(0),
    'max': lambda g: g.max(0),
    'range': lambda g: g.range(0, 10),
    'min_length': lambda g: g.min_length(1),
    'max_length': lambda g: g.max_length(1),
    'length': lambda g: g.length(1, 3),
    'not_empty': lambda g: g.not_empty(),
    'not_empty_or_whitespace': lambda g: g.not_empty_or_whitespace(),
    'pattern': lambda g: g.pattern(r'^a'),
    'patterns': lambda g: g.patterns([r'^a', r'^b']),
    'email': lambda g: g.email(),
    'url': lambda g: g.url(),
    'hostname': lambda g: g.hostname(),
    'iso_datetime': lambda g: g.iso_datetime(),
    'instance_of': lambda g: g.instance_of(int),
    'unique': lambda g: g.unique(),
    'ensure': lambda g: g.ensure(lambda _: False),
    'lower': lambda g: g.lower(),
    'upper': lambda g: g.upper(),
    'trim': lambda g: g.trim(),
    'make_unique': lambda g: g.make_unique(),
}

check_names = st.sampled_from(sorted(CHECKS))


def apply_check(name: str, target: ValueGuard) -> ValueGuard:
    return CHECKS[name](target)

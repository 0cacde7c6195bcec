"""Hypothesis strategies for property-based testing of resultant types."""

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# Mutable containers (get copied by ok())
containers = st.one_of(
    st.lists(st.integers(min_value=-100, max_value=100), max_size=10),
    st.dictionaries(
        st.text(min_size=1, max_size=10),
        st.integers(min_value=-100, max_value=100),
        max_size=5,
    ),
)

# Anything that is defined and not an exception: wrap() turns these into Ok
defined_values = st.one_of(
    integers,
    texts,
    booleans,
    st.floats(allow_nan=False),
    containers,
    st.tuples(integers, texts),
)

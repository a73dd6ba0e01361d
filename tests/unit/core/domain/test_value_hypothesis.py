# tests/unit/core/domain/test_value_hypothesis.py

"""Hypothesis-based property tests for the value operators"""

# Third party imports
from hypothesis import assume
from hypothesis import given
from hypothesis import strategies as st

# Local imports
from dynamic_value.core.domain.conversion import from_python
from dynamic_value.core.domain.conversion import to_python
from dynamic_value.core.domain.operations import get
from dynamic_value.core.domain.operations import merge
from dynamic_value.core.domain.operations import modify_field
from dynamic_value.core.domain.operations import set_field
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text

# Value strategies
keys = st.text(max_size=6)
scalars = st.one_of(
    st.just(NULL),
    st.booleans().map(Boolean),
    st.floats(allow_nan=False, allow_infinity=False).map(Number),
    st.text(max_size=10).map(Text),
)
values = st.recursive(
    scalars,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(Array),
        st.dictionaries(keys, children, max_size=4).map(Object),
    ),
    max_leaves=12,
)
arrays = st.lists(values, max_size=5).map(Array)
objects = st.dictionaries(keys, values, max_size=5).map(Object)


class TestIndexingProperties:
    """Property-based tests for lenient indexing"""

    @given(obj=objects, key=keys)
    def test_missing_key_is_null(self, obj, key):
        """Any key not in an object reads as Null"""
        assume(key not in obj)
        assert get(obj, Text(key)) == NULL

    @given(array=arrays, offset=st.integers(min_value=0, max_value=1000))
    def test_out_of_range_index_is_null(self, array, offset):
        """Indexes past either end read as Null"""
        assert get(array, len(array) + offset) == NULL
        assert get(array, -1 - offset) == NULL

    @given(text=st.text(min_size=1, max_size=20), data=st.data())
    def test_text_index_is_single_character(self, text, data):
        index = data.draw(st.integers(min_value=0, max_value=len(text) - 1))
        assert get(Text(text), index) == Text(text[index])


class TestUpdateProperties:
    """Property-based tests for set_field and modify_field"""

    @given(obj=objects, key=keys, value=values)
    def test_set_then_get_round_trip(self, obj, key, value):
        assert get(set_field(key, value, obj), key) == value

    @given(obj=objects, key=keys, value=values)
    def test_set_never_mutates(self, obj, key, value):
        snapshot = dict(obj.fields)
        set_field(key, value, obj)
        assert dict(obj.fields) == snapshot

    @given(obj=objects, key=keys)
    def test_modify_missing_key_is_noop(self, obj, key):
        assume(key not in obj)
        assert modify_field(key, lambda v: Text("changed"), obj) == obj


class TestMergeProperties:
    """Property-based tests for merge"""

    @given(value=values)
    def test_null_is_identity(self, value):
        assert merge(NULL, value) == value
        assert merge(value, NULL) == value

    @given(left=arrays, right=arrays)
    def test_array_lengths_add(self, left, right):
        assert len(merge(left, right)) == len(left) + len(right)

    @given(left=objects, right=objects)
    def test_object_size_bounded(self, left, right):
        merged = merge(left, right)
        assert len(merged) <= len(left) + len(right)
        for key in right:
            assert get(merged, key) == get(right, key)

    @given(a=st.text(max_size=5), b=st.text(max_size=5), c=st.text(max_size=5))
    def test_text_merge_associative(self, a, b, c):
        left = merge(merge(Text(a), Text(b)), Text(c))
        right = merge(Text(a), merge(Text(b), Text(c)))
        assert left == right


class TestOrderingProperties:
    """Property-based tests for the total ordering"""

    @given(left=values, right=values)
    def test_trichotomy(self, left, right):
        """Exactly one of <, ==, > holds"""
        outcomes = [left < right, left == right, left > right]
        assert outcomes.count(True) == 1

    @given(left=values, right=values)
    def test_equal_values_hash_equal(self, left, right):
        if left == right:
            assert hash(left) == hash(right)


class TestConversionProperties:
    """Property-based tests for plain-data conversion"""

    @given(value=values)
    def test_python_round_trip(self, value):
        assert from_python(to_python(value)) == value

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fearless.hashmap import HashMap, HashMapU8, make_hash

u8 = st.integers(min_value=0, max_value=255)
u16 = st.integers(min_value=0, max_value=0xFFFF)

actions = st.lists(
    st.one_of(
        st.tuples(st.just("insert"), u8, u16),
        st.tuples(st.just("lookup"), u8),
    )
)


@given(u16, u16)
def test_get_what_you_give(k, v):
    system_under_test = HashMap()
    assert system_under_test.insert(k, v) is None
    assert system_under_test.get(k) == v


@given(actions)
def test_sut_vs_genuine_article(ops):
    model = {}
    system_under_test = HashMap()
    for op in ops:
        if op[0] == "insert":
            _, k, v = op
            expected = model.get(k)
            model[k] = v
            assert system_under_test.insert(k, v) == expected
        else:
            _, k = op
            assert system_under_test.get(k) == model.get(k)
    assert len(system_under_test) == len(model)


@given(actions)
def test_u8_map_vs_genuine_article(ops):
    model = {}
    system_under_test = HashMapU8()
    for op in ops:
        if op[0] == "insert":
            _, k, v = op
            expected = model.get(k)
            model[k] = v
            assert system_under_test.insert(k, v) == expected
        else:
            _, k = op
            assert system_under_test.get(k) == model.get(k)


def test_u8_map_replaces_value():
    m = HashMapU8()
    assert m.insert(5, "a") is None
    assert m.insert(5, "b") == "a"
    assert m.get(5) == "b"
    assert m.get(6) is None


@pytest.mark.parametrize("key", [-1, 256, 1000])
def test_u8_map_rejects_out_of_range(key):
    m = HashMapU8()
    with pytest.raises(ValueError):
        m.insert(key, 1)
    with pytest.raises(ValueError):
        m.get(key)


def test_colliding_keys_share_a_slot():
    m = HashMap(hasher=lambda _k: 7)
    assert m.insert("first", 1) is None
    assert m.insert("second", 2) == 1
    assert m.get("first") == 2
    assert m.get("anything") == 2
    assert len(m) == 1


def test_custom_hasher_orders_entries_and_misses():
    m = HashMap(hasher=len)
    m.insert("ccc", 3)
    m.insert("a", 1)
    m.insert("bb", 2)
    assert [m.get(k) for k in ("x", "yy", "zzz")] == [1, 2, 3]
    assert m.get("dddd") is None
    assert len(m) == 3


def test_make_hash_is_unsigned_64_bit():
    assert make_hash(lambda _k: -1, "x") == 2**64 - 1
    assert make_hash(lambda _k: 2**64 + 3, "x") == 3
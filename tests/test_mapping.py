import pytest

from dywoqlib.mapping import (
    DynamicMap,
    FixedLengthOutOfBoundsError,
    FixedMap,
    KeyAlreadyExistError,
    KeyNotFoundError,
    NegativeFixedLengthError,
    OutOfBoundsError,
)


def test_dynamic_add_and_get():
    m = DynamicMap({})
    assert m.add("a", 1) == ("a", 1)
    assert m.get("a") == 1
    assert len(m) == 1
    assert "a" in m


def test_dynamic_add_existing_key_raises():
    m = DynamicMap({"a": 1})
    with pytest.raises(KeyAlreadyExistError):
        m.add("a", 2)
    assert m.get("a") == 1


def test_dynamic_set_existing_and_missing():
    m = DynamicMap({"a": 1})
    assert m.set("a", 5) == ("a", 5)
    assert m.get("a") == 5
    with pytest.raises(KeyNotFoundError):
        m.set("b", 1)
    assert "b" not in m


def test_dynamic_delete():
    m = DynamicMap({"a": 1, "b": 2})
    assert m.delete("a") == "a"
    assert "a" not in m
    assert len(m) == 1
    with pytest.raises(KeyNotFoundError):
        m.delete("a")


def test_dynamic_get_missing_raises():
    m = DynamicMap({"a": 1})
    with pytest.raises(KeyNotFoundError):
        m.get("z")


def test_dynamic_keys_and_values():
    m = DynamicMap({"x": 10, "y": 20})
    assert sorted(m.keys()) == ["x", "y"]
    assert sorted(m.values()) == [10, 20]


def test_dynamic_wraps_given_dict():
    source = {}
    m = DynamicMap(source)
    m.add("k", "v")
    assert source == {"k": "v"}
    assert m.native is source


def test_dynamic_str_empty_and_single():
    assert str(DynamicMap({})) == ""
    assert str(DynamicMap({"a": 1})) == "{\n  a: 1\n}"


def test_dynamic_str_lists_every_entry():
    text = str(DynamicMap({"a": 1, "b": 2}))
    assert text.startswith("{\n") and text.endswith("}")
    assert "  a: 1\n" in text
    assert "  b: 2\n" in text


def test_fixed_negative_length_raises():
    with pytest.raises(NegativeFixedLengthError):
        FixedMap(-1, {})


def test_fixed_too_many_initial_entries_raises():
    with pytest.raises(FixedLengthOutOfBoundsError):
        FixedMap(1, {"a": 1, "b": 2})


def test_fixed_copies_initial_entries():
    source = {"a": 1}
    m = FixedMap(3, source)
    m.add("b", 2)
    assert source == {"a": 1}
    assert m.native == {"a": 1, "b": 2}


def test_fixed_add_within_limit():
    m = FixedMap(2, {"a": 1})
    assert m.add("b", 2) == ("b", 2)
    assert len(m) == 2
    assert m.get("b") == 2


def test_fixed_add_beyond_limit_raises_and_keeps_state():
    m = FixedMap(1, {"a": 1})
    with pytest.raises(OutOfBoundsError):
        m.add("b", 2)
    assert len(m) == 1
    assert "b" not in m


def test_fixed_add_existing_key_raises():
    m = FixedMap(2, {"a": 1})
    with pytest.raises(KeyAlreadyExistError):
        m.add("a", 3)


def test_fixed_set_get_delete():
    m = FixedMap(2, {"a": 1})
    assert m.set("a", 9) == ("a", 9)
    assert m.get("a") == 9
    with pytest.raises(KeyNotFoundError):
        m.set("b", 1)
    assert m.delete("a") == "a"
    assert len(m) == 0
    with pytest.raises(KeyNotFoundError):
        m.get("a")


def test_fixed_room_freed_by_delete():
    m = FixedMap(1, {"a": 1})
    m.delete("a")
    assert m.add("b", 2) == ("b", 2)
    assert m.keys() == ["b"]
    assert m.values() == [2]


def test_fixed_str_matches_dynamic():
    entries = {"a": 1}
    assert str(FixedMap(1, entries)) == str(DynamicMap(dict(entries)))
    assert str(FixedMap(0, {})) == ""
import pytest

from dywoqlib.sliceutil import WrongIndexError
from dywoqlib.stringn import (
    IndexOutOfBoundsError,
    InvalidIndexForRemovalError,
    StringN,
)


def test_append_returns_arguments():
    s = StringN("HI!")
    assert s.append("bye", "hi1") == ["bye", "hi1"]
    assert s.append("sd", "sd", "sd") == ["sd", "sd", "sd"]
    assert str(s) == "HI!byehi1sdsdsd"


@pytest.mark.parametrize("text,want", [("HI!", "H"), ("I", "I")])
def test_front(text, want):
    assert StringN(text).front() == want


@pytest.mark.parametrize("text,want", [("HI!", "!"), ("I", "I")])
def test_back(text, want):
    assert StringN(text).back() == want


def test_front_of_empty_raises():
    with pytest.raises(IndexOutOfBoundsError):
        StringN("").front()


def test_back_of_empty_raises():
    with pytest.raises(IndexOutOfBoundsError):
        StringN("").back()


@pytest.mark.parametrize("prefix,want", [("H", True), ("I", False), ("HI", True), ("I!", False)])
def test_has_prefix(prefix, want):
    assert StringN("HI!").has_prefix(prefix) is want


@pytest.mark.parametrize("suffix,want", [("!", True), ("H", False)])
def test_has_rune_suffix(suffix, want):
    assert StringN("HI!").has_suffix(suffix) is want


@pytest.mark.parametrize("suffix,want", [("e", True), ("b", False)])
def test_has_string_suffix(suffix, want):
    assert StringN("bye").has_suffix(suffix) is want


def test_prefix_and_suffix_false_on_empty():
    s = StringN("")
    assert s.has_prefix("") is False
    assert s.has_suffix("") is False


def test_insert():
    s = StringN("bye")
    assert s.insert(0, "H") == "H"
    assert str(s) == "Hbye"


def test_insert_at_end():
    s = StringN("bye")
    s.insert(3, "!")
    assert str(s) == "bye!"


def test_insert_out_of_range():
    s = StringN("bye")
    with pytest.raises(IndexOutOfBoundsError):
        s.insert(4, "x")
    assert str(s) == "bye"


@pytest.mark.parametrize("item,want", [("b", True), ("a", False)])
def test_contains_rune(item, want):
    assert (item in StringN("bye")) is want


@pytest.mark.parametrize("item,want", [("hel", True), ("llo", True), ("j", False)])
def test_contains_string(item, want):
    assert (item in StringN("hello")) is want


def test_contains_on_empty_is_false():
    assert ("" in StringN("")) is False


def test_write():
    s = StringN("hello")
    assert s.write(b". bye") == 5
    assert str(s) == "hello. bye"


def test_read_all():
    s = StringN("hello")
    want = str(s)
    assert s.read() == want.encode()
    assert s.empty()
    assert s.read() == b""


def test_read_in_chunks():
    s = StringN("hello")
    assert s.read(2) == b"he"
    assert str(s) == "llo"


@pytest.mark.parametrize("text,want", [("hello", False), ("", True)])
def test_empty(text, want):
    assert StringN(text).empty() is want


def test_native():
    assert str(StringN("hello")) == "hello"


def test_set():
    s = StringN("hello")
    assert s.set("H", 0) == "h"
    assert str(s) == "Hello"


def test_set_out_of_range():
    with pytest.raises(WrongIndexError):
        StringN("hello").set("x", 5)


def test_at_unicode_and_bounds():
    s = StringN("héllo")
    assert s.at(1) == "é"
    assert len(s) == 5
    with pytest.raises(IndexOutOfBoundsError):
        s.at(5)
    with pytest.raises(IndexOutOfBoundsError):
        s.at(-1)


def test_clear():
    s = StringN("hello")
    s.clear()
    assert s.empty()
    assert str(s) == ""


def test_prepend():
    s = StringN("world")
    assert s.prepend("hello", ", ") == "hello, world"
    assert str(s) == "hello, world"


def test_remove():
    s = StringN("hello")
    assert s.remove(1, 3) == "e"
    assert str(s) == "hlo"


@pytest.mark.parametrize("start,end", [(-1, 2), (0, 6), (3, 2), (5, 5)])
def test_remove_invalid(start, end):
    s = StringN("hello")
    with pytest.raises(InvalidIndexForRemovalError):
        s.remove(start, end)
    assert str(s) == "hello"


def test_replace():
    s = StringN("a-b-c")
    s.replace("-", "+")
    assert str(s) == "a+b+c"


def test_reverse_twice_is_identity():
    s = StringN("héllo")
    s.reverse()
    assert str(s) == "olléh"
    s.reverse()
    assert str(s) == "héllo"


def test_lower_upper_do_not_mutate():
    s = StringN("HeLLo")
    assert s.lower() == "hello"
    assert s.upper() == "HELLO"
    assert str(s) == "HeLLo"


@pytest.mark.parametrize("other,want", [("abc", 0), ("abd", -1), ("abb", 1)])
def test_compare(other, want):
    assert StringN("abc").compare(other) == want


def test_equality():
    assert StringN("abc") == "abc"
    assert StringN("abc") == StringN("abc")
    assert not (StringN("abc") == "abd")


def test_split():
    assert StringN("a,b,c").split(",") == ["a", "b", "c"]
    assert StringN("abc").split("") == ["a", "b", "c"]


def test_substring_clamps():
    s = StringN("hello")
    assert s.substring(1, 3) == "el"
    assert s.substring(-5, 100) == "hello"
    assert s.substring(4, 2) == ""


def test_iterating():
    s = StringN("abc")
    assert list(s.iterating().forward()) == ["a", "b", "c"]
    assert list(s.iterating().reverse()) == ["c", "b", "a"]
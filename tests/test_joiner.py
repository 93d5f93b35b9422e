"""Tests for Joiner write, render and accounting behavior."""

import pytest

from strjoiner import (
    Joiner,
    NegativeGrowError,
    join,
    new_joiner,
    with_joiner,
    with_prefix,
    with_step,
    with_suffix,
)


@pytest.fixture
def bracketed() -> Joiner:
    return new_joiner(with_joiner("[", ",", "]"))


class TestStepPlacement:
    """The step goes between writes, never before the first or after the last."""

    def test_no_writes_renders_prefix_and_suffix(self, bracketed: Joiner) -> None:
        assert str(bracketed) == "[]"

    def test_single_write_has_no_step(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        assert str(bracketed) == "[a]"

    def test_three_writes(self, bracketed: Joiner) -> None:
        for part in ("a", "b", "c"):
            bracketed.write_string(part)
        assert str(bracketed) == "[a,b,c]"
        assert len(bracketed) == 7

    def test_mixed_write_kinds(self, bracketed: Joiner) -> None:
        bracketed.write_rune("x")
        bracketed.write_string("yz")
        bracketed.write_byte(ord("!"))
        bracketed.write(b"raw")
        assert str(bracketed) == "[x,yz,!,raw]"

    def test_empty_first_write_counts_as_write(self, bracketed: Joiner) -> None:
        bracketed.write_string("")
        bracketed.write_string("b")
        assert str(bracketed) == "[,b]"

    def test_multichar_step(self) -> None:
        j = new_joiner(with_step(" | "))
        j.write_string("a")
        j.write_string("b")
        assert str(j) == "a | b"

    def test_no_options_concatenates(self) -> None:
        j = Joiner()
        j.write_string("a")
        j.write_string("b")
        assert str(j) == "ab"
        assert len(j) == 2

    def test_string_is_repeatable(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        assert bracketed.string() == bracketed.string() == "[a]"
        bracketed.write_string("b")
        assert bracketed.string() == "[a,b]"


class TestWriteReturnValues:
    """Write methods report bytes written, never counting the step."""

    def test_write_string_returns_utf8_length(self, bracketed: Joiner) -> None:
        assert bracketed.write_string("abc") == 3
        assert bracketed.write_string("é") == 2

    def test_write_rune_returns_encoded_length(self, bracketed: Joiner) -> None:
        assert bracketed.write_rune("a") == 1
        assert bracketed.write_rune("é") == 2
        assert bracketed.write_rune("€") == 3
        assert bracketed.write_rune(0x1F600) == 4
        assert str(bracketed) == "[a,é,€,\U0001f600]"

    def test_write_returns_len(self, bracketed: Joiner) -> None:
        assert bracketed.write(b"") == 0
        assert bracketed.write(b"abcd") == 4

    def test_write_byte_returns_none(self, bracketed: Joiner) -> None:
        assert bracketed.write_byte(65) is None

    def test_extend_sums_fragment_lengths(self, bracketed: Joiner) -> None:
        assert bracketed.extend(["ab", b"cd", "é"]) == 6
        assert str(bracketed) == "[ab,cd,é]"


class TestLengthAndCapacity:
    """len() and cap() include prefix and suffix."""

    def test_fresh_len_and_cap(self, bracketed: Joiner) -> None:
        assert len(bracketed) == 2
        assert bracketed.cap() == 2

    def test_len_matches_rendered_bytes(self) -> None:
        j = new_joiner(with_joiner("«", "·", "»"))
        j.write_string("é")
        j.write_string("b")
        assert len(j) == len(bytes(j)) == len("«é·b»".encode())

    def test_grow_raises_capacity(self, bracketed: Joiner) -> None:
        bracketed.grow(10)
        assert bracketed.cap() == 12
        assert len(bracketed) == 2

    def test_writes_within_grown_capacity_keep_cap(self, bracketed: Joiner) -> None:
        bracketed.grow(10)
        bracketed.write_string("abc")
        bracketed.write_string("def")
        assert bracketed.cap() == 12
        assert len(bracketed) == 9

    def test_cap_never_below_len(self, bracketed: Joiner) -> None:
        for i in range(50):
            bracketed.write_string("x" * i)
            assert bracketed.cap() >= len(bracketed)

    def test_grow_zero_allocates_without_writing(self, bracketed: Joiner) -> None:
        bracketed.grow(0)
        assert str(bracketed) == "[]"
        assert bracketed.cap() == 2

    def test_negative_grow_raises(self, bracketed: Joiner) -> None:
        with pytest.raises(NegativeGrowError):
            bracketed.grow(-1)


class TestGrowBeforeWrite:
    """grow() allocates the buffer but is not a write."""

    def test_grow_then_write_has_no_leading_step(self, bracketed: Joiner) -> None:
        bracketed.grow(8)
        bracketed.write_string("a")
        assert str(bracketed) == "[a]"

    def test_grow_between_writes_keeps_step(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        bracketed.grow(8)
        bracketed.write_string("b")
        assert str(bracketed) == "[a,b]"


class TestReset:
    """reset() clears fragments and restores first-write behavior."""

    def test_reset_clears_content(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        bracketed.write_string("b")
        bracketed.reset()
        assert str(bracketed) == "[]"
        assert len(bracketed) == 2

    def test_reset_then_write_matches_fresh_joiner(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        bracketed.write_string("b")
        bracketed.reset()
        bracketed.write_string("c")

        fresh = new_joiner(with_joiner("[", ",", "]"))
        fresh.write_string("c")
        assert str(bracketed) == str(fresh) == "[c]"
        assert len(bracketed) == len(fresh)

    def test_reset_keeps_config(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        bracketed.reset()
        bracketed.write_string("x")
        bracketed.write_string("y")
        assert str(bracketed) == "[x,y]"

    def test_reset_without_writes_is_noop(self, bracketed: Joiner) -> None:
        bracketed.reset()
        assert str(bracketed) == "[]"
        assert bracketed.cap() == 2

    def test_truthiness_tracks_writes_not_affixes(self, bracketed: Joiner) -> None:
        assert len(bracketed) == 2
        assert not bracketed
        bracketed.grow(4)
        assert not bracketed
        bracketed.write_string("")
        assert bracketed
        bracketed.reset()
        assert not bracketed

    def test_reset_after_grow_only(self, bracketed: Joiner) -> None:
        bracketed.grow(4)
        bracketed.reset()
        bracketed.write_string("a")
        assert str(bracketed) == "[a]"


class TestRendering:
    def test_bytes_rendering(self, bracketed: Joiner) -> None:
        bracketed.write_string("é")
        bracketed.write(b"\x00")
        assert bytes(bracketed) == b"[\xc3\xa9,\x00]"

    def test_invalid_utf8_survives_str_roundtrip(self) -> None:
        j = Joiner()
        j.write(b"\xff")
        s = str(j)
        assert s.encode("utf-8", "surrogateescape") == b"\xff"
        assert len(j) == 1

    def test_repr_shows_config_and_value(self, bracketed: Joiner) -> None:
        bracketed.write_string("a")
        text = repr(bracketed)
        assert text.startswith("Joiner(")
        assert "'[a]'" in text

    def test_config_property(self) -> None:
        j = new_joiner(with_prefix("<"), with_suffix(">"))
        assert j.config.prefix == "<"
        assert j.config.step == ""
        assert j.config.suffix == ">"


class TestJoin:
    """join() one-shot helper."""

    def test_join_matches_str_join(self) -> None:
        parts = ["a", "bb", "", "c"]
        assert join(parts, with_step(",")) == ",".join(parts)

    def test_join_with_affixes(self) -> None:
        assert join(["1", "2"], with_joiner("(", " + ", ")")) == "(1 + 2)"

    def test_join_empty(self) -> None:
        assert join([], with_joiner("{", ",", "}")) == "{}"

    def test_join_accepts_generators(self) -> None:
        assert join((str(i) for i in range(3)), with_step("-")) == "0-1-2"

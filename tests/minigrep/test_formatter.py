"""Tests for the output formatter."""

import pytest

from minigrep import Options, capture_set, compile_pattern, emit, format_capture_groups, should_emit


def make_options(*, invert_match: bool = False, dump_capture_groups: bool = False) -> Options:
    return Options(filename="f", query="q", invert_match=invert_match, dump_capture_groups=dump_capture_groups)


class TestShouldEmit:
    """Tests for the emit decision."""

    @pytest.mark.parametrize("matched", [True, False])
    def test_inversion_law(self, matched: bool) -> None:
        """Inverting flips the decision for every verdict."""
        plain = should_emit(make_options(), matched)
        inverted = should_emit(make_options(invert_match=True), matched)
        assert plain is matched
        assert inverted is not plain


class TestCaptureSet:
    """Tests for capture extraction."""

    def test_groups(self) -> None:
        """Whole match comes first, then each group in order."""
        assert capture_set(compile_pattern(r"(\w+)=(\d+)"), "foo=1") == ["foo=1", "foo", "1"]

    def test_no_match(self) -> None:
        """A line without a match has no capture set."""
        assert capture_set(compile_pattern(r"(\w+)=(\d+)"), "no pairs here") is None

    def test_non_participating_group_is_empty(self) -> None:
        """A group that didn't take part in the match is an empty string."""
        assert capture_set(compile_pattern("(a)|(b)"), "b") == ["b", "", "b"]


class TestFormatCaptureGroups:
    """Tests for the comma join."""

    @pytest.mark.parametrize(
        ("captures", "expected"),
        [
            (["foo=1", "foo", "1"], "foo,1"),
            (["x=", "x", "", "z"], "x,,z"),
            (["foo=1", "foo"], "foo"),
            (["an"], "an"),
            ([], ""),
        ],
    )
    def test_join(self, captures: list[str], expected: str) -> None:
        """Whole match is excluded unless it is the only slot."""
        assert format_capture_groups(captures) == expected


class TestEmit:
    """Tests for emit output."""

    def test_full_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Matching line is written verbatim."""
        emit(make_options(), compile_pattern("an"), "banana", True)
        assert capsys.readouterr().out == "banana\n"

    def test_not_emitted(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Non-matching line writes nothing."""
        emit(make_options(), compile_pattern("an"), "apple", False)
        assert capsys.readouterr().out == ""

    def test_inverted(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Inverted, the non-matching line is written."""
        emit(make_options(invert_match=True), compile_pattern("an"), "apple", False)
        assert capsys.readouterr().out == "apple\n"

    def test_capture_groups(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Capture mode writes the comma-joined groups."""
        emit(make_options(dump_capture_groups=True), compile_pattern(r"(\w+)=(\d+)"), "foo=1", True)
        assert capsys.readouterr().out == "foo,1\n"

    def test_capture_groups_without_groups(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A pattern without groups writes the whole match."""
        emit(make_options(dump_capture_groups=True), compile_pattern("an"), "banana", True)
        assert capsys.readouterr().out == "an\n"

    def test_capture_groups_inverted(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Inverted capture mode has nothing to dump for a non-matching line."""
        emit(make_options(invert_match=True, dump_capture_groups=True), compile_pattern("an"), "apple", False)
        assert capsys.readouterr().out == ""

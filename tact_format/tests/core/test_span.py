import pytest

from tact_format.core.span import Interval, SourceRef

SOURCE = 'import "a";\nimport "b\\c";\ncontract A {}'


def test_interval_contents_and_position() -> None:
	interval = Interval("ab\ncd", 3, 5)
	assert interval.contents == "cd"
	assert interval.line_and_column() == (2, 1)


@pytest.mark.parametrize("start, end", [(-1, 2), (3, 2), (0, 6)])
def test_interval_bounds_are_checked(start: int, end: int) -> None:
	with pytest.raises(ValueError):
		Interval("hello", start, end)


def test_empty_interval_at_end() -> None:
	interval = Interval("abc", 3, 3)
	assert interval.contents == ""
	assert interval.line_and_column() == (1, 4)


def test_coverage_with() -> None:
	a = Interval(SOURCE, 0, 6)
	b = Interval(SOURCE, 12, 18)
	assert a.coverage_with(b) == Interval(SOURCE, 0, 18)
	assert b.coverage_with(a) == Interval(SOURCE, 0, 18)
	assert a.coverage_with() == a


def test_coverage_rejects_other_source() -> None:
	with pytest.raises(ValueError):
		Interval("abc", 0, 1).coverage_with(Interval("xyz", 0, 1))


def test_source_ref_merge_keeps_first_file() -> None:
	first = SourceRef(Interval(SOURCE, 7, 10), "a.tact")
	second = SourceRef(Interval(SOURCE, 19, 24), "b.tact")
	merged = SourceRef.merge(second, first)
	assert (merged.start, merged.end) == (7, 24)
	assert merged.file == "b.tact"
	assert merged.contents == '"a";\nimport "b\\c"'


def test_source_ref_merge_needs_a_ref() -> None:
	with pytest.raises(ValueError):
		SourceRef.merge()


def test_line_and_column_properties() -> None:
	ref = SourceRef(Interval(SOURCE, 19, 24))
	assert ref.contents == '"b\\c"'
	assert (ref.line, ref.column) == (2, 8)


def test_excerpt_with_neighbouring_lines() -> None:
	message = Interval(SOURCE, 19, 24).line_and_column_message()
	assert message == (
		"Line 2, col 8:\n"
		'  1 | import "a";\n'
		'> 2 | import "b\\c";\n'
		"             ^~~~~\n"
		"  3 | contract A {}\n"
	)


def test_excerpt_on_single_line() -> None:
	message = Interval("struct {}", 7, 8).line_and_column_message()
	assert message == "Line 1, col 8:\n> 1 | struct {}\n             ^\n"


def test_excerpt_clips_caret_to_the_line() -> None:
	source = "ab\ncd"
	message = Interval(source, 0, 5).line_and_column_message()
	assert message.splitlines()[2] == "      ^~"

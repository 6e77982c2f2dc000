from pathlib import Path

from tact_format.parser import parse_files


def _write(path: Path, text: str) -> Path:
	path.write_text(text, encoding="utf-8")
	return path


def test_good_and_bad_files(tmp_path: Path) -> None:
	good = _write(tmp_path / "good.tact", "struct A { a: Int; }\n")
	bad = _write(tmp_path / "bad.tact", "struct B {\n\ta Int;\n}\n")
	reserved = _write(tmp_path / "reserved.tact", "fun __gen_x() {}\n")

	programs, diagnostics = parse_files([good, bad, reserved])

	assert list(programs) == [good]
	assert programs[good].entries[0].name == "A"
	assert programs[good].entries[0].ref.file == str(good)

	assert len(diagnostics) == 2
	syntax, naming = diagnostics
	assert syntax.ref.file == str(bad)
	assert (syntax.ref.line, syntax.ref.column) == (2, 4)
	assert syntax.render().startswith(f"{bad}:2:4: error: Syntax error: expected")
	assert syntax.notes and syntax.notes[0].startswith("expected one of: ")
	assert naming.message == 'Variable name cannot start with "__gen"'
	assert naming.notes == []


def test_origin_is_applied_to_every_file(tmp_path: Path) -> None:
	std = _write(tmp_path / "std.tact", "primitive Int;\nprimitive Bool;\n")
	programs, diagnostics = parse_files([std], origin="stdlib")
	assert diagnostics == []
	assert [entry.origin for entry in programs[std].entries] == ["stdlib", "stdlib"]

"""
Tact parser: source text to `Program` nodes.

`parse` and `parse_imports` raise `TactSyntaxError` on bad input.
`parse_files` reads a set of files and reports failures as `Diagnostic`
records instead, so one bad file does not hide problems in the others.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Tuple

from tact_format.config import DEFAULT_PARSER_CONFIG, ParserConfig
from tact_format.core.diagnostics import Diagnostic
from tact_format.errors import TactSourceError

from .ast import Origin, Program
from .parser import parse_imports, parse_program
from .session import NodeIdCounter, clone_node, open_session, reset_node_ids

parse = parse_program


def parse_files(
	paths: Iterable[Path],
	origin: Origin = "user",
	*,
	config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Tuple[Dict[Path, Program], List[Diagnostic]]:
	programs: Dict[Path, Program] = {}
	diagnostics: List[Diagnostic] = []
	for path in paths:
		source = path.read_text(encoding="utf-8")
		try:
			programs[path] = parse_program(source, str(path), origin, config=config)
		except TactSourceError as err:
			diagnostics.append(Diagnostic.from_error(err))
	return programs, diagnostics


__all__ = [
	"parse",
	"parse_program",
	"parse_imports",
	"parse_files",
	"NodeIdCounter",
	"open_session",
	"clone_node",
	"reset_node_ids",
]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Source intervals and source references attached to every AST node.

An `Interval` is a half-open `[start, end)` slice of a source text. A
`SourceRef` pairs an interval with the (optional) file label of the parse
that produced it. Line/column data is derived on demand from the offsets,
so nodes stay cheap to build.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Interval:
	"""Half-open `[start, end)` range into `source`."""

	source: str = field(repr=False)
	start: int
	end: int

	def __post_init__(self) -> None:
		if not 0 <= self.start <= self.end <= len(self.source):
			raise ValueError(f"invalid interval [{self.start}, {self.end}) for source of length {len(self.source)}")

	@property
	def contents(self) -> str:
		return self.source[self.start : self.end]

	def line_and_column(self) -> Tuple[int, int]:
		"""1-based line and column of `start`."""
		line = self.source.count("\n", 0, self.start) + 1
		line_start = self.source.rfind("\n", 0, self.start) + 1
		return line, self.start - line_start + 1

	def coverage_with(self, *others: "Interval") -> "Interval":
		"""Smallest interval covering `self` and every interval in `others`."""
		for other in others:
			if other.source is not self.source and other.source != self.source:
				raise ValueError("cannot merge intervals over different sources")
		start = min([self.start] + [o.start for o in others])
		end = max([self.end] + [o.end for o in others])
		return Interval(self.source, start, end)

	def line_and_column_message(self) -> str:
		"""
		Human-readable excerpt pointing at this interval.

		Shows the previous line, the line holding `start` (marked with `>`),
		a caret line under the interval and the following line:

			Line 2, col 8:
			  1 | import "a";
			> 2 | import "b\\c";
			             ^~~~~
			  3 | contract A {}
		"""
		line, column = self.line_and_column()
		lines = self.source.split("\n")
		width = len(str(min(line + 1, len(lines))))

		def _row(num: int, marker: str) -> str:
			return f"{marker} {str(num).rjust(width)} | {lines[num - 1]}"

		out = [f"Line {line}, col {column}:"]
		if line > 1:
			out.append(_row(line - 1, " "))
		out.append(_row(line, ">"))
		current = lines[line - 1]
		span = max(1, min(self.end, self.start + len(current) - column + 1) - self.start)
		out.append(" " * (width + 5 + column - 1) + "^" + "~" * (span - 1))
		if line < len(lines):
			out.append(_row(line + 1, " "))
		return "\n".join(out) + "\n"


@dataclass(frozen=True)
class SourceRef:
	"""Where a node came from: an interval plus the file label of its parse."""

	interval: Interval
	file: Optional[str] = None

	@property
	def start(self) -> int:
		return self.interval.start

	@property
	def end(self) -> int:
		return self.interval.end

	@property
	def contents(self) -> str:
		return self.interval.contents

	@property
	def line(self) -> int:
		return self.interval.line_and_column()[0]

	@property
	def column(self) -> int:
		return self.interval.line_and_column()[1]

	@classmethod
	def merge(cls, *refs: "SourceRef") -> "SourceRef":
		"""
		Reference covering every interval in `refs`.

		The file label of the first reference is kept.
		"""
		if not refs:
			raise ValueError("SourceRef.merge requires at least one reference")
		first, rest = refs[0], refs[1:]
		return cls(first.interval.coverage_with(*(r.interval for r in rest)), first.file)


__all__ = ["Interval", "SourceRef"]

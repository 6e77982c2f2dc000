# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Exceptions raised while parsing, validating and printing Tact sources.

Source errors are `ValueError` subclasses carrying the `SourceRef` they point
at, so callers can either show `str(err)` (already prefixed with
`file:line:column` and followed by a caret excerpt) or build their own
diagnostic from `err.ref` and `err.raw_message`.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .core.span import SourceRef


def render_source_message(message: str, ref: SourceRef) -> str:
	excerpt = ref.interval.line_and_column_message()
	if ref.file:
		return f"{ref.file}:{ref.line}:{ref.column}: {message}\n{excerpt}"
	return f"{message}\n{excerpt}"


class TactSourceError(ValueError):
	"""Base class for errors pinned to a location in Tact source."""

	def __init__(self, message: str, *, ref: SourceRef) -> None:
		super().__init__(render_source_message(message, ref))
		self.raw_message = message
		self.ref = ref


class TactSyntaxError(TactSourceError):
	"""
	User-facing error for malformed or forbidden source.

	Raised both for grammar failures (see `TactMatchError`) and for the
	naming/attribute/import checks run while the tree is built.
	"""


class TactMatchError(TactSyntaxError):
	"""The grammar could not match the input."""

	def __init__(self, expected: Sequence[str], *, ref: SourceRef) -> None:
		self.expected: Tuple[str, ...] = tuple(expected)
		super().__init__("Syntax error: expected " + describe_expected(self.expected), ref=ref)


class UnsupportedNodeError(RuntimeError):
	"""A node kind reached a printer/traversal dispatch table that does not know it."""

	def __init__(self, kind: object) -> None:
		super().__init__(f"Unsupported node kind: {kind!r}")
		self.kind = kind


def describe_expected(expected: Sequence[str]) -> str:
	if not expected:
		return "end of input"
	if len(expected) == 1:
		return expected[0]
	return ", ".join(expected[:-1]) + " or " + expected[-1]


__all__ = [
	"TactSourceError",
	"TactSyntaxError",
	"TactMatchError",
	"UnsupportedNodeError",
	"describe_expected",
	"render_source_message",
]

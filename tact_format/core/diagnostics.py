# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured diagnostics for hosts that report errors themselves.

`Diagnostic.from_error` turns any `TactSourceError` into a plain record with
numeric positions, which editors and CLIs can render or serialize without
parsing exception text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..errors import TactMatchError, TactSourceError
from .span import SourceRef


@dataclass
class Diagnostic:
	"""Represents a parser diagnostic (error/warning)."""

	message: str
	severity: str = "error"
	ref: Optional[SourceRef] = None
	notes: List[str] = field(default_factory=list)

	@classmethod
	def from_error(cls, err: TactSourceError) -> "Diagnostic":
		notes: List[str] = []
		if isinstance(err, TactMatchError) and err.expected:
			notes.append("expected one of: " + ", ".join(err.expected))
		return cls(message=err.raw_message, ref=err.ref, notes=notes)

	def location(self) -> str:
		if self.ref is None:
			return "<unknown>"
		prefix = f"{self.ref.file}:" if self.ref.file else ""
		return f"{prefix}{self.ref.line}:{self.ref.column}"

	def render(self) -> str:
		"""One-line `location: severity: message` form."""
		return f"{self.location()}: {self.severity}: {self.message}"

	def to_dict(self) -> Dict[str, Any]:
		out: Dict[str, Any] = {"message": self.message, "severity": self.severity, "notes": list(self.notes)}
		if self.ref is not None:
			out.update(
				file=self.ref.file,
				line=self.ref.line,
				column=self.ref.column,
				start=self.ref.start,
				end=self.ref.end,
			)
		return out


__all__ = ["Diagnostic"]

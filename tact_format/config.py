# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Parser and printer options. Module-level defaults are used when callers pass none."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParserConfig:
	# Declared names may not start with these; they belong to generated code.
	reserved_prefixes: Tuple[str, ...] = ("__gen", "__tact")


@dataclass(frozen=True)
class FormatConfig:
	indent: str = "  "

	def __post_init__(self) -> None:
		if not self.indent or self.indent.strip():
			raise ValueError("indent must be a non-empty run of whitespace")


DEFAULT_PARSER_CONFIG = ParserConfig()
DEFAULT_FORMAT_CONFIG = FormatConfig()

__all__ = ["ParserConfig", "FormatConfig", "DEFAULT_PARSER_CONFIG", "DEFAULT_FORMAT_CONFIG"]

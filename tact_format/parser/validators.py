# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Checks run while the syntax tree is being built.

Each check takes plain values plus the `SourceRef` to blame and raises
`TactSyntaxError` on failure. None of them look at the tree, so they can be
exercised directly.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from tact_format.config import DEFAULT_PARSER_CONFIG
from tact_format.core.span import SourceRef
from tact_format.errors import TactSyntaxError

CONSTANT_ATTRIBUTES = frozenset({"virtual", "overrides", "abstract"})


class _Attribute(Protocol):
	type: str
	ref: SourceRef


def check_variable_name(
	name: str,
	ref: SourceRef,
	reserved_prefixes: Sequence[str] = DEFAULT_PARSER_CONFIG.reserved_prefixes,
) -> None:
	for prefix in reserved_prefixes:
		if name.startswith(prefix):
			raise TactSyntaxError(f'Variable name cannot start with "{prefix}"', ref=ref)


def check_dangling_comma(is_empty: bool, has_comma: bool, ref: SourceRef, *, trailing_allowed: bool = True) -> None:
	"""
	Reject `f(,)`.

	With `trailing_allowed=False` (declaration parameter lists) a comma after
	the last item is rejected too.
	"""
	if not has_comma:
		return
	if is_empty:
		raise TactSyntaxError("Empty parameter list should not have a dangling comma.", ref=ref)
	if not trailing_allowed:
		raise TactSyntaxError("Parameter list should not have a dangling comma.", ref=ref)


def _check_duplicates(what: str, attributes: Iterable[_Attribute]) -> set:
	seen: set = set()
	for attr in attributes:
		if attr.type in seen:
			raise TactSyntaxError(f"Duplicate {what} attribute {attr.type}", ref=attr.ref)
		seen.add(attr.type)
	return seen


def check_function_attributes(is_abstract: bool, attributes: Sequence[_Attribute], ref: SourceRef) -> None:
	"""
	`is_abstract` is True for a function declared without a body.

	Such a function must say `abstract`; a function with a body must not.
	"""
	seen = _check_duplicates("function", attributes)
	if is_abstract and "abstract" not in seen:
		raise TactSyntaxError("Abstract function doesn't have abstract modifier", ref=ref)
	if not is_abstract and "abstract" in seen:
		raise TactSyntaxError("Non abstract function have abstract modifier", ref=ref)


def check_constant_attributes(is_empty: bool, attributes: Sequence[_Attribute], ref: SourceRef) -> None:
	for attr in attributes:
		if attr.type not in CONSTANT_ATTRIBUTES:
			raise TactSyntaxError(f"Constant attribute {attr.type} is not allowed", ref=attr.ref)
	seen = _check_duplicates("constant", attributes)
	if is_empty and "abstract" not in seen:
		raise TactSyntaxError("Abstract constant doesn't have abstract modifier", ref=ref)
	if not is_empty and "abstract" in seen:
		raise TactSyntaxError("Non-abstract constant has abstract modifier", ref=ref)


def check_import_path(path: str, ref: SourceRef) -> None:
	if "\\" in path:
		raise TactSyntaxError('Import path can\'t contain "\\"', ref=ref)


def check_import_order(seen_non_import: bool, ref: SourceRef) -> None:
	if seen_non_import:
		raise TactSyntaxError("Import must be at the top of the file", ref=ref)


__all__ = [
	"CONSTANT_ATTRIBUTES",
	"check_variable_name",
	"check_dangling_comma",
	"check_function_attributes",
	"check_constant_attributes",
	"check_import_path",
	"check_import_order",
]

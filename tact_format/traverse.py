# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Depth-first pre-order walk over the syntax tree.

Children are visited in a fixed order per kind (see `_CHILDREN`). Receive
selectors and contract attributes are not nodes themselves, but the
arguments and string literals they hold are visited.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Iterator, List, Optional

from tact_format.errors import UnsupportedNodeError
from tact_format.parser.ast import NODE_KINDS, Bounce, ExternalComment, ExternalSimple, InternalComment, InternalSimple, Node


def _opt(node: Optional[Node]) -> List[Node]:
	return [node] if node is not None else []


def _seq(nodes: Optional[Iterable[Node]]) -> List[Node]:
	return list(nodes) if nodes is not None else []


def _selector_children(selector) -> List[Node]:
	if isinstance(selector, (InternalSimple, ExternalSimple, Bounce)):
		return [selector.arg]
	if isinstance(selector, (InternalComment, ExternalComment)):
		return [selector.comment]
	return []


def _contract_children(node) -> List[Node]:
	return [attr.name for attr in node.attributes] + list(node.traits) + list(node.declarations)


def _no_children(node) -> List[Node]:
	return []


_CHILDREN: Dict[str, Callable[..., List[Node]]] = {
	"program": lambda n: list(n.entries),
	"program_import": lambda n: [n.path],
	"primitive": _no_children,
	"def_struct": lambda n: list(n.fields),
	"def_trait": _contract_children,
	"def_contract": _contract_children,
	"def_field": lambda n: [n.type] + _opt(n.init),
	"def_constant": lambda n: [n.type] + _opt(n.value),
	"def_argument": lambda n: [n.type],
	"def_function": lambda n: list(n.args) + _opt(n.return_) + _seq(n.statements),
	"def_native_function": lambda n: list(n.args) + _opt(n.return_),
	"def_init_function": lambda n: list(n.args) + list(n.statements),
	"def_receive": lambda n: _selector_children(n.selector) + list(n.statements),
	"type_ref_simple": _no_children,
	"type_ref_map": _no_children,
	"type_ref_bounced": _no_children,
	"statement_let": lambda n: [n.type, n.expression],
	"statement_return": lambda n: _opt(n.expression),
	"statement_expression": lambda n: [n.expression],
	"statement_assign": lambda n: list(n.path) + [n.expression],
	"statement_augmentedassign": lambda n: list(n.path) + [n.expression],
	"statement_condition": lambda n: [n.expression] + list(n.true_statements) + _seq(n.false_statements) + _opt(n.elseif),
	"statement_while": lambda n: [n.condition] + list(n.statements),
	"statement_until": lambda n: [n.condition] + list(n.statements),
	"statement_repeat": lambda n: [n.iterations] + list(n.statements),
	"statement_try": lambda n: list(n.statements),
	"statement_try_catch": lambda n: list(n.statements) + list(n.catch_statements),
	"statement_foreach": lambda n: [n.map] + list(n.statements),
	"lvalue_ref": _no_children,
	"number": _no_children,
	"boolean": _no_children,
	"string": _no_children,
	"id": _no_children,
	"null": _no_children,
	"op_binary": lambda n: [n.left, n.right],
	"op_unary": lambda n: [n.right],
	"op_field": lambda n: [n.src],
	"op_call": lambda n: [n.src] + list(n.args),
	"op_static_call": lambda n: list(n.args),
	"op_new": lambda n: list(n.args),
	"new_parameter": lambda n: [n.exp],
	"init_of": lambda n: list(n.args),
	"conditional": lambda n: [n.condition, n.then_branch, n.else_branch],
}

if set(_CHILDREN) != NODE_KINDS:
	raise RuntimeError(f"traversal table out of sync with node kinds: {sorted(NODE_KINDS ^ set(_CHILDREN))}")


def children(node: Node) -> List[Node]:
	"""Direct child nodes of `node` in visiting order."""
	fn = _CHILDREN.get(node.kind)
	if fn is None:
		raise UnsupportedNodeError(node.kind)
	return fn(node)


def iter_nodes(node: Node) -> Iterator[Node]:
	"""Yield `node` and every descendant, pre-order."""
	stack = [node]
	while stack:
		current = stack.pop()
		yield current
		stack.extend(reversed(children(current)))


def traverse(node: Node, visitor: Callable[[Node], None]) -> None:
	for current in iter_nodes(node):
		visitor(current)


__all__ = ["children", "iter_nodes", "traverse"]

# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Canonical Tact printer.

`print_node` renders any node back to source text. Output depends only on
the tree: one declaration or statement per line, bodies indented by
`FormatConfig.indent`, single spaces around binary operators, and
parentheses only where the grammar would otherwise group the expression
differently. Printing a parsed program and parsing the result again gives a
structurally equal tree.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional

from tact_format.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from tact_format.errors import UnsupportedNodeError
from tact_format.parser import parse
from tact_format.parser.ast import (
	NODE_KINDS,
	Binary,
	Bounce,
	ExternalComment,
	ExternalFallback,
	ExternalSimple,
	Id,
	InternalComment,
	InternalFallback,
	InternalSimple,
	Node,
	Origin,
	Ternary,
	Unary,
)

# Binding strength, loosest first. Mirrors the expression levels in grammar.lark.
LEVEL_CONDITIONAL = 0
_BINARY_LEVELS = {
	"||": 1,
	"&&": 2,
	"|": 3,
	"^": 4,
	"&": 5,
	"==": 6,
	"!=": 6,
	"<": 7,
	"<=": 7,
	">": 7,
	">=": 7,
	"<<": 8,
	">>": 8,
	"+": 9,
	"-": 9,
	"*": 10,
	"/": 10,
	"%": 10,
}
LEVEL_PREFIX = 11
LEVEL_SUFFIX = 12
LEVEL_VALUE = 13

# Attribute types whose keyword differs from the stored name.
_ATTRIBUTE_KEYWORDS = {"overrides": "override"}


def expression_level(node: Node) -> int:
	if isinstance(node, Binary):
		return _BINARY_LEVELS[node.op]
	if isinstance(node, Unary):
		return LEVEL_SUFFIX if node.op == "!!" else LEVEL_PREFIX
	if isinstance(node, Ternary):
		return LEVEL_CONDITIONAL
	return LEVEL_VALUE


def _attributes(attributes: Iterable) -> str:
	return "".join(_ATTRIBUTE_KEYWORDS.get(attr.type, attr.type) + " " for attr in attributes)


class Printer:
	"""Renders nodes; one instance per indentation setting."""

	def __init__(self, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> None:
		self.config = config
		self._handlers: Dict[str, Callable[[Node], str]] = {
			kind: getattr(self, "_print_" + kind) for kind in NODE_KINDS
		}

	def print(self, node: Node) -> str:
		handler = self._handlers.get(getattr(node, "kind", None))
		if handler is None:
			raise UnsupportedNodeError(getattr(node, "kind", type(node).__name__))
		return handler(node).strip()

	# Layout helpers

	def _indent(self, text: str) -> str:
		return "\n".join(self.config.indent + line if line else line for line in text.split("\n"))

	def _body(self, items: Iterable[Node]) -> str:
		lines = [self._indent(self.print(item)) for item in items]
		if not lines:
			return "{}"
		return "{\n" + "\n".join(lines) + "\n}"

	def _expr(self, node: Node, min_level: int = LEVEL_CONDITIONAL) -> str:
		text = self.print(node)
		if expression_level(node) < min_level:
			return f"({text})"
		return text

	def _args(self, args: Iterable[Node]) -> str:
		return ", ".join(self._expr(arg) for arg in args)

	def _optional_type(self, type_ref: Optional[Node]) -> str:
		return f": {self.print(type_ref)}" if type_ref is not None else ""

	# Program

	def _print_program(self, node) -> str:
		return "\n".join(self.print(entry) for entry in node.entries)

	def _print_program_import(self, node) -> str:
		return f"import {self.print(node.path)};"

	def _print_primitive(self, node) -> str:
		return f"primitive {node.name};"

	def _print_def_struct(self, node) -> str:
		if node.message:
			head = f"message({node.prefix}) {node.name}" if node.prefix is not None else f"message {node.name}"
		else:
			head = f"struct {node.name}"
		return f"{head} {self._body(node.fields)}"

	def _contract(self, keyword: str, node) -> str:
		lines = [f"@interface({self.print(attr.name)})" for attr in node.attributes]
		head = f"{keyword} {node.name}"
		if node.traits:
			head += " with " + ", ".join(self.print(trait) for trait in node.traits)
		lines.append(f"{head} {self._body(node.declarations)}")
		return "\n".join(lines)

	def _print_def_contract(self, node) -> str:
		return self._contract("contract", node)

	def _print_def_trait(self, node) -> str:
		return self._contract("trait", node)

	# Declarations

	def _print_def_field(self, node) -> str:
		text = f"{node.name}: {self.print(node.type)}"
		if node.as_ is not None:
			text += f" as {node.as_}"
		if node.init is not None:
			text += f" = {self._expr(node.init)}"
		return text + ";"

	def _print_def_constant(self, node) -> str:
		text = f"{_attributes(node.attributes)}const {node.name}: {self.print(node.type)}"
		if node.value is not None:
			text += f" = {self._expr(node.value)}"
		return text + ";"

	def _print_def_argument(self, node) -> str:
		return f"{node.name}: {self.print(node.type)}"

	def _print_def_function(self, node) -> str:
		args = ", ".join(self.print(arg) for arg in node.args)
		head = f"{_attributes(node.attributes)}fun {node.name}({args}){self._optional_type(node.return_)}"
		if node.statements is None:
			return head + ";"
		return f"{head} {self._body(node.statements)}"

	def _print_def_native_function(self, node) -> str:
		args = ", ".join(self.print(arg) for arg in node.args)
		return (
			f"@name({node.native_name})\n"
			f"{_attributes(node.attributes)}native {node.name}({args}){self._optional_type(node.return_)};"
		)

	def _print_def_init_function(self, node) -> str:
		args = ", ".join(self.print(arg) for arg in node.args)
		return f"init({args}) {self._body(node.statements)}"

	def _print_def_receive(self, node) -> str:
		selector = node.selector
		if isinstance(selector, InternalSimple):
			head = f"receive({self.print(selector.arg)})"
		elif isinstance(selector, InternalFallback):
			head = "receive()"
		elif isinstance(selector, InternalComment):
			head = f"receive({self.print(selector.comment)})"
		elif isinstance(selector, Bounce):
			head = f"bounced({self.print(selector.arg)})"
		elif isinstance(selector, ExternalSimple):
			head = f"external({self.print(selector.arg)})"
		elif isinstance(selector, ExternalFallback):
			head = "external()"
		elif isinstance(selector, ExternalComment):
			head = f"external({self.print(selector.comment)})"
		else:
			raise UnsupportedNodeError(getattr(selector, "kind", type(selector).__name__))
		return f"{head} {self._body(node.statements)}"

	# Types

	def _print_type_ref_simple(self, node) -> str:
		return node.name + ("?" if node.optional else "")

	def _print_type_ref_map(self, node) -> str:
		key = node.key + (f" as {node.key_as}" if node.key_as is not None else "")
		value = node.value + (f" as {node.value_as}" if node.value_as is not None else "")
		return f"map<{key}, {value}>"

	def _print_type_ref_bounced(self, node) -> str:
		return f"bounced<{node.name}>"

	# Statements

	def _path(self, path) -> str:
		return ".".join(segment.name for segment in path)

	def _print_statement_let(self, node) -> str:
		return f"let {node.name}: {self.print(node.type)} = {self._expr(node.expression)};"

	def _print_statement_return(self, node) -> str:
		if node.expression is None:
			return "return;"
		return f"return {self._expr(node.expression)};"

	def _print_statement_expression(self, node) -> str:
		return f"{self._expr(node.expression)};"

	def _print_statement_assign(self, node) -> str:
		return f"{self._path(node.path)} = {self._expr(node.expression)};"

	def _print_statement_augmentedassign(self, node) -> str:
		return f"{self._path(node.path)} {node.op}= {self._expr(node.expression)};"

	def _print_statement_condition(self, node) -> str:
		text = f"if ({self._expr(node.expression)}) {self._body(node.true_statements)}"
		if node.elseif is not None:
			text += " else " + self._print_statement_condition(node.elseif)
		elif node.false_statements is not None:
			text += " else " + self._body(node.false_statements)
		return text

	def _print_statement_while(self, node) -> str:
		return f"while ({self._expr(node.condition)}) {self._body(node.statements)}"

	def _print_statement_until(self, node) -> str:
		return f"do {self._body(node.statements)} until ({self._expr(node.condition)});"

	def _print_statement_repeat(self, node) -> str:
		return f"repeat ({self._expr(node.iterations)}) {self._body(node.statements)}"

	def _print_statement_try(self, node) -> str:
		return f"try {self._body(node.statements)}"

	def _print_statement_try_catch(self, node) -> str:
		return f"try {self._body(node.statements)} catch ({node.catch_name}) {self._body(node.catch_statements)}"

	def _print_statement_foreach(self, node) -> str:
		return f"foreach ({node.key_name}, {node.value_name} in {self._expr(node.map)}) {self._body(node.statements)}"

	def _print_lvalue_ref(self, node) -> str:
		return node.name

	# Expressions

	def _print_number(self, node) -> str:
		return str(node.value)

	def _print_boolean(self, node) -> str:
		return "true" if node.value else "false"

	def _print_string(self, node) -> str:
		return f'"{node.value}"'

	def _print_id(self, node) -> str:
		return node.value

	def _print_null(self, node) -> str:
		return "null"

	def _print_op_binary(self, node) -> str:
		level = _BINARY_LEVELS[node.op]
		return f"{self._expr(node.left, level)} {node.op} {self._expr(node.right, level + 1)}"

	def _print_op_unary(self, node) -> str:
		if node.op == "!!":
			return f"{self._expr(node.right, LEVEL_VALUE)}!!"
		return f"{node.op}{self._expr(node.right, LEVEL_SUFFIX)}"

	def _print_op_field(self, node) -> str:
		return f"{self._expr(node.src, LEVEL_VALUE)}.{node.name}"

	def _print_op_call(self, node) -> str:
		return f"{self._expr(node.src, LEVEL_VALUE)}.{node.name}({self._args(node.args)})"

	def _print_op_static_call(self, node) -> str:
		return f"{node.name}({self._args(node.args)})"

	def _print_op_new(self, node) -> str:
		if not node.args:
			return f"{node.type} {{}}"
		return f"{node.type} {{ {', '.join(self.print(arg) for arg in node.args)} }}"

	def _print_new_parameter(self, node) -> str:
		if isinstance(node.exp, Id) and node.exp.value == node.name:
			return node.name
		return f"{node.name}: {self._expr(node.exp)}"

	def _print_init_of(self, node) -> str:
		return f"initOf {node.name}({self._args(node.args)})"

	def _print_conditional(self, node) -> str:
		cond = self._expr(node.condition, LEVEL_CONDITIONAL + 1)
		then_branch = self._expr(node.then_branch, LEVEL_CONDITIONAL + 1)
		return f"{cond} ? {then_branch} : {self._expr(node.else_branch)}"


_DEFAULT_PRINTER = Printer()


def print_node(node: Node, config: Optional[FormatConfig] = None) -> str:
	printer = _DEFAULT_PRINTER if config is None or config == DEFAULT_FORMAT_CONFIG else Printer(config)
	return printer.print(node)


def format_source(
	source: str,
	path: Optional[str] = None,
	origin: Origin = "user",
	*,
	config: Optional[FormatConfig] = None,
) -> str:
	"""Parse `source` and print it back in canonical form."""
	return print_node(parse(source, path, origin), config)


__all__ = ["Printer", "expression_level", "print_node", "format_source"]

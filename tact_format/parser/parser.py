# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lark front end for Tact.

`_PARSER` turns text into a `lark.Tree`; `AstBuilder` walks that tree with
one `_build_*` method per grammar production and produces frozen nodes from
`ast.py`. Naming, comma and attribute checks run while building, so a
`Program` only exists for input that passed all of them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken
from lark.lexer import PatternStr

from tact_format.config import DEFAULT_PARSER_CONFIG, ParserConfig
from tact_format.core.span import SourceRef
from tact_format.errors import TactMatchError, TactSyntaxError

from . import validators
from .ast import (
	Argument,
	AssignStmt,
	AugAssignStmt,
	Binary,
	Boolean,
	Bounce,
	BouncedTypeRef,
	ConstantAttribute,
	ConstantDef,
	ContractAttribute,
	ContractDef,
	Declaration,
	Expr,
	ExprStmt,
	ExternalComment,
	ExternalFallback,
	ExternalSimple,
	FieldAccess,
	FieldDef,
	ForEachStmt,
	FunctionAttribute,
	FunctionDef,
	Id,
	IfStmt,
	InitFunctionDef,
	InitOf,
	InternalComment,
	InternalFallback,
	InternalSimple,
	LetStmt,
	LValueRef,
	MapTypeRef,
	MethodCall,
	NativeFunctionDef,
	NewParameter,
	NewStruct,
	Null,
	Number,
	Origin,
	Primitive,
	Program,
	ProgramImport,
	ProgramItem,
	ReceiveDef,
	RepeatStmt,
	ReturnStmt,
	SimpleTypeRef,
	StaticCall,
	Stmt,
	StringLiteral,
	StructDef,
	Ternary,
	TraitDef,
	TryCatchStmt,
	TryStmt,
	TypeRef,
	Unary,
	UntilStmt,
	WhileStmt,
)
from .session import NodeIdCounter, ParseSession, open_session

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="contextual",
	start="program",
	propagate_positions=True,
	maybe_placeholders=False,
)

_ID_TOKENS = ("ID", "TYPE_ID")
_TYPE_RULES = frozenset({"type_ref_simple", "type_ref_map", "type_ref_bounced"})

_ATTRIBUTE_TYPES = {
	"GET": "get",
	"MUTATES": "mutates",
	"EXTENDS": "extends",
	"VIRTUAL": "virtual",
	"OVERRIDE": "overrides",
	"INLINE": "inline",
	"ABSTRACT": "abstract",
}

# Human names for regex terminals in "expected ..." messages.
_TERMINAL_NAMES = {
	"ID": "identifier",
	"TYPE_ID": "type name",
	"INTEGER": "integer literal",
	"STRING": "string literal",
	"FUNC_NAME": "FunC identifier",
	"FUNC_SIGIL": '"." or "~"',
	"AUG_ASSIGN": "augmented assignment",
	"$END": "end of input",
}


def parse_integer(text: str) -> int:
	"""Value of an INTEGER token: `0x`/`0b`/`0o` prefixes, `_` separators, decimal otherwise."""
	digits = text.replace("_", "")
	prefix = digits[:2].lower()
	if prefix == "0x":
		return int(digits[2:], 16)
	if prefix == "0b":
		return int(digits[2:], 2)
	if prefix == "0o":
		return int(digits[2:], 8)
	return int(digits, 10)


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)


def _subtrees(tree: Tree) -> List[Tree]:
	return [child for child in tree.children if isinstance(child, Tree)]


def _tree(tree: Tree, name: str) -> Optional[Tree]:
	return next((child for child in tree.children if isinstance(child, Tree) and _name(child) == name), None)


def _trees(tree: Tree, name: str) -> List[Tree]:
	return [child for child in tree.children if isinstance(child, Tree) and _name(child) == name]


def _token(tree: Tree, *types: str) -> Optional[Token]:
	return next((child for child in tree.children if isinstance(child, Token) and child.type in types), None)


def _tokens(tree: Tree, *types: str) -> List[Token]:
	return [child for child in tree.children if isinstance(child, Token) and child.type in types]


def _type_tree(tree: Tree) -> Optional[Tree]:
	return next((child for child in _subtrees(tree) if _name(child) in _TYPE_RULES), None)


def _ident(tree: Tree) -> str:
	tok = _token(tree, *_ID_TOKENS)
	if tok is None:
		raise TypeError(f"{_name(tree)} node missing identifier token")
	return tok.value


def _bounds(node: Tree | Token) -> Tuple[int, int]:
	if isinstance(node, Token):
		return node.start_pos, node.end_pos
	meta = node.meta
	if meta.empty:
		raise ValueError(f"{_name(node)} node has no source position")
	return meta.start_pos, meta.end_pos


class AstBuilder:
	"""Builds `ast.py` nodes from a Lark parse tree inside one `ParseSession`."""

	def __init__(self, session: ParseSession, config: ParserConfig = DEFAULT_PARSER_CONFIG) -> None:
		self.session = session
		self.config = config

	# Helpers

	def _ref(self, node: Tree | Token) -> SourceRef:
		return self.session.ref(*_bounds(node))

	def _new(self, cls, node: Tree | Token, **fields):
		return self.session.new(cls, self._ref(node), **fields)

	def _check_name(self, tok: Token) -> str:
		validators.check_variable_name(tok.value, self._ref(tok), self.config.reserved_prefixes)
		return tok.value

	def _check_list_comma(self, tree: Tree, trailing_allowed: bool = True) -> None:
		comma = _token(tree, "COMMA")
		if comma is not None:
			validators.check_dangling_comma(
				not _subtrees(tree), True, self._ref(comma), trailing_allowed=trailing_allowed
			)

	def _build_string(self, tok: Token) -> StringLiteral:
		return self._new(StringLiteral, tok, value=tok.value[1:-1])

	# Program

	def build_program(self, tree: Tree) -> Program:
		items: List[ProgramItem] = []
		seen_other = False
		for child in _subtrees(tree):
			entry = self._build_program_item(child)
			if isinstance(entry, ProgramImport):
				validators.check_import_order(seen_other, entry.ref)
			else:
				seen_other = True
			items.append(entry)
		entries = tuple(items)
		ref = self.session.ref(0, len(self.session.source))
		program = self.session.new(Program, ref, entries=entries)
		logger.debug("built program: %d entries, %d nodes", len(entries), self.session.nodes_created)
		return program

	def _build_program_item(self, tree: Tree) -> ProgramItem:
		name = _name(tree)
		if name == "program_import":
			return self._build_import(tree)
		if name == "primitive":
			return self._new(Primitive, tree, origin=self.session.origin, name=self._check_name(_token(tree, "TYPE_ID")))
		if name in ("struct_def", "message_def"):
			return self._build_struct(tree)
		if name == "contract_def":
			return self._build_contract(ContractDef, tree)
		if name == "trait_def":
			return self._build_contract(TraitDef, tree)
		if name == "function_def":
			return self._build_function(tree)
		if name == "native_function_def":
			return self._build_native_function(tree)
		if name == "constant_def":
			return self._build_constant(tree)
		raise TypeError(f"Unexpected program item: {name}")

	def _build_import(self, tree: Tree) -> ProgramImport:
		path = self._build_string(_token(tree, "STRING"))
		validators.check_import_path(path.value, path.ref)
		return self._new(ProgramImport, tree, path=path)

	def _build_struct(self, tree: Tree) -> StructDef:
		name = self._check_name(_token(tree, "TYPE_ID"))
		prefix_tok = _token(tree, "INTEGER")
		fields = tuple(self._build_field(child) for child in _trees(tree, "field"))
		return self._new(
			StructDef,
			tree,
			origin=self.session.origin,
			name=name,
			fields=fields,
			prefix=parse_integer(prefix_tok.value) if prefix_tok is not None else None,
			message=_name(tree) == "message_def",
		)

	def _build_contract(self, cls, tree: Tree):
		attributes = tuple(
			ContractAttribute(name=self._build_string(_token(attr, "STRING")), ref=self._ref(attr))
			for attr in _tree(tree, "contract_attributes").children
		)
		name = self._check_name(_token(tree, *_ID_TOKENS))
		trait_list = _tree(tree, "trait_list")
		traits = tuple(self._new(Id, tok, value=tok.value) for tok in trait_list.children) if trait_list is not None else ()
		declarations = tuple(
			self._build_declaration(child)
			for child in _subtrees(tree)
			if _name(child) not in ("contract_attributes", "trait_list")
		)
		return self._new(
			cls,
			tree,
			origin=self.session.origin,
			name=name,
			attributes=attributes,
			traits=traits,
			declarations=declarations,
		)

	# Declarations

	def _build_declaration(self, tree: Tree) -> Declaration:
		name = _name(tree)
		if name == "field":
			return self._build_field(tree)
		if name == "constant_def":
			return self._build_constant(tree)
		if name == "function_def":
			return self._build_function(tree)
		if name == "init_function":
			return self._build_init(tree)
		if name in ("receive_internal", "receive_bounced", "receive_external"):
			return self._build_receive(tree)
		raise TypeError(f"Unexpected declaration: {name}")

	def _build_field(self, tree: Tree) -> FieldDef:
		name = self._check_name(_token(tree, *_ID_TOKENS))
		type_ref = self._build_type(_type_tree(tree))
		serialization = _tree(tree, "serialization")
		init = next(
			(child for child in _subtrees(tree) if _name(child) not in _TYPE_RULES and _name(child) != "serialization"),
			None,
		)
		return self._new(
			FieldDef,
			tree,
			name=name,
			type=type_ref,
			as_=_ident(serialization) if serialization is not None else None,
			init=self._build_expr(init) if init is not None else None,
		)

	def _build_constant(self, tree: Tree) -> ConstantDef:
		attributes = tuple(
			ConstantAttribute(type=_ATTRIBUTE_TYPES[tok.type], ref=self._ref(attr))
			for attr in _tree(tree, "attributes").children
			for tok in attr.children
		)
		name = self._check_name(_token(tree, *_ID_TOKENS))
		value = next(
			(child for child in _subtrees(tree) if _name(child) not in _TYPE_RULES and _name(child) != "attributes"),
			None,
		)
		validators.check_constant_attributes(value is None, attributes, self._ref(tree))
		return self._new(
			ConstantDef,
			tree,
			name=name,
			type=self._build_type(_type_tree(tree)),
			value=self._build_expr(value) if value is not None else None,
			attributes=attributes,
		)

	def _build_function_attributes(self, tree: Tree) -> Tuple[FunctionAttribute, ...]:
		return tuple(
			FunctionAttribute(type=_ATTRIBUTE_TYPES[tok.type], ref=self._ref(attr))
			for group in _trees(tree, "attributes")
			for attr in group.children
			for tok in attr.children
		)

	def _build_function(self, tree: Tree) -> FunctionDef:
		params = _tree(tree, "params")
		self._check_list_comma(params, trailing_allowed=False)
		attributes = self._build_function_attributes(tree)
		name = self._check_name(_token(tree, *_ID_TOKENS))
		body = _tree(tree, "block")
		validators.check_function_attributes(body is None, attributes, self._ref(tree))
		args = self._build_args(params)
		return_type = self._build_optional_type(tree)
		return self._new(
			FunctionDef,
			tree,
			origin=self.session.origin,
			attributes=attributes,
			name=name,
			return_=return_type,
			args=args,
			statements=self._build_block(body) if body is not None else None,
		)

	def _build_native_function(self, tree: Tree) -> NativeFunctionDef:
		params = _tree(tree, "params")
		self._check_list_comma(params, trailing_allowed=False)
		native_name = "".join(tok.value for tok in _tree(tree, "func_id").children)
		attributes = self._build_function_attributes(tree)
		name = self._check_name(_token(tree, *_ID_TOKENS))
		args = self._build_args(params)
		return self._new(
			NativeFunctionDef,
			tree,
			origin=self.session.origin,
			attributes=attributes,
			name=name,
			native_name=native_name,
			return_=self._build_optional_type(tree),
			args=args,
		)

	def _build_init(self, tree: Tree) -> InitFunctionDef:
		params = _tree(tree, "params")
		self._check_list_comma(params, trailing_allowed=False)
		args = self._build_args(params)
		return self._new(InitFunctionDef, tree, args=args, statements=self._build_block(_tree(tree, "block")))

	def _build_receive(self, tree: Tree) -> ReceiveDef:
		kind = _name(tree)
		arg_tree = _tree(tree, "function_arg")
		comment = _token(tree, "STRING")
		if kind == "receive_bounced":
			selector = Bounce(arg=self._build_argument(arg_tree))
		elif arg_tree is not None:
			arg = self._build_argument(arg_tree)
			selector = InternalSimple(arg=arg) if kind == "receive_internal" else ExternalSimple(arg=arg)
		elif comment is not None:
			text = self._build_string(comment)
			selector = InternalComment(comment=text) if kind == "receive_internal" else ExternalComment(comment=text)
		else:
			selector = InternalFallback() if kind == "receive_internal" else ExternalFallback()
		return self._new(ReceiveDef, tree, selector=selector, statements=self._build_block(_tree(tree, "block")))

	def _build_args(self, params: Tree) -> Tuple[Argument, ...]:
		return tuple(self._build_argument(child) for child in _trees(params, "function_arg"))

	def _build_argument(self, tree: Tree) -> Argument:
		name = self._check_name(_token(tree, *_ID_TOKENS))
		return self._new(Argument, tree, name=name, type=self._build_type(_type_tree(tree)))

	# Types

	def _build_optional_type(self, tree: Tree) -> Optional[TypeRef]:
		type_tree = _type_tree(tree)
		return self._build_type(type_tree) if type_tree is not None else None

	def _build_type(self, tree: Tree) -> TypeRef:
		name = _name(tree)
		if name == "type_ref_simple":
			return self._new(
				SimpleTypeRef,
				tree,
				name=_token(tree, "TYPE_ID").value,
				optional=_token(tree, "QUESTION") is not None,
			)
		if name == "type_ref_map":
			names: List[str] = []
			hints: List[Optional[str]] = [None, None]
			for child in tree.children:
				if isinstance(child, Token):
					names.append(child.value)
				else:
					hints[len(names) - 1] = _ident(child)
			return self._new(MapTypeRef, tree, key=names[0], key_as=hints[0], value=names[1], value_as=hints[1])
		if name == "type_ref_bounced":
			return self._new(BouncedTypeRef, tree, name=_token(tree, "TYPE_ID").value)
		raise TypeError(f"Unexpected type node: {name}")

	# Statements

	def _build_block(self, tree: Tree) -> Tuple[Stmt, ...]:
		return tuple(self._build_statement(child) for child in _subtrees(tree))

	def _build_statement(self, tree: Tree) -> Stmt:
		name = _name(tree)
		if name == "statement_let":
			var = self._check_name(_token(tree, *_ID_TOKENS))
			type_tree, value = _subtrees(tree)
			return self._new(LetStmt, tree, name=var, type=self._build_type(type_tree), expression=self._build_expr(value))
		if name == "statement_return":
			value = next(iter(_subtrees(tree)), None)
			return self._new(ReturnStmt, tree, expression=self._build_expr(value) if value is not None else None)
		if name == "statement_expression":
			return self._new(ExprStmt, tree, expression=self._build_expr(_subtrees(tree)[0]))
		if name == "statement_assign":
			target, value = _subtrees(tree)
			path = self._build_lvalue(target)
			return self._new(AssignStmt, tree, path=path, expression=self._build_expr(value))
		if name == "statement_augmented_assign":
			target, value = _subtrees(tree)
			op = _token(tree, "AUG_ASSIGN").value[:-1]
			path = self._build_lvalue(target)
			return self._new(AugAssignStmt, tree, op=op, path=path, expression=self._build_expr(value))
		if name == "statement_condition":
			return self._build_condition(tree)
		if name == "statement_while":
			cond, body = _subtrees(tree)
			return self._new(WhileStmt, tree, condition=self._build_expr(cond), statements=self._build_block(body))
		if name == "statement_until":
			body, cond = _subtrees(tree)
			return self._new(UntilStmt, tree, condition=self._build_expr(cond), statements=self._build_block(body))
		if name == "statement_repeat":
			count, body = _subtrees(tree)
			return self._new(RepeatStmt, tree, iterations=self._build_expr(count), statements=self._build_block(body))
		if name == "statement_try":
			return self._build_try(tree)
		if name == "statement_foreach":
			key_tok, value_tok = _tokens(tree, *_ID_TOKENS)
			key_name = self._check_name(key_tok)
			value_name = self._check_name(value_tok)
			source, body = _subtrees(tree)
			return self._new(
				ForEachStmt,
				tree,
				key_name=key_name,
				value_name=value_name,
				map=self._build_expr(source),
				statements=self._build_block(body),
			)
		raise TypeError(f"Unexpected statement: {name}")

	def _build_condition(self, tree: Tree) -> IfStmt:
		children = _subtrees(tree)
		cond = self._build_expr(children[0])
		true_statements = self._build_block(children[1])
		false_statements = None
		elseif = None
		if len(children) == 3:
			tail = children[2]
			if _name(tail) == "block":
				false_statements = self._build_block(tail)
			else:
				elseif = self._build_condition(tail)
		return self._new(
			IfStmt,
			tree,
			expression=cond,
			true_statements=true_statements,
			false_statements=false_statements,
			elseif=elseif,
		)

	def _build_try(self, tree: Tree):
		blocks = _trees(tree, "block")
		catch_tok = _token(tree, *_ID_TOKENS)
		statements = self._build_block(blocks[0])
		if catch_tok is None:
			return self._new(TryStmt, tree, statements=statements)
		catch_name = self._check_name(catch_tok)
		return self._new(
			TryCatchStmt,
			tree,
			statements=statements,
			catch_name=catch_name,
			catch_statements=self._build_block(blocks[1]),
		)

	def _build_lvalue(self, tree: Tree, dot: Optional[Token] = None) -> Tuple[LValueRef, ...]:
		"""
		Flatten `a.b.c` into lvalue segments; any other target is rejected.

		A segment followed by `.` covers the dot as well.
		"""
		name = _name(tree)
		if name == "id":
			return (self._lvalue_segment(tree.children[0], dot),)
		if name == "op_field":
			src, next_dot, tok = tree.children
			return self._build_lvalue(src, next_dot) + (self._lvalue_segment(tok, dot),)
		raise TactSyntaxError("Invalid assignment target", ref=self._ref(tree))

	def _lvalue_segment(self, tok: Token, dot: Optional[Token]) -> LValueRef:
		ref = self._ref(tok)
		if dot is not None:
			ref = SourceRef.merge(ref, self._ref(dot))
		return self.session.new(LValueRef, ref, name=tok.value)

	# Expressions

	def _build_expr(self, tree: Tree) -> Expr:
		builder = self._EXPRESSIONS.get(_name(tree))
		if builder is None:
			raise TypeError(f"Unexpected expression node: {_name(tree)}")
		return builder(self, tree)

	def _build_binary(self, tree: Tree) -> Binary:
		left, op, right = tree.children
		return self._new(Binary, tree, op=op.value, left=self._build_expr(left), right=self._build_expr(right))

	def _build_unary(self, tree: Tree) -> Unary:
		op, operand = tree.children
		return self._new(Unary, tree, op=op.value, right=self._build_expr(operand))

	def _build_non_null(self, tree: Tree) -> Unary:
		operand, _ = tree.children
		return self._new(Unary, tree, op="!!", right=self._build_expr(operand))

	def _build_field_access(self, tree: Tree) -> FieldAccess:
		src, _, tok = tree.children
		return self._new(FieldAccess, tree, src=self._build_expr(src), name=tok.value)

	def _build_call_args(self, tree: Tree) -> Tuple[Expr, ...]:
		self._check_list_comma(tree)
		return tuple(self._build_expr(child) for child in _subtrees(tree))

	def _build_method_call(self, tree: Tree) -> MethodCall:
		src, _, tok, args = tree.children
		receiver = self._build_expr(src)
		return self._new(MethodCall, tree, src=receiver, name=tok.value, args=self._build_call_args(args))

	def _build_static_call(self, tree: Tree) -> StaticCall:
		tok, args = tree.children
		return self._new(StaticCall, tree, name=tok.value, args=self._build_call_args(args))

	def _build_new(self, tree: Tree) -> NewStruct:
		tok, args = tree.children
		self._check_list_comma(args)
		params = tuple(self._build_new_parameter(child) for child in _subtrees(args))
		return self._new(NewStruct, tree, type=tok.value, args=params)

	def _build_new_parameter(self, tree: Tree) -> NewParameter:
		tok = _token(tree, *_ID_TOKENS)
		values = _subtrees(tree)
		if values:
			exp = self._build_expr(values[0])
		else:
			exp = self._new(Id, tok, value=tok.value)
		return self._new(NewParameter, tree, name=tok.value, exp=exp)

	def _build_init_of(self, tree: Tree) -> InitOf:
		tok, args = tree.children
		return self._new(InitOf, tree, name=tok.value, args=self._build_call_args(args))

	def _build_conditional(self, tree: Tree) -> Ternary:
		cond, then_branch, else_branch = tree.children
		return self._new(
			Ternary,
			tree,
			condition=self._build_expr(cond),
			then_branch=self._build_expr(then_branch),
			else_branch=self._build_expr(else_branch),
		)

	def _build_number(self, tree: Tree) -> Number:
		return self._new(Number, tree, value=parse_integer(tree.children[0].value))

	def _build_boolean(self, tree: Tree) -> Boolean:
		return self._new(Boolean, tree, value=tree.children[0].type == "TRUE")

	def _build_null(self, tree: Tree) -> Null:
		return self._new(Null, tree)

	def _build_string_expr(self, tree: Tree) -> StringLiteral:
		return self._build_string(tree.children[0])

	def _build_id(self, tree: Tree) -> Id:
		return self._new(Id, tree, value="".join(tok.value for tok in tree.children))

	_EXPRESSIONS = {
		"op_binary": _build_binary,
		"op_unary": _build_unary,
		"non_null": _build_non_null,
		"op_field": _build_field_access,
		"op_call": _build_method_call,
		"op_static_call": _build_static_call,
		"op_new": _build_new,
		"init_of": _build_init_of,
		"conditional": _build_conditional,
		"number": _build_number,
		"boolean": _build_boolean,
		"null": _build_null,
		"string": _build_string_expr,
		"id": _build_id,
	}


# Match errors

def _describe_terminal(name: str) -> str:
	if name in _TERMINAL_NAMES:
		return _TERMINAL_NAMES[name]
	try:
		term = _PARSER.get_terminal(name)
	except KeyError:
		return name
	if isinstance(term.pattern, PatternStr):
		return f'"{term.pattern.value}"'
	return name


def _error_position(err: UnexpectedInput, source: str) -> Tuple[int, int]:
	if isinstance(err, UnexpectedToken):
		tok = err.token
		if tok.type == "$END" or tok.start_pos is None:
			return len(source), len(source)
		return tok.start_pos, max(tok.start_pos + 1, tok.end_pos or tok.start_pos)
	if isinstance(err, UnexpectedCharacters):
		return err.pos_in_stream, min(err.pos_in_stream + 1, len(source))
	return len(source), len(source)


def _expected_terminals(err: UnexpectedInput) -> Iterable[str]:
	if isinstance(err, UnexpectedCharacters):
		return err.allowed or ()
	return getattr(err, "expected", None) or ()


def match_error(err: UnexpectedInput, session: ParseSession) -> TactMatchError:
	"""Convert a Lark failure into a `TactMatchError` pinned at the offending input."""
	start, end = _error_position(err, session.source)
	expected = sorted({_describe_terminal(name) for name in _expected_terminals(err)})
	return TactMatchError(expected, ref=session.ref(start, min(end, len(session.source))))


def parse_program(
	source: str,
	path: Optional[str] = None,
	origin: Origin = "user",
	*,
	ids: Optional[NodeIdCounter] = None,
	config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Program:
	with open_session(source, path, origin, ids=ids) as session:
		try:
			tree = _PARSER.parse(source)
		except UnexpectedInput as err:
			logger.debug("rejected %s at %s:%s", path or "<source>", err.line, err.column)
			raise match_error(err, session) from err
		return AstBuilder(session, config).build_program(tree)


def parse_imports(
	source: str,
	path: Optional[str] = None,
	origin: Origin = "user",
	*,
	ids: Optional[NodeIdCounter] = None,
	config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> List[str]:
	"""Import paths of `source`, in order."""
	program = parse_program(source, path, origin, ids=ids, config=config)
	return [entry.path.value for entry in program.entries if isinstance(entry, ProgramImport)]


__all__ = ["AstBuilder", "match_error", "parse_integer", "parse_program", "parse_imports"]

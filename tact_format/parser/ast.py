# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tact syntax tree.

Every node is a frozen dataclass with a class-level `kind` tag, a session
`id` and a `ref` pointing back into the source. `id` and `ref` take no part
in equality, so two parses of the same text compare equal node for node.
Child sequences are tuples.

Layout:
  Program -> program items (imports, primitives, structs, traits, contracts,
  functions, constants) -> declarations -> statements -> expressions
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, Optional, Tuple, Union

from tact_format.core.span import SourceRef

Origin = Literal["stdlib", "user"]


# Base classes

@dataclass(frozen=True)
class Node:
	"""Base class for all identity-bearing nodes."""

	kind: ClassVar[str] = ""
	id: int = field(compare=False)
	ref: SourceRef = field(compare=False, repr=False)


@dataclass(frozen=True)
class Expr(Node):
	"""Base class for expressions."""


@dataclass(frozen=True)
class Stmt(Node):
	"""Base class for statements."""


@dataclass(frozen=True)
class TypeRef(Node):
	"""Base class for type references."""


# Expressions

@dataclass(frozen=True)
class Number(Expr):
	kind: ClassVar[str] = "number"
	value: int


@dataclass(frozen=True)
class Boolean(Expr):
	kind: ClassVar[str] = "boolean"
	value: bool


@dataclass(frozen=True)
class StringLiteral(Expr):
	"""String literal; `value` is the text between the quotes, escapes untouched."""

	kind: ClassVar[str] = "string"
	value: str


@dataclass(frozen=True)
class Id(Expr):
	kind: ClassVar[str] = "id"
	value: str


@dataclass(frozen=True)
class Null(Expr):
	kind: ClassVar[str] = "null"


@dataclass(frozen=True)
class Binary(Expr):
	kind: ClassVar[str] = "op_binary"
	op: str
	left: Expr
	right: Expr


@dataclass(frozen=True)
class Unary(Expr):
	"""Prefix `+ - !` or the postfix non-null assertion `!!`."""

	kind: ClassVar[str] = "op_unary"
	op: str
	right: Expr


@dataclass(frozen=True)
class FieldAccess(Expr):
	"""Field access: src.name."""

	kind: ClassVar[str] = "op_field"
	src: Expr
	name: str


@dataclass(frozen=True)
class MethodCall(Expr):
	"""Method call: src.name(args)."""

	kind: ClassVar[str] = "op_call"
	src: Expr
	name: str
	args: Tuple[Expr, ...]


@dataclass(frozen=True)
class StaticCall(Expr):
	"""Free function call: name(args)."""

	kind: ClassVar[str] = "op_static_call"
	name: str
	args: Tuple[Expr, ...]


@dataclass(frozen=True)
class NewParameter(Node):
	"""`name: exp` inside a struct instance. Punned `name` carries an `Id` as `exp`."""

	kind: ClassVar[str] = "new_parameter"
	name: str
	exp: Expr


@dataclass(frozen=True)
class NewStruct(Expr):
	"""Struct instance: Type { a: 1, b }."""

	kind: ClassVar[str] = "op_new"
	type: str
	args: Tuple[NewParameter, ...]


@dataclass(frozen=True)
class InitOf(Expr):
	kind: ClassVar[str] = "init_of"
	name: str
	args: Tuple[Expr, ...]


@dataclass(frozen=True)
class Ternary(Expr):
	"""Conditional expression: condition ? then_branch : else_branch."""

	kind: ClassVar[str] = "conditional"
	condition: Expr
	then_branch: Expr
	else_branch: Expr


# Types

@dataclass(frozen=True)
class SimpleTypeRef(TypeRef):
	kind: ClassVar[str] = "type_ref_simple"
	name: str
	optional: bool


@dataclass(frozen=True)
class MapTypeRef(TypeRef):
	"""map<key as key_as, value as value_as>; the serialization hints are optional."""

	kind: ClassVar[str] = "type_ref_map"
	key: str
	key_as: Optional[str]
	value: str
	value_as: Optional[str]


@dataclass(frozen=True)
class BouncedTypeRef(TypeRef):
	kind: ClassVar[str] = "type_ref_bounced"
	name: str


# Statements

@dataclass(frozen=True)
class LValueRef(Node):
	"""One segment of an assignment target path."""

	kind: ClassVar[str] = "lvalue_ref"
	name: str


@dataclass(frozen=True)
class LetStmt(Stmt):
	kind: ClassVar[str] = "statement_let"
	name: str
	type: TypeRef
	expression: Expr


@dataclass(frozen=True)
class ReturnStmt(Stmt):
	kind: ClassVar[str] = "statement_return"
	expression: Optional[Expr]


@dataclass(frozen=True)
class ExprStmt(Stmt):
	kind: ClassVar[str] = "statement_expression"
	expression: Expr


@dataclass(frozen=True)
class AssignStmt(Stmt):
	kind: ClassVar[str] = "statement_assign"
	path: Tuple[LValueRef, ...]
	expression: Expr


@dataclass(frozen=True)
class AugAssignStmt(Stmt):
	"""Augmented assignment; `op` is the bare operator (`+`, not `+=`)."""

	kind: ClassVar[str] = "statement_augmentedassign"
	op: str
	path: Tuple[LValueRef, ...]
	expression: Expr


@dataclass(frozen=True)
class IfStmt(Stmt):
	"""
	`if` statement.

	At most one of `false_statements` (plain `else { ... }`) and `elseif`
	(`else if ...`) is set.
	"""

	kind: ClassVar[str] = "statement_condition"
	expression: Expr
	true_statements: Tuple[Stmt, ...]
	false_statements: Optional[Tuple[Stmt, ...]]
	elseif: Optional["IfStmt"]


@dataclass(frozen=True)
class WhileStmt(Stmt):
	kind: ClassVar[str] = "statement_while"
	condition: Expr
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class UntilStmt(Stmt):
	"""do { statements } until (condition);"""

	kind: ClassVar[str] = "statement_until"
	condition: Expr
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class RepeatStmt(Stmt):
	kind: ClassVar[str] = "statement_repeat"
	iterations: Expr
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class TryStmt(Stmt):
	kind: ClassVar[str] = "statement_try"
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class TryCatchStmt(Stmt):
	kind: ClassVar[str] = "statement_try_catch"
	statements: Tuple[Stmt, ...]
	catch_name: str
	catch_statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class ForEachStmt(Stmt):
	"""foreach (key_name, value_name in map) { statements }"""

	kind: ClassVar[str] = "statement_foreach"
	key_name: str
	value_name: str
	map: Expr
	statements: Tuple[Stmt, ...]


# Attributes and receive selectors (records without identity)

FunctionAttributeType = Literal["get", "mutates", "extends", "virtual", "abstract", "overrides", "inline"]
ConstantAttributeType = Literal["virtual", "overrides", "abstract"]


@dataclass(frozen=True)
class FunctionAttribute:
	type: FunctionAttributeType
	ref: SourceRef = field(compare=False, repr=False)


@dataclass(frozen=True)
class ConstantAttribute:
	type: ConstantAttributeType
	ref: SourceRef = field(compare=False, repr=False)


@dataclass(frozen=True)
class ContractAttribute:
	"""`@interface("name")` on a contract or trait."""

	name: StringLiteral
	ref: SourceRef = field(compare=False, repr=False)
	type: ClassVar[str] = "interface"


@dataclass(frozen=True)
class InternalSimple:
	kind: ClassVar[str] = "internal-simple"
	arg: "Argument"


@dataclass(frozen=True)
class InternalFallback:
	kind: ClassVar[str] = "internal-fallback"


@dataclass(frozen=True)
class InternalComment:
	kind: ClassVar[str] = "internal-comment"
	comment: StringLiteral


@dataclass(frozen=True)
class Bounce:
	kind: ClassVar[str] = "bounce"
	arg: "Argument"


@dataclass(frozen=True)
class ExternalSimple:
	kind: ClassVar[str] = "external-simple"
	arg: "Argument"


@dataclass(frozen=True)
class ExternalFallback:
	kind: ClassVar[str] = "external-fallback"


@dataclass(frozen=True)
class ExternalComment:
	kind: ClassVar[str] = "external-comment"
	comment: StringLiteral


ReceiveSelector = Union[
	InternalSimple,
	InternalFallback,
	InternalComment,
	Bounce,
	ExternalSimple,
	ExternalFallback,
	ExternalComment,
]


# Declarations

@dataclass(frozen=True)
class Argument(Node):
	kind: ClassVar[str] = "def_argument"
	name: str
	type: TypeRef


@dataclass(frozen=True)
class FieldDef(Node):
	"""Struct/message/contract field: name: type as as_ = init;"""

	kind: ClassVar[str] = "def_field"
	name: str
	type: TypeRef
	as_: Optional[str]
	init: Optional[Expr]


@dataclass(frozen=True)
class ConstantDef(Node):
	"""Top-level or member constant. `value` is None for abstract/virtual stubs."""

	kind: ClassVar[str] = "def_constant"
	name: str
	type: TypeRef
	value: Optional[Expr]
	attributes: Tuple[ConstantAttribute, ...]


@dataclass(frozen=True)
class FunctionDef(Node):
	"""
	Free function or contract/trait method.

	`statements` is None exactly when the function has no body (`fun f();`),
	which the builder only accepts together with the `abstract` attribute.
	"""

	kind: ClassVar[str] = "def_function"
	origin: Origin
	attributes: Tuple[FunctionAttribute, ...]
	name: str
	return_: Optional[TypeRef]
	args: Tuple[Argument, ...]
	statements: Optional[Tuple[Stmt, ...]]


@dataclass(frozen=True)
class NativeFunctionDef(Node):
	"""`@name(native_name) native name(args): return_;` binding to a FunC function."""

	kind: ClassVar[str] = "def_native_function"
	origin: Origin
	attributes: Tuple[FunctionAttribute, ...]
	name: str
	native_name: str
	return_: Optional[TypeRef]
	args: Tuple[Argument, ...]


@dataclass(frozen=True)
class InitFunctionDef(Node):
	kind: ClassVar[str] = "def_init_function"
	args: Tuple[Argument, ...]
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class ReceiveDef(Node):
	kind: ClassVar[str] = "def_receive"
	selector: ReceiveSelector
	statements: Tuple[Stmt, ...]


@dataclass(frozen=True)
class Primitive(Node):
	kind: ClassVar[str] = "primitive"
	origin: Origin
	name: str


@dataclass(frozen=True)
class StructDef(Node):
	"""Struct or message; messages may carry an explicit opcode `prefix`."""

	kind: ClassVar[str] = "def_struct"
	origin: Origin
	name: str
	fields: Tuple[FieldDef, ...]
	prefix: Optional[int]
	message: bool


Declaration = Union[FieldDef, ConstantDef, FunctionDef, InitFunctionDef, ReceiveDef]


@dataclass(frozen=True)
class TraitDef(Node):
	kind: ClassVar[str] = "def_trait"
	origin: Origin
	name: str
	attributes: Tuple[ContractAttribute, ...]
	traits: Tuple[Id, ...]
	declarations: Tuple[Declaration, ...]


@dataclass(frozen=True)
class ContractDef(Node):
	kind: ClassVar[str] = "def_contract"
	origin: Origin
	name: str
	attributes: Tuple[ContractAttribute, ...]
	traits: Tuple[Id, ...]
	declarations: Tuple[Declaration, ...]


@dataclass(frozen=True)
class ProgramImport(Node):
	kind: ClassVar[str] = "program_import"
	path: StringLiteral


ProgramItem = Union[
	ProgramImport,
	Primitive,
	StructDef,
	ContractDef,
	TraitDef,
	FunctionDef,
	NativeFunctionDef,
	ConstantDef,
]


@dataclass(frozen=True)
class Program(Node):
	kind: ClassVar[str] = "program"
	entries: Tuple[ProgramItem, ...]


NODE_CLASSES = {
	cls.kind: cls
	for cls in (
		Program,
		ProgramImport,
		Primitive,
		StructDef,
		TraitDef,
		ContractDef,
		FieldDef,
		ConstantDef,
		Argument,
		FunctionDef,
		NativeFunctionDef,
		InitFunctionDef,
		ReceiveDef,
		SimpleTypeRef,
		MapTypeRef,
		BouncedTypeRef,
		LetStmt,
		ReturnStmt,
		ExprStmt,
		AssignStmt,
		AugAssignStmt,
		IfStmt,
		WhileStmt,
		UntilStmt,
		RepeatStmt,
		TryStmt,
		TryCatchStmt,
		ForEachStmt,
		LValueRef,
		Number,
		Boolean,
		StringLiteral,
		Id,
		Null,
		Binary,
		Unary,
		FieldAccess,
		MethodCall,
		StaticCall,
		NewStruct,
		NewParameter,
		InitOf,
		Ternary,
	)
}

NODE_KINDS = frozenset(NODE_CLASSES)


def node_range(node: Node) -> Tuple[int, int]:
	"""`(start, end)` source offsets of `node`."""
	return node.ref.start, node.ref.end


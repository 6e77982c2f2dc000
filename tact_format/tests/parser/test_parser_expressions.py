import pytest

from tact_format.parser import ast as A
from tact_format.parser import parse


def _expr(source: str):
	program = parse(f"fun f() {{ return {source}; }}")
	return program.entries[0].statements[0].expression


@pytest.mark.parametrize(
	"text, value",
	[
		("0", 0),
		("42", 42),
		("007", 7),
		("1_000_000", 1000000),
		("0x1F", 31),
		("0XfF", 255),
		("0b101", 5),
		("0B1_0", 2),
		("0o17", 15),
		("0x7362_d09c", 0x7362D09C),
	],
)
def test_integer_literals(text: str, value: int) -> None:
	node = _expr(text)
	assert isinstance(node, A.Number)
	assert node.value == value


def test_simple_literals() -> None:
	assert _expr("true").value is True
	assert _expr("false").value is False
	assert isinstance(_expr("null"), A.Null)
	string = _expr('"hello world"')
	assert isinstance(string, A.StringLiteral)
	assert string.value == "hello world"


def test_string_keeps_escapes_verbatim() -> None:
	assert _expr(r'"a\"b\n"').value == r"a\"b\n"


def test_multiplication_binds_tighter_than_addition() -> None:
	node = _expr("1 + 2 * 3")
	assert node.op == "+"
	assert node.left.value == 1
	assert node.right.op == "*"
	assert node == _expr("1 + (2 * 3)")
	assert node != _expr("(1 + 2) * 3")


def test_binary_operators_are_left_associative() -> None:
	node = _expr("a - b - c")
	assert node == _expr("(a - b) - c")
	assert node.left.op == "-"
	assert node.right.value == "c"


@pytest.mark.parametrize(
	"loose, tight",
	[
		("||", "&&"),
		("&&", "|"),
		("|", "^"),
		("^", "&"),
		("&", "=="),
		("!=", "<"),
		("<=", "<<"),
		(">>", "+"),
		("-", "%"),
	],
)
def test_precedence_ladder(loose: str, tight: str) -> None:
	left = _expr(f"a {tight} b {loose} c")
	assert left.op == loose
	assert left.left.op == tight
	right = _expr(f"a {loose} b {tight} c")
	assert right.op == loose
	assert right.right.op == tight


def test_unary_operators() -> None:
	neg = _expr("-x")
	assert isinstance(neg, A.Unary)
	assert (neg.op, neg.right.value) == ("-", "x")
	assert _expr("+x").op == "+"
	assert _expr("!flag").op == "!"
	non_null = _expr("x!!")
	assert (non_null.op, non_null.right.value) == ("!!", "x")


def test_not_null_binds_before_prefix_operators() -> None:
	node = _expr("!x!!")
	assert node.op == "!"
	assert node.right.op == "!!"
	assert node.right.right.value == "x"


@pytest.mark.parametrize(
	"source, ops",
	[
		("- -x", ["-", "-"]),
		("!!x", ["!", "!"]),
		("!!!x", ["!", "!", "!"]),
		("-+x", ["-", "+"]),
		("!-x!!", ["!", "-", "!!"]),
	],
)
def test_prefix_operators_stack(source: str, ops) -> None:
	node = _expr(source)
	seen = []
	while isinstance(node, A.Unary):
		seen.append(node.op)
		node = node.right
	assert seen == ops
	assert node.value == "x"


def test_unary_binds_tighter_than_binary() -> None:
	node = _expr("-a * b")
	assert node.op == "*"
	assert node.left.op == "-"


def test_ternary_is_right_associative() -> None:
	node = _expr("a ? b : c ? d : e")
	assert isinstance(node, A.Ternary)
	assert node.condition.value == "a"
	assert node.then_branch.value == "b"
	assert isinstance(node.else_branch, A.Ternary)
	assert node.else_branch.condition.value == "c"


def test_ternary_is_loosest() -> None:
	node = _expr("a || b ? c + 1 : d")
	assert node.condition.op == "||"
	assert node.then_branch.op == "+"


def test_field_access_and_method_calls_chain() -> None:
	node = _expr("a.b.c(1)")
	assert isinstance(node, A.MethodCall)
	assert node.name == "c"
	assert [arg.value for arg in node.args] == [1]
	assert isinstance(node.src, A.FieldAccess)
	assert node.src.name == "b"
	assert node.src.src.value == "a"


def test_call_on_call_result() -> None:
	node = _expr("beginCell().storeUint(1, 32).endCell()")
	assert node.name == "endCell"
	assert node.args == ()
	assert node.src.name == "storeUint"
	assert isinstance(node.src.src, A.StaticCall)
	assert node.src.src.name == "beginCell"


def test_struct_instance_with_punned_field() -> None:
	node = _expr("Point { x: 1, y }")
	assert isinstance(node, A.NewStruct)
	assert node.type == "Point"
	x, y = node.args
	assert (x.name, x.exp.value) == ("x", 1)
	assert y.name == "y"
	assert isinstance(y.exp, A.Id)
	assert y.exp.value == "y"


def test_empty_struct_instance() -> None:
	node = _expr("Empty {}")
	assert node.type == "Empty"
	assert node.args == ()


def test_init_of() -> None:
	node = _expr("initOf Counter(owner, 1)")
	assert isinstance(node, A.InitOf)
	assert node.name == "Counter"
	assert [arg.kind for arg in node.args] == ["id", "number"]


@pytest.mark.parametrize(
	"source, count",
	[
		("g(1, 2,)", 2),
		("a.g(1,)", 1),
		("P { x: 1, }", 1),
		("initOf C(1,)", 1),
	],
)
def test_trailing_comma_after_arguments(source: str, count: int) -> None:
	assert len(_expr(source).args) == count


def test_parentheses_leave_no_node() -> None:
	assert _expr("((x))") == _expr("x")
	assert isinstance(_expr("((x))"), A.Id)


def test_expression_refs_exclude_outer_parentheses() -> None:
	node = _expr("(a + b)")
	assert node.ref.contents == "a + b"

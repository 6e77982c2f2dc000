import pytest

from tact_format.errors import TactSyntaxError
from tact_format.parser import ast as A
from tact_format.parser import parse


def _statements(body: str):
	program = parse("fun f() {\n" + body + "\n}")
	return program.entries[0].statements


def test_let_and_return() -> None:
	let, ret, bare = _statements("let x: Int = 1;\nreturn x;\nreturn;")
	assert isinstance(let, A.LetStmt)
	assert let.name == "x"
	assert let.type.name == "Int"
	assert let.expression.value == 1
	assert isinstance(ret, A.ReturnStmt)
	assert ret.expression.value == "x"
	assert bare.expression is None


def test_expression_statement() -> None:
	(stmt,) = _statements("dump(1, 2);")
	assert isinstance(stmt, A.ExprStmt)
	assert isinstance(stmt.expression, A.StaticCall)
	assert stmt.expression.name == "dump"
	assert [arg.value for arg in stmt.expression.args] == [1, 2]


def test_assignment_flattens_field_path() -> None:
	(stmt,) = _statements("self.a.b = 5;")
	assert isinstance(stmt, A.AssignStmt)
	assert [segment.name for segment in stmt.path] == ["self", "a", "b"]
	assert all(segment.kind == "lvalue_ref" for segment in stmt.path)
	assert stmt.expression.value == 5


def test_assignment_path_segments_cover_the_following_dot() -> None:
	(stmt,) = _statements("self.a.b = 5;")
	assert [segment.ref.contents for segment in stmt.path] == ["self.", "a.", "b"]


@pytest.mark.parametrize("op", ["+", "-", "*", "/", "%"])
def test_augmented_assignment(op: str) -> None:
	(stmt,) = _statements(f"x {op}= 2;")
	assert isinstance(stmt, A.AugAssignStmt)
	assert stmt.op == op
	assert [segment.name for segment in stmt.path] == ["x"]


@pytest.mark.parametrize(
	"body",
	[
		"foo() = 1;",
		"a.b() = 1;",
		"(a + b) = 1;",
		"x!! += 1;",
	],
)
def test_assignment_to_non_path_is_rejected(body: str) -> None:
	with pytest.raises(TactSyntaxError, match="Invalid assignment target"):
		_statements(body)


def test_if_else_if_else_chain() -> None:
	(stmt,) = _statements(
		"""
	if (a) {
		return 1;
	} else if (b) {
		return 2;
	} else {
		return 3;
	}
"""
	)
	assert isinstance(stmt, A.IfStmt)
	assert stmt.expression.value == "a"
	assert [s.expression.value for s in stmt.true_statements] == [1]
	assert stmt.false_statements is None
	inner = stmt.elseif
	assert isinstance(inner, A.IfStmt)
	assert inner.expression.value == "b"
	assert [s.expression.value for s in inner.false_statements] == [3]
	assert inner.elseif is None


def test_if_without_else() -> None:
	(stmt,) = _statements("if (x > 0) { dump(x); }")
	assert stmt.false_statements is None
	assert stmt.elseif is None
	assert isinstance(stmt.expression, A.Binary)


@pytest.mark.parametrize(
	"condition, op, right",
	[
		("x < MIN", "<", "MIN"),
		("x == Foo", "==", "Foo"),
		("x != self.limit", "!=", None),
	],
)
def test_unparenthesised_condition_ending_in_a_name(condition: str, op: str, right) -> None:
	(stmt,) = _statements(f"if {condition} {{ return; }} else if {condition} {{ return; }}")
	for branch in (stmt, stmt.elseif):
		assert isinstance(branch.expression, A.Binary)
		assert branch.expression.op == op
		if right is not None:
			assert isinstance(branch.expression.right, A.Id)
			assert branch.expression.right.value == right
		assert len(branch.true_statements) == 1
		assert isinstance(branch.true_statements[0], A.ReturnStmt)


def test_struct_instance_in_parenthesised_condition() -> None:
	(stmt,) = _statements("if (Foo {} == x) {}")
	assert isinstance(stmt.expression.left, A.NewStruct)
	assert stmt.expression.left.type == "Foo"
	assert stmt.true_statements == ()


def test_condition_allows_prefix_chains() -> None:
	(stmt,) = _statements("if !!done { return; }")
	outside = stmt.expression
	assert (outside.op, outside.right.op) == ("!", "!")
	assert outside.right.right.value == "done"


def test_loops() -> None:
	while_, repeat, until = _statements(
		"""
	while (i < 10) { i += 1; }
	repeat (3) { dump(i); }
	do { i -= 1; } until (i == 0);
"""
	)
	assert isinstance(while_, A.WhileStmt)
	assert while_.condition.op == "<"
	assert len(while_.statements) == 1
	assert isinstance(repeat, A.RepeatStmt)
	assert repeat.iterations.value == 3
	assert isinstance(until, A.UntilStmt)
	assert until.condition.op == "=="
	assert until.statements[0].op == "-"


def test_try_with_and_without_catch() -> None:
	plain, caught = _statements(
		"""
	try { risky(); }
	try { risky(); } catch (err) { dump(err); }
"""
	)
	assert isinstance(plain, A.TryStmt)
	assert len(plain.statements) == 1
	assert isinstance(caught, A.TryCatchStmt)
	assert caught.catch_name == "err"
	assert caught.catch_statements[0].expression.args[0].value == "err"


def test_foreach() -> None:
	(stmt,) = _statements("foreach (k, v in self.balances) { dump(v); }")
	assert isinstance(stmt, A.ForEachStmt)
	assert (stmt.key_name, stmt.value_name) == ("k", "v")
	assert isinstance(stmt.map, A.FieldAccess)
	assert stmt.map.name == "balances"


def test_empty_blocks() -> None:
	(stmt,) = _statements("while (true) {}")
	assert stmt.statements == ()


def test_keywords_are_names_outside_their_position() -> None:
	(stmt,) = _statements("let get: Int = init;")
	assert stmt.name == "get"
	assert stmt.expression.value == "init"

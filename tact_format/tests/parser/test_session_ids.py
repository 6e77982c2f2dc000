import threading

import pytest

from tact_format.config import ParserConfig
from tact_format.parser import NodeIdCounter, clone_node, open_session, parse, reset_node_ids
from tact_format.parser.ast import Id
from tact_format.traverse import children, iter_nodes

SOURCE = """
contract Counter {
	counter: Int = 0;
	receive("increment") {
		self.counter += 1;
	}
	get fun counter(): Int {
		return self.counter > 0 ? self.counter : -1;
	}
}
"""


def _ids(node):
	return [n.id for n in iter_nodes(node)]


def test_first_node_ids_after_reset() -> None:
	program = parse("primitive Int;")
	assert program.entries[0].id == 1
	assert program.id == 2


def test_ids_unique_and_parent_after_children() -> None:
	program = parse(SOURCE)
	ids = _ids(program)
	assert len(ids) == len(set(ids))
	assert program.id == max(ids)
	for node in iter_nodes(program):
		for child in children(node):
			assert child.id < node.id


def test_ids_never_repeat_across_parses() -> None:
	first = _ids(parse(SOURCE))
	second = _ids(parse(SOURCE))
	assert min(second) > max(first)


def test_reset_replays_the_same_ids() -> None:
	first = _ids(parse(SOURCE))
	reset_node_ids()
	assert _ids(parse(SOURCE)) == first


def test_failed_parse_still_consumes_ids() -> None:
	with pytest.raises(ValueError):
		parse("contract C { a: Int; const X: Int; }")
	# the field and its type were built before the constant failed
	assert parse("primitive Int;").entries[0].id == 3


def test_private_counter() -> None:
	parse(SOURCE)
	counter = NodeIdCounter()
	program = parse("primitive Int;", ids=counter)
	assert (program.entries[0].id, program.id) == (1, 2)
	assert counter.peek() == 3


def test_counter_is_thread_safe() -> None:
	counter = NodeIdCounter()
	seen = []

	def worker() -> None:
		seen.extend(counter.next_id() for _ in range(500))

	threads = [threading.Thread(target=worker) for _ in range(4)]
	for t in threads:
		t.start()
	for t in threads:
		t.join()
	assert sorted(seen) == list(range(1, 2001))


def test_session_closes_on_exit() -> None:
	with open_session("x", "a.tact") as session:
		node = session.new(Id, session.ref(0, 1), value="x")
		assert node.ref.file == "a.tact"
	assert session.closed
	with pytest.raises(RuntimeError):
		session.new(Id, session.ref(0, 1), value="x")


def test_session_closes_on_error() -> None:
	with pytest.raises(KeyError):
		with open_session("x") as session:
			raise KeyError("boom")
	assert session.closed


def test_clone_gets_a_fresh_id() -> None:
	with open_session("x") as session:
		node = session.new(Id, session.ref(0, 1), value="x")
		copy = clone_node(node, session)
	assert copy == node
	assert copy.id != node.id
	assert copy.ref is node.ref


def test_custom_reserved_prefixes() -> None:
	config = ParserConfig(reserved_prefixes=("tmp",))
	parse("fun f() { let __gen_x: Int = 1; }", config=config)
	with pytest.raises(ValueError, match='"tmp"'):
		parse("fun f() { let tmpx: Int = 1; }", config=config)

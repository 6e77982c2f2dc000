# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parse sessions and node identities.

A `ParseSession` carries what the builder needs beyond the parse tree: the
file label stamped into every `SourceRef`, the origin tag of declarations,
and the counter handing out node ids. Sessions are opened per parse with
`open_session` and closed on exit whether the parse succeeds or fails.

Ids come from a `NodeIdCounter`. Parses share `DEFAULT_IDS` unless the caller
brings its own counter, so ids from consecutive parses never overlap.
`reset_node_ids()` rewinds the shared counter for tests.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Optional, Type, TypeVar

from tact_format.core.span import Interval, SourceRef

from .ast import Node, Origin

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Node)

FIRST_NODE_ID = 1


@dataclass
class NodeIdCounter:
	"""Strictly increasing node ids; safe to share between threads."""

	_next: int = FIRST_NODE_ID
	_lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

	def next_id(self) -> int:
		with self._lock:
			value = self._next
			self._next += 1
			return value

	def peek(self) -> int:
		"""The id the next node will get."""
		return self._next

	def reset(self, start: int = FIRST_NODE_ID) -> None:
		with self._lock:
			self._next = start


DEFAULT_IDS = NodeIdCounter()


def reset_node_ids() -> None:
	"""Restart the shared counter. Test hook."""
	DEFAULT_IDS.reset()


@dataclass
class ParseSession:
	source: str
	file: Optional[str] = None
	origin: Origin = "user"
	ids: NodeIdCounter = field(default_factory=lambda: DEFAULT_IDS)
	closed: bool = False
	nodes_created: int = 0

	def new(self, cls: Type[N], ref: SourceRef, **fields: Any) -> N:
		if self.closed:
			raise RuntimeError("parse session is closed")
		self.nodes_created += 1
		return cls(id=self.ids.next_id(), ref=ref, **fields)

	def ref(self, start: int, end: int) -> SourceRef:
		return SourceRef(Interval(self.source, start, end), self.file)

	def clone(self, node: N) -> N:
		"""Shallow copy of `node` with a fresh id; children are shared."""
		if self.closed:
			raise RuntimeError("parse session is closed")
		return replace(node, id=self.ids.next_id())


@contextmanager
def open_session(
	source: str,
	file: Optional[str] = None,
	origin: Origin = "user",
	*,
	ids: Optional[NodeIdCounter] = None,
) -> Iterator[ParseSession]:
	session = ParseSession(source=source, file=file, origin=origin, ids=ids if ids is not None else DEFAULT_IDS)
	logger.debug("parse session opened: file=%s origin=%s first_id=%d", file, origin, session.ids.peek())
	try:
		yield session
	finally:
		session.closed = True
		logger.debug("parse session closed: file=%s nodes=%d", file, session.nodes_created)


def clone_node(node: N, session: ParseSession) -> N:
	return session.clone(node)


__all__ = [
	"FIRST_NODE_ID",
	"NodeIdCounter",
	"DEFAULT_IDS",
	"reset_node_ids",
	"ParseSession",
	"open_session",
	"clone_node",
]

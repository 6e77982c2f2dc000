"""
tact_format: parse Tact sources into a frozen syntax tree and print them back.

  - parser: grammar, tree builder, validators, parse sessions
  - traverse: pre-order walks over the tree
  - printer: canonical source rendering
"""

from tact_format.errors import TactMatchError, TactSourceError, TactSyntaxError, UnsupportedNodeError
from tact_format.parser import parse, parse_files, parse_imports, reset_node_ids
from tact_format.parser.ast import node_range
from tact_format.printer import format_source, print_node
from tact_format.traverse import iter_nodes, traverse

__all__ = [
	"parse",
	"parse_files",
	"parse_imports",
	"reset_node_ids",
	"print_node",
	"format_source",
	"traverse",
	"iter_nodes",
	"node_range",
	"TactSourceError",
	"TactSyntaxError",
	"TactMatchError",
	"UnsupportedNodeError",
]

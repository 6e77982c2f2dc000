# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from tact_format.parser import reset_node_ids


@pytest.fixture(autouse=True)
def _fresh_node_ids() -> None:
	"""Every test numbers nodes from the first id, whatever ran before it."""
	reset_node_ids()

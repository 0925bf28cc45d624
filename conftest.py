"""
# Provide the `test` parameter of the factor test modules under pytest.
"""
import pytest

from wallclock.test import library as libtest

@pytest.fixture
def test(request):
	t = libtest.Test(request.node.nodeid, request.function)
	with t.exits:
		yield t

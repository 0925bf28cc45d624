import logging

from .. import iers as module
from .. import system
from . import sample

def test_unix_milliseconds(test):
	test/module.unix_milliseconds(2208988800) == 0
	# 1973-01-01T00:00:00Z
	test/module.unix_milliseconds(2303683200) == 94694400000
	test/module.unix_milliseconds(0) == -2208988800000

def test_parse_records(test):
	c = module.parse(sample.list_text.splitlines(True))
	test/c.records == [
		(2272060800, 10),
		(2287785600, 11),
		(2303683200, 12),
	]

def test_parse_metadata(test):
	c = module.parse(sample.list_text.splitlines(True))
	test/c.updated == 3960835200
	test/c.expiration == 3991593600

def test_parse_metadata_absent(test):
	c = module.parse(["2272060800\t10\n"])
	test/c.updated == None
	test/c.expiration == None

def test_parse_metadata_malformed(test):
	c = module.parse(["#@\n", "#$\tsoon\n", "2272060800\t10\n"])
	test/c.updated == None
	test/c.expiration == None
	test/c.records == [(2272060800, 10)]

def test_parse_whitespace_separated(test):
	"""
	# - Distributions ship the same records separated by spaces.
	"""
	c = module.parse(["2272060800      10      # 1 Jan 1972\n"])
	test/c.records == [(2272060800, 10)]

def test_parse_comments_only(test):
	c = module.parse(["#\n", "# 2272060800\t10\n", "\n", "\t# trailing\n"])
	test/c.records == []

def test_parse_malformed_lines(test):
	"""
	# - Malformed lines are skipped with a warning and parsing continues.
	"""
	records = sample.capture(test, module.__name__)
	c = module.parse([
		"2272060800\t10\n",
		"2287785600\t11\t12\n",
		"2303683200\n",
		"2335219200\tthirteen\n",
		"2303683200\t12\n",
	], source='malformed')

	test/c.records == [(2272060800, 10), (2303683200, 12)]

	warnings = records.messages(logging.WARNING)
	test/len(warnings) == 3
	test/('malformed:2' in warnings[0]) == True
	test/('malformed:3' in warnings[1]) == True
	test/('malformed:4' in warnings[2]) == True

def test_parse_silent_on_comments(test):
	records = sample.capture(test, module.__name__)
	module.parse(sample.list_text.splitlines(True))
	test/records.messages(logging.WARNING) == []

def test_read_packaged(test):
	c = module.read(system.packaged)
	test/len(c.records) == 28
	test/c.records[0] == (2272060800, 10)
	test/c.records[-1] == (3692217600, 37)
	test/c.expiration != None

def test_read_missing(test):
	with test/OSError as exc:
		module.read('/nonexistent/leap-seconds.list')

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])

from .. import convert as module
from .. import leaps
from . import sample

tl = sample.packaged

def test_true_before_leap_seconds(test):
	"""
	# - No adjustment applies before the first leap second.
	"""
	test/tl.true(0) == 0
	test/tl.true(-1000) == -1000
	test/tl.true(-2208988800000) == -2208988800000
	# 1972-06-30T23:59:59.999Z
	test/tl.true(78796799999) == 78796799999

def test_true_exact_match(test):
	"""
	# - The leap second has elapsed at the adjustment's pseudo start.
	"""
	test/tl.true(sample.pseudo_2017) == sample.pseudo_2017 + 27000
	test/tl.true(sample.pseudo_2017 - 1) == sample.pseudo_2017 - 1 + 26000
	test/tl.true(78796800000) == 78796800000 + 1000

def test_true_future(test):
	# No leap seconds after 2017.
	p = sample.pseudo_2017 + (86400000 * 365 * 20)
	test/tl.true(p) == p + 27000

def test_pseudo_before_leap_seconds(test):
	test/tl.pseudo(0) == 0
	test/tl.pseudo(-1) == -1
	test/tl.pseudo(78796799999) == 78796799999

def test_pseudo_base_offset_second(test):
	"""
	# - The second preceding 1972-01-01 is not frozen.
	"""
	# 1971-12-31T23:59:59.000Z and .500Z
	test/tl.pseudo(63071999000) == 63071999000
	test/tl.pseudo(63071999500) == 63071999500
	test/tl.true(63071999500) == 63071999500

def test_pseudo_freeze(test):
	"""
	# - The pseudo timeline stands still throughout the leap second.
	"""
	test/tl.pseudo(sample.true_2017 - 1) == sample.pseudo_2017 - 1
	test/tl.pseudo(sample.true_2017) == sample.pseudo_2017
	test/tl.pseudo(sample.true_2017 + 1) == sample.pseudo_2017
	test/tl.pseudo(sample.true_2017 + 500) == sample.pseudo_2017
	test/tl.pseudo(sample.true_2017 + 999) == sample.pseudo_2017
	test/tl.pseudo(sample.true_2017 + 1000) == sample.pseudo_2017
	test/tl.pseudo(sample.true_2017 + 1001) == sample.pseudo_2017 + 1

def test_pseudo_freeze_all(test):
	for x in tl.adjustments:
		for offset in (0, 1, 250, 999, 1000):
			test/tl.pseudo(x.true_start + offset) == x.pseudo_start
		test/tl.pseudo(x.true_start - 1) == x.pseudo_start - 1
		test/tl.pseudo(x.true_start + 1001) == x.pseudo_start + 1

def test_round_trip(test):
	"""
	# - Pseudo instants survive conversion to the true timeline and back.
	"""
	for x in tl.adjustments:
		for offset in (-1001, -1000, -1, 0, 1, 999, 1000):
			p = x.pseudo_start + offset
			test/tl.pseudo(tl.true(p)) == p

def test_true_skips_leap_second(test):
	"""
	# - Consecutive pseudo seconds around a leap second are two true seconds apart.
	"""
	for x in tl.adjustments:
		test/(tl.true(x.pseudo_start) - tl.true(x.pseudo_start - 1000)) == 2000
		test/(tl.true(x.pseudo_start + 1000) - tl.true(x.pseudo_start)) == 1000

def test_leap(test):
	test/tl.leap(0) == None
	test/tl.leap(sample.true_2017 - 1) == None
	test/tl.leap(sample.true_2017) == tl.adjustments[-1]
	test/tl.leap(sample.true_2017 + 999) == tl.adjustments[-1]
	test/tl.leap(sample.true_2017 + 1000) == None

	for x in tl.adjustments:
		test/tl.leap(x.true_start) == x
		test/tl.leap(x.true_stop - 1) == x
		test/tl.leap(x.true_stop) == None
		test/tl.leap(x.true_start - 1) == None

def test_adjustments(test):
	test/tl.adjustments == tl.table.adjustments
	test/len(tl.adjustments) == 27

def test_explicit_table(test):
	"""
	# - Timelines are independent of the packaged list.
	"""
	A = leaps.Adjustment.from_pseudo_start
	t = module.Timeline(leaps.Table([A(10000, 1000), A(20000, 2000)]))

	test/t.true(9999) == 9999
	test/t.true(10000) == 11000
	test/t.true(20000) == 22000

	# First leap second occupies true [10000, 11000).
	test/t.pseudo(9999) == 9999
	test/t.pseudo(10000) == 10000
	test/t.pseudo(10999) == 10000
	test/t.pseudo(11000) == 10000
	test/t.pseudo(11001) == 10001

	# Second occupies true [21000, 22000).
	test/t.pseudo(20999) == 19999
	test/t.pseudo(21000) == 20000
	test/t.pseudo(22000) == 20000
	test/t.pseudo(22500) == 20500

def test_empty_table(test):
	t = module.Timeline(leaps.Table(()))
	test/t.true(123) == 123
	test/t.pseudo(123) == 123
	test/t.leap(123) == None

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])

"""
# Conversion between the true and the pseudo timelines.

# The true timeline counts every elapsed millisecond, including those inside
# leap seconds. The pseudo timeline is the conventional Unix representation; it
# does not count leap seconds and, instead, stands still while one elapses.

# Every true instant during a leap second is mapped onto the single pseudo
# instant that immediately follows it, so on the pseudo timeline the following
# second appears to last for two.

#!python
	tl = convert.Timeline(leaps.Table.open('leap-seconds.list'))
	true = tl.true(1483228800000) # 2017-01-01T00:00:00Z
	assert tl.pseudo(true) == 1483228800000
"""
from . import constants

class Timeline(object):
	"""
	# Conversions using the adjustments of a &.leaps.Table.

	# The table is never modified, so a single instance can be used by any
	# number of threads.
	"""
	__slots__ = ('table',)

	def __init__(self, table):
		self.table = table

	def __repr__(self):
		return '<%s: %r>' %(self.__class__.__name__, self.table)

	@property
	def adjustments(self):
		"""
		# The adjustments of the &table in ascending order.
		"""
		return self.table.adjustments

	def true(self, pseudo:int) -> int:
		"""
		# Convert the pseudo millisecond, &pseudo, to the true timeline.

		# An exact match on an adjustment's pseudo start means the leap second has
		# already elapsed. Instants before every adjustment are returned unchanged.
		"""
		adjustment = self.table.select_pseudo(pseudo)
		if adjustment is None:
			return pseudo

		return pseudo + adjustment.cumulative

	def pseudo(self, true:int, duration=constants.leap_second) -> int:
		"""
		# Convert the true millisecond, &true, to the pseudo timeline.

		# While a leap second is in progress, the remainder of the leap second is
		# added back so that the result stays at the pseudo instant following it.
		"""
		adjustment = self.table.select_true(true)
		if adjustment is None:
			return true

		ongoing = max(0, adjustment.true_start + duration - true)
		return true - adjustment.cumulative + ongoing

	def leap(self, true:int):
		"""
		# Get the adjustment whose leap second contains the true millisecond, &true.
		# &None when &true is not inside a leap second.
		"""
		adjustment = self.table.select_true(true)
		if adjustment is None or not adjustment.contains(true):
			return None

		return adjustment

"""
# The leap second aware point in time, &WallClockTime.

# A &WallClockTime counts true milliseconds since 1970-01-01T00:00:00Z,
# including those that elapsed inside leap seconds. This is not the Unix
# timestamp, which skips leap seconds and measures less time.

#!python
	from datetime import datetime, timezone
	a = WallClockTime.from_approximate_calendar_moment(datetime(2016, 12, 31, 23, 59, 59, tzinfo=timezone.utc))
	b = WallClockTime.from_approximate_calendar_moment(datetime(2017, 1, 1, tzinfo=timezone.utc))
	assert (b - a).total_seconds() == 2
	assert str(a.add_true_milliseconds(1000)) == '2016-12-31 23:59:60.000Z'

# Arithmetic and comparison operate on the true milliseconds alone. Conversion
# from and to the calendar uses a &.convert.Timeline; when one is not given,
# the process-wide &.system.timeline is used.

# ! WARNING:
	# Calendar moments cannot represent instants inside a leap second.
	# &WallClockTime.to_approximate_calendar_moment reports the instant
	# immediately following the leap second instead.
"""
import datetime

from . import constants
from . import format
from . import system

def _timeline(timeline, default=system.timeline):
	if timeline is None:
		return default()
	return timeline

def _milliseconds(duration, scale=constants.microseconds_in_millisecond) -> int:
	# Whole milliseconds of &duration truncated toward zero.
	us = (((duration.days * 86400) + duration.seconds) * 1000000) + duration.microseconds
	if us < 0:
		return -((-us) // scale)
	return us // scale

class WallClockTime(object):
	"""
	# Immutable point in time measured in true milliseconds since the epoch.

	# Values before 1970 are represented with negative &milliseconds.

	# [ Properties ]
	# /milliseconds/
		# True milliseconds since 1970-01-01T00:00:00Z, leap seconds included.
	"""
	__slots__ = ('milliseconds',)

	def __init__(self, milliseconds:int):
		object.__setattr__(self, 'milliseconds', int(milliseconds))

	def __setattr__(self, name, value):
		raise AttributeError("%s instances are immutable" %(self.__class__.__name__,))

	def __delattr__(self, name):
		raise AttributeError("%s instances are immutable" %(self.__class__.__name__,))

	def __reduce__(self):
		return (self.__class__, (self.milliseconds,))

	@classmethod
	def from_true_milliseconds(Class, milliseconds:int):
		"""
		# Construct from true milliseconds; no conversion is performed.
		"""
		return Class(milliseconds)

	@classmethod
	def from_pseudo_milliseconds(Class, milliseconds:int, *, timeline=None):
		"""
		# Construct from pseudo milliseconds, a Unix timestamp in milliseconds.
		"""
		return Class(_timeline(timeline).true(milliseconds))

	@classmethod
	def from_approximate_calendar_moment(Class, moment:datetime.datetime, *,
			timeline=None,
			epoch=constants.unix_epoch,
			unit=constants.millisecond,
		):
		"""
		# Construct from an aware &datetime.datetime.

		# The moment's Unix milliseconds are the whole milliseconds elapsed since the epoch;
		# subsecond precision finer than a millisecond is floored.
		# &ValueError is raised for naive moments as they have no offset.
		"""
		if moment.tzinfo is None or moment.utcoffset() is None:
			raise ValueError("calendar moment must have a UTC offset: %r" %(moment,))

		return Class.from_pseudo_milliseconds((moment - epoch) // unit, timeline=timeline)

	def to_pseudo_milliseconds(self, *, timeline=None) -> int:
		"""
		# The pseudo milliseconds, Unix timestamp in milliseconds, of the point.
		"""
		return _timeline(timeline).pseudo(self.milliseconds)

	def to_approximate_calendar_moment(self, *, timeline=None, epoch=constants.unix_epoch) -> datetime.datetime:
		"""
		# Get an approximate UTC calendar moment for processing and display.

		# Inside a leap second, the moment immediately following it is returned.
		# Not appropriate for accurate logic.
		"""
		return epoch + datetime.timedelta(milliseconds=self.to_pseudo_milliseconds(timeline=timeline))

	def leaping(self, *, timeline=None) -> bool:
		"""
		# Whether the point is inside a leap second.
		"""
		return _timeline(timeline).leap(self.milliseconds) is not None

	def add_true_milliseconds(self, milliseconds:int):
		"""
		# Construct the point &milliseconds after this one.
		"""
		return self.__class__(self.milliseconds + milliseconds)

	def subtract_true_milliseconds(self, milliseconds:int):
		"""
		# Construct the point &milliseconds before this one.
		"""
		return self.__class__(self.milliseconds - milliseconds)

	def __add__(self, duration):
		if isinstance(duration, datetime.timedelta):
			return self.add_true_milliseconds(_milliseconds(duration))
		return NotImplemented
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, WallClockTime):
			return datetime.timedelta(milliseconds=self.milliseconds - operand.milliseconds)
		elif isinstance(operand, datetime.timedelta):
			return self.subtract_true_milliseconds(_milliseconds(operand))
		return NotImplemented

	def compare(self, operand) -> int:
		"""
		# Three-way comparison of the points' true milliseconds.

		# Returns `-1`, `0`, or `1` when this point is, respectively, before, at, or after
		# &operand. Objects that are not &WallClockTime instances are considered to
		# follow every point.
		"""
		if not isinstance(operand, WallClockTime):
			return -1

		a, b = self.milliseconds, operand.milliseconds
		return (a > b) - (a < b)

	def __eq__(self, operand):
		return self.compare(operand) == 0

	def __ne__(self, operand):
		return self.compare(operand) != 0

	def __lt__(self, operand):
		return self.compare(operand) < 0

	def __le__(self, operand):
		return self.compare(operand) <= 0

	def __gt__(self, operand):
		return self.compare(operand) > 0

	def __ge__(self, operand):
		return self.compare(operand) >= 0

	def __hash__(self):
		return hash(self.milliseconds)

	def __repr__(self):
		return '%s.from_true_milliseconds(%d)' %(self.__class__.__name__, self.milliseconds)

	def __str__(self):
		return self.display()

	def display(self, *, timeline=None, duration=constants.leap_second) -> str:
		"""
		# Render the point as `yyyy-MM-dd HH:mm:ss.fffZ` using &timeline.

		# Inside a leap second, the calendar moment stands still, so the second
		# preceding it is rendered with the seconds field as `60`.
		"""
		timeline = _timeline(timeline)

		if timeline.leap(self.milliseconds) is not None:
			# The second before the leap second, 23:59:59, with its milliseconds intact.
			prior = self.subtract_true_milliseconds(duration)
			return format.display(prior.to_approximate_calendar_moment(timeline=timeline), leap=True)

		return format.display(self.to_approximate_calendar_moment(timeline=timeline))

	def debug(self, *, timeline=None) -> str:
		"""
		# The display string followed by the true milliseconds since the epoch.
		"""
		return "%s (%s ms from epoch)" %(self.display(timeline=timeline), "{:,}".format(self.milliseconds))

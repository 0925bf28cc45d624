"""
# Primary public module.

# Provides access to &WallClockTime, the process-wide leap second data,
# and the current time.
"""
import time

from .types import WallClockTime
from .convert import Timeline
from .leaps import Table, Adjustment
from .system import SourceError
from . import system

__shortname__ = 'libwallclock'

#: The point at true millisecond zero, 1970-01-01T00:00:00Z.
epoch = WallClockTime(0)

def now(*, timeline=None, clock=time.time_ns, scale=1000000) -> WallClockTime:
	"""
	# Get the current time according to the system's real clock.

	# The system clock, like the pseudo timeline, does not count leap seconds.
	"""
	return WallClockTime.from_pseudo_milliseconds(clock() // scale, timeline=timeline)

def leap_seconds(*, timeline=None):
	"""
	# Get the leap second adjustments of &timeline, or of the process-wide timeline.
	"""
	if timeline is None:
		timeline = system.timeline()
	return timeline.adjustments

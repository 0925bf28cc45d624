"""
# [ About ]

# Leap second aware points in time for scheduling logic that needs to reason
# about elapsed real time.

# Unix timestamps and &datetime.datetime silently omit leap seconds; the
# difference between two of them is short by the number of leap seconds that
# were inserted in between. This package distinguishes two timelines:

# /true/
	# Every elapsed SI millisecond is counted, including those inside leap seconds.
# /pseudo/
	# The conventional calendar representation. It stands still while a leap
	# second elapses.

# &.types.WallClockTime is a point on the true timeline. Arithmetic and
# comparisons never consult the leap second table; only conversions from and to
# calendar forms do.

#!python
	from datetime import datetime, timezone
	from wallclock.time import library as libwallclock

	a = libwallclock.WallClockTime.from_approximate_calendar_moment(
		datetime(2016, 12, 31, 23, 59, 59, tzinfo=timezone.utc)
	)
	b = a.add_true_milliseconds(1000)
	print(b) # 2016-12-31 23:59:60.000Z
	print(b.to_approximate_calendar_moment()) # 2017-01-01 00:00:00+00:00

# [ Leap Second Data ]

# The table of leap seconds is read from an IERS `leap-seconds.list` once per
# process, on first use. See &.system for how the list is located; setting the
# `LEAPSECONDS` environment variable selects a specific file.

# Only positive leap seconds are supported.
"""

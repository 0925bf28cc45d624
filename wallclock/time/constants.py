"""
# Constants relating the timelines to the calendar and to the leap second list.

# [ Elements ]

# /unix_epoch/
	# Calendar moment at which both the true and the pseudo timeline are zero.
# /ntp_epoch/
	# Datum of the timestamps in IERS leap second lists; 1900-01-01T00:00:00Z.
# /ntp_unix_delta/
	# Seconds from &ntp_epoch to &unix_epoch.
# /leap_second/
	# Length of a leap second on the true timeline, in milliseconds.
# /tai_utc_base/
	# TAI-UTC skew, in milliseconds, present before any leap second was inserted.
	# Subtracted from the offsets in the leap second list.
"""
import datetime

utc = datetime.timezone.utc
unix_epoch = datetime.datetime(1970, 1, 1, tzinfo=utc)
ntp_epoch = datetime.datetime(1900, 1, 1, tzinfo=utc)
ntp_unix_delta = 2208988800

milliseconds_in_second = 1000
microseconds_in_millisecond = 1000
millisecond = datetime.timedelta(milliseconds=1)

leap_second = 1 * milliseconds_in_second
tai_utc_base = 10 * milliseconds_in_second

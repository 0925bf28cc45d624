"""
# Calendar display of &datetime.datetime moments with millisecond precision.

# Moments are rendered in UTC using the model `yyyy-MM-dd HH:mm:ss.fffZ`.
"""
from . import constants

display_model = "{0:04}-{1:02}-{2:02} {3:02}:{4:02}:{5:02}.{6:03}Z"

#: Value of the seconds field while a leap second is being displayed.
leap_second_field = 60

def display(moment, *, leap=False, model=display_model, utc=constants.utc) -> str:
	"""
	# Render &moment using the &display_model.

	# Aware moments are converted to UTC first; naive moments are presumed to be in UTC.
	# Microseconds are truncated to milliseconds.

	# [ Parameters ]
	# /moment/
		# The &datetime.datetime to render.
	# /leap/
		# Render the seconds field as `60`. Used for the second, 23:59:59, that
		# precedes the pseudo instant following a leap second.
	"""
	if moment.tzinfo is not None:
		moment = moment.astimezone(utc)

	second = leap_second_field if leap else moment.second
	return model.format(
		moment.year, moment.month, moment.day,
		moment.hour, moment.minute, second,
		moment.microsecond // constants.microseconds_in_millisecond,
	)

def truncate(moment):
	"""
	# Remove the subsecond part of &moment.
	"""
	return moment.replace(microsecond=0)

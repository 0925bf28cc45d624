"""
# Read IERS leap second lists, `leap-seconds.list`.

# The list is line oriented. `#` introduces a comment, either as the first
# character of a line or trailing a record. Records are two integer fields
# separated by tabs: the NTP timestamp, seconds since 1900-01-01T00:00:00Z,
# at which the offset takes effect and the TAI-UTC offset in whole seconds.

#!text
	#$	3960835200
	#@	3991593600
	2272060800	10	# 1 Jan 1972
	2287785600	11	# 1 Jul 1972

# Two comment forms carry metadata: `#$` is the time of the list's last update
# and `#@` is its expiration; both are NTP timestamps.

# ! WARNING:
	# This module is intended for internal use by &.leaps and &.system.
"""
import logging
import collections

from . import constants

log = logging.getLogger(__name__)

comment = '#'
updated_marker = '#$'
expiration_marker = '#@'

contents = collections.namedtuple('contents', (
	'records',
	'updated',
	'expiration',
))

def unix_milliseconds(ntp_seconds, delta=constants.ntp_unix_delta, scale=constants.milliseconds_in_second):
	"""
	# Convert an NTP timestamp in seconds to milliseconds since the Unix epoch.
	"""
	return (ntp_seconds - delta) * scale

def _metadata(line):
	fields = line[2:].split()
	if len(fields) != 1:
		return None
	try:
		return int(fields[0])
	except ValueError:
		return None

def parse(lines, source=None):
	"""
	# Extract the records and metadata from the given &lines.

	# Returns a &contents tuple whose `records` is a list of
	# `(ntp_seconds, tai_utc_seconds)` pairs in the order they were read.
	# `updated` and `expiration` are NTP timestamps or &None when absent.

	# Lines that are not comments, not blank, and do not consist of two integer
	# fields are logged as warnings and skipped.

	# [ Parameters ]
	# /lines/
		# Iterable of strings; usually an open text file.
	# /source/
		# Identifier of the list used in log messages.
	"""
	records = []
	updated = expiration = None

	for lineno, line in enumerate(lines, 1):
		if line.startswith(comment):
			if line.startswith(updated_marker):
				updated = _metadata(line)
			elif line.startswith(expiration_marker):
				expiration = _metadata(line)
			continue

		# Trailing comment.
		record = line.split(comment, 1)[0]
		if not record.strip():
			continue

		fields = record.split()
		if len(fields) != 2:
			log.warning("unexpected line in leap second list %s:%d: %r", source, lineno, line.rstrip('\r\n'))
			continue

		try:
			ntp_seconds, tai_utc = int(fields[0]), int(fields[1])
		except ValueError:
			log.warning("non-integer field in leap second list %s:%d: %r", source, lineno, line.rstrip('\r\n'))
			continue

		records.append((ntp_seconds, tai_utc))

	return contents(records, updated, expiration)

def read(path):
	"""
	# Parse the leap second list stored at &path.

	# &OSError is raised when the file cannot be opened or read.
	"""
	with open(path, encoding='utf-8') as f:
		return parse(f, source=path)

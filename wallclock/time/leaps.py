"""
# Leap second adjustments and the ordered table used to search them.

# An &Adjustment relates the pseudo timeline, which skips leap seconds, to the
# true timeline, which counts them. The &Table holds the adjustments in the
# order of both timelines and provides the lookups used by &.convert.Timeline.
"""
import bisect
import logging

from . import constants
from . import iers

log = logging.getLogger(__name__)

class Adjustment(tuple):
	"""
	# A single leap second and the total adjustment in effect once it has elapsed.

	# Constructed from a tuple of the form: `(pseudo_start, true_start, cumulative)`.
	"""
	__slots__ = ()

	@property
	def pseudo_start(self) -> int:
		"""
		# The pseudo millisecond at which the adjustment is in effect.
		# The pseudo timeline does not experience the leap second, so by this
		# point it has fully elapsed.
		"""
		return self[0]

	@property
	def true_start(self) -> int:
		"""
		# The true millisecond at which the leap second begins.
		# The pseudo timeline is frozen from here until &true_stop.
		"""
		return self[1]

	@property
	def cumulative(self) -> int:
		"""
		# Milliseconds added by this leap second and all prior ones.
		"""
		return self[2]

	@property
	def true_stop(self) -> int:
		"""
		# The true millisecond immediately following the leap second.
		"""
		return self[1] + constants.leap_second

	def contains(self, true:int) -> bool:
		"""
		# Whether the true millisecond, &true, is inside the leap second.
		"""
		return self[1] <= true < self[1] + constants.leap_second

	def __repr__(self):
		return '<%s(pseudo=%d, true=%d, +%d)>' %(
			self.__class__.__name__, self[0], self[1], self[2]
		)

	@classmethod
	def from_pseudo_start(Class, pseudo_start, cumulative, duration=constants.leap_second):
		"""
		# Construct the adjustment whose leap second elapses at &pseudo_start.
		"""
		return Class((pseudo_start, pseudo_start + cumulative - duration, cumulative))

	@classmethod
	def from_list_record(Class, ntp_seconds, tai_utc_seconds,
			scale=constants.milliseconds_in_second,
			base=constants.tai_utc_base,
		):
		"""
		# Construct an adjustment from a `(ntp_seconds, tai_utc_seconds)` pair
		# read from an IERS leap second list.
		"""
		return Class.from_pseudo_start(
			iers.unix_milliseconds(ntp_seconds),
			(tai_utc_seconds * scale) - base,
		)

class Table(object):
	"""
	# Immutable, ordered sequence of &Adjustment instances.

	# Construction checks that the adjustments ascend on both timelines and that each
	# one adds exactly one leap second to its predecessor; &ValueError is raised otherwise.
	# Negative leap seconds are not supported and are rejected by the same check.

	# [ Properties ]
	# /adjustments/
		# The tuple of &Adjustment instances.
	# /pseudo_starts/
		# The &Adjustment.pseudo_start of each adjustment; searched by &select_pseudo.
	# /true_starts/
		# The &Adjustment.true_start of each adjustment; searched by &select_true.
	# /updated/
		# Pseudo millisecond of the source list's last update, or &None.
	# /expiration/
		# Pseudo millisecond at which the source list expires, or &None.
	# /source/
		# Identifier of the list the table was read from, or &None.
	"""
	__slots__ = ('adjustments', 'pseudo_starts', 'true_starts', 'updated', 'expiration', 'source')

	def __init__(self, adjustments, updated=None, expiration=None, source=None):
		adjustments = tuple(adjustments)
		self.check(adjustments)

		self.adjustments = adjustments
		self.pseudo_starts = tuple(x.pseudo_start for x in adjustments)
		self.true_starts = tuple(x.true_start for x in adjustments)
		self.updated = updated
		self.expiration = expiration
		self.source = source

	@staticmethod
	def check(adjustments, step=constants.leap_second):
		"""
		# Raise &ValueError if &adjustments do not describe a sequence of positive
		# leap seconds in ascending order.
		"""
		previous = None
		for x in adjustments:
			if previous is None:
				if x.cumulative <= 0 or x.cumulative % step != 0:
					raise ValueError("first adjustment is not a positive number of leap seconds: %r" %(x,))
			else:
				if x.pseudo_start <= previous.pseudo_start or x.true_start <= previous.true_start:
					raise ValueError("adjustments are not in ascending order: %r follows %r" %(x, previous))
				if x.cumulative - previous.cumulative != step:
					raise ValueError("adjustment does not add a single leap second: %r follows %r" %(x, previous))
			previous = x

	def __repr__(self):
		return '<%s: %s[%d]>' %(self.__class__.__name__, self.source, len(self.adjustments))

	def __len__(self):
		return len(self.adjustments)

	def __iter__(self):
		return iter(self.adjustments)

	def __getitem__(self, index):
		return self.adjustments[index]

	def select_pseudo(self, pseudo:int, search=bisect.bisect_right):
		"""
		# Get the last adjustment whose pseudo start is at or before &pseudo.
		# &None when &pseudo precedes every adjustment.
		"""
		idx = search(self.pseudo_starts, pseudo) - 1
		if idx < 0:
			return None
		return self.adjustments[idx]

	def select_true(self, true:int, search=bisect.bisect_right):
		"""
		# Get the last adjustment whose true start is at or before &true.
		# &None when &true precedes every adjustment.
		"""
		idx = search(self.true_starts, true) - 1
		if idx < 0:
			return None
		return self.adjustments[idx]

	@classmethod
	def from_list(Class, contents, source=None, unix=iers.unix_milliseconds):
		"""
		# Construct a table from the &iers.contents of a leap second list.

		# Records whose offset equals the base TAI-UTC skew mark the start of the
		# leap second era rather than a leap second and are not included.
		"""
		adjustments = []
		for ntp_seconds, tai_utc_seconds in contents.records:
			x = Adjustment.from_list_record(ntp_seconds, tai_utc_seconds)
			if x.cumulative == 0:
				log.debug("ignoring base offset record in %s at %d ms on the pseudo timeline", source, x.pseudo_start)
				continue

			log.debug(
				"leap second adjustment starting from %d ms on the pseudo timeline is %d ms",
				x.pseudo_start, x.cumulative
			)
			adjustments.append(x)

		updated = contents.updated
		if updated is not None:
			updated = unix(updated)

		expiration = contents.expiration
		if expiration is not None:
			expiration = unix(expiration)

		return Class(adjustments, updated=updated, expiration=expiration, source=source)

	@classmethod
	def open(Class, path):
		"""
		# Read the leap second list at &path and construct its table.
		"""
		log.debug("loading leap second list %s", path)
		return Class.from_list(iers.read(path), source=path)

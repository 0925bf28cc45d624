"""
# Location of the leap second list and the process-wide &timeline.

# The list is located using, in order:

# - the path in the `LEAPSECONDS` environment variable,
# - the list packaged with the project,
# - the list installed with the system's zone information.

# &timeline constructs the default &.convert.Timeline on first use and
# returns the same instance afterwards. &.types.WallClockTime operations
# use it whenever an explicit timeline is not given.
"""
import os
import os.path
import logging
import threading

from . import leaps
from . import convert

log = logging.getLogger(__name__)

environ = 'LEAPSECONDS'
packaged = os.path.join(os.path.dirname(__file__), 'data', 'leap-seconds.list')
installed = '/usr/share/zoneinfo/leap-seconds.list'

class SourceError(Exception):
	"""
	# The leap second list could not be located or read.
	"""

def locate(environment=os.environ, candidates=(packaged, installed), exists=os.path.exists) -> str:
	"""
	# Identify the path of the leap second list to load.

	# An explicitly configured path that does not exist is an error;
	# the remaining candidates are not consulted.
	"""
	path = environment.get(environ)
	if path:
		if not exists(path):
			raise SourceError("leap second list configured by %s does not exist: %s" %(environ, path))
		return path

	for path in candidates:
		if exists(path):
			return path

	raise SourceError("no leap second list found in: " + ', '.join(candidates))

def load(path=None, Table=leaps.Table, Timeline=convert.Timeline):
	"""
	# Read the leap second list at &path, or the one identified by &locate,
	# and construct its &.convert.Timeline.
	"""
	if path is None:
		path = locate()

	try:
		table = Table.open(path)
	except (OSError, ValueError) as err:
		raise SourceError("could not load leap second list: %s" %(path,)) from err

	log.debug("loaded %d leap second adjustments from %s", len(table), path)
	return Timeline(table)

class Once(object):
	"""
	# Callable constructing a value on its first invocation and returning
	# that value on all subsequent invocations.

	# Concurrent first invocations are serialized so that the &constructor runs once.
	# If the &constructor raises, nothing is stored and the next invocation tries again.
	"""
	__slots__ = ('constructor', '_value', '_lock')
	_unset = object()

	def __init__(self, constructor, Lock=threading.Lock):
		self.constructor = constructor
		self._value = self._unset
		self._lock = Lock()

	@property
	def ready(self) -> bool:
		"""
		# Whether the value has been constructed.
		"""
		return self._value is not self._unset

	def __call__(self):
		value = self._value
		if value is not self._unset:
			return value

		with self._lock:
			if self._value is self._unset:
				self._value = self.constructor()
			return self._value

timeline = Once(load)

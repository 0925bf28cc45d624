"""
# Log sample conversions across the leap second inserted at the end of 2016.

# Compares the true difference between two calendar moments with the one
# reported by &datetime, then walks through the leap second in 200
# millisecond steps showing the true and calendar forms of each instant.
"""
import sys
import argparse
import logging
import datetime

from .. import format
from .. import types

log = logging.getLogger(__name__)

_LOG_LEVELS = {
	'DEBUG': logging.DEBUG,
	'INFO': logging.INFO,
	'WARNING': logging.WARNING,
	'ERROR': logging.ERROR,
}

def demonstrate(moment_a, moment_b, *, timeline=None, span=3000, step=200):
	wct_a = types.WallClockTime.from_approximate_calendar_moment(moment_a, timeline=timeline)
	wct_b = types.WallClockTime.from_approximate_calendar_moment(moment_b, timeline=timeline)

	true_difference = (wct_b - wct_a) / datetime.timedelta(milliseconds=1)
	calendar_difference = (moment_b - moment_a) / datetime.timedelta(milliseconds=1)

	log.info(
		"Between %s and %s there are %d milliseconds in reality but datetime says there are %d.",
		format.display(moment_a), format.display(moment_b), true_difference, calendar_difference
	)

	log.info(
		"1 second before %s was really %s but datetime thinks it was %s.",
		format.display(moment_b),
		wct_b.subtract_true_milliseconds(1000).display(timeline=timeline),
		format.display(moment_b - datetime.timedelta(milliseconds=1000)),
	)

	log.info("What is time?")
	for after in range(0, span, step):
		real = wct_a.add_true_milliseconds(after)
		moment = real.to_approximate_calendar_moment(timeline=timeline)
		log.info("%s in real time is %s in datetime time", real.display(timeline=timeline), format.display(moment))

def main(argv=None):
	parser = argparse.ArgumentParser(prog="wallclock-demo")
	parser.add_argument("--log-level", default="INFO", choices=sorted(_LOG_LEVELS.keys()))
	args = parser.parse_args(argv)

	logging.basicConfig(
		level=_LOG_LEVELS[str(args.log_level)],
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)

	utc = datetime.timezone.utc
	demonstrate(
		datetime.datetime(2016, 12, 31, 23, 59, 59, tzinfo=utc),
		datetime.datetime(2017, 1, 1, 0, 0, 0, tzinfo=utc),
	)

if __name__ == '__main__':
	main(sys.argv[1:])

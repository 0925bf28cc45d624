"""
# Print the adjustments of a leap second list.

# Without arguments, the list identified by &..system.locate is used.
"""
import sys
import datetime

from .. import constants
from .. import format
from .. import system

def print_adjustments(path=None, out=sys.stdout, epoch=constants.unix_epoch):
	timeline = system.load(path)
	table = timeline.table

	out.write("%s: %d leap seconds\n" %(table.source, len(table)))
	for x in table:
		moment = epoch + datetime.timedelta(milliseconds=x.pseudo_start)
		out.write("%s\t%d\t%d\t%d\n" %(format.display(moment), x.pseudo_start, x.true_start, x.cumulative))

	if table.expiration is not None:
		moment = epoch + datetime.timedelta(milliseconds=table.expiration)
		out.write("expires: %s\n" %(format.display(moment),))

if __name__ == '__main__':
	print_adjustments(*sys.argv[1:2])

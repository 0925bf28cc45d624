from .. import constants as module

def test_ntp_unix_delta(test):
	test/module.ntp_unix_delta == (module.unix_epoch - module.ntp_epoch).total_seconds()

def test_units(test):
	test/module.millisecond.total_seconds() == 0.001
	test/module.leap_second == 1000
	test/(module.tai_utc_base // module.leap_second) == 10

def test_epochs_aware(test):
	test/module.unix_epoch.utcoffset().total_seconds() == 0
	test/module.ntp_epoch.utcoffset().total_seconds() == 0

if __name__ == '__main__':
	import sys; from ...test import library as libtest
	libtest.execute(sys.modules[__name__])

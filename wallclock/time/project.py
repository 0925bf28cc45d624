identity = 'http://fault.io/project/python/wallclock.time'
name = 'wallclock'
abstract = 'Leap second aware points in time with millisecond precision.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))

"""
# Leap second aware time keeping.

# [ Factors ]

# /time/
	# The true and pseudo timelines, the leap second table relating them,
	# and the &.time.types.WallClockTime point in time.
# /test/
	# Test harness used by the factor test modules.
"""

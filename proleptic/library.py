"""
# Primary public module.

# Provides &Date construction, the leap year rules, and the named reforms:
# &ITALY, &ENGLAND, &JULIAN, and &GREGORIAN.

#!python
	from proleptic import library as libdate

	d = libdate.from_jd(1 << 33)
	assert d.jd() == 1 << 33
	assert libdate.compare(libdate.ITALY, libdate.ENGLAND) == -1
	assert libdate.leap(2000) == libdate.gregorian_leap(2000)
"""
from .core import Error, InvalidInput
from .eternal import Infinity, always, never
from .reform import (
	Reform,
	GREGORIAN, ITALY, ENGLAND, JULIAN,
	is_gregorian_at, julian_leap, gregorian_leap, leap,
	jd_from_date,
)
from .types import Date
from . import eternal
from . import reform as libreform
from . import types

__shortname__ = 'libdate'

def from_jd(n, reform=ITALY) -> Date:
	"""
	# Construct a &Date from the Julian Day Number &n.
	"""
	return Date.from_jd(n, reform)

def compare(former, latter) -> int:
	"""
	# Compare two Dates, two reforms, or two points of the day continuum.

	# Returns `-1`, `0`, or `1`. When either operand is a &Date, both must be.
	# When either operand is a &Reform, the other may be a &Reform or a bare
	# threshold, an &int or &Infinity, as accepted by &reform.compare.
	# &InvalidInput is raised for any other operand.
	"""
	if isinstance(former, Date) or isinstance(latter, Date):
		return types.compare(former, latter)
	elif isinstance(former, Reform) or isinstance(latter, Reform):
		return libreform.compare(former, latter)
	else:
		return eternal.compare(former, latter)

"""
Proleptic Gregorian calendar functions and data.

Years are numbered astronomically: year zero is 1 BC and is a leap year.
"""
import operator
from . import core
from . import calendar as callib

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: Julian Day Number of the first day of year zero, 0000-01-01.
datum = 1721060

### Gregorian Cycle
cycle = (
	'gregorian-cycle', 1, (
		# First century; normal leap cycle throughout.
		('first-century', 25, callib.leap_cycle),

		# Subsequent three centuries in the cycle.
		# First year in century is leap exception.
		('centuries', 3, (
			('first-year-exception', 4, callib.common_year),
			('regular-cycle', 24, callib.leap_cycle),
		)),
	)
)

calendar = callib.aggregate(cycle)

def resolve_by_months(months,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_months, _select_days), months, _calendar)

#: Total number of months in a Gregorian cycle.
months_in_cycle = callib.months_in_year * years_in_cycle

#: Total number of days in a Gregorian cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	Given a gregorian calendar year, determine whether it is a leap year.
	"""
	core.integer(y, 'year')
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_from_month(months, _resolver=resolve_by_months):
	"""
	Convert the given months to the number of Earth-days leading up to the
	Gregorian month.
	"""
	cycles, day_of_cycle, moy, _d = _resolver(months)
	return (cycles * days_in_cycle) + day_of_cycle

def days_from_date(date):
	"""
	Convert a Gregorian date in the common form, (year, month, day), to the number
	of days since 0000-01-01.

	Out of range months and days overflow onto the following fields.
	"""
	year, month, day = date
	core.integer(year, 'year')
	core.integer(month, 'month')
	core.integer(day, 'day')
	return days_from_month((month - 1) + (year * callib.months_in_year)) + (day - 1)

def jd_from_date(date):
	"""
	Convert a proleptic Gregorian (year, month, day) into a Julian Day Number.
	"""
	return days_from_date(date) + datum

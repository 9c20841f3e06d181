"""
Proleptic Julian calendar functions and data.

The Julian calendar repeats every four years with no century exception.
Years are numbered astronomically: year zero is 1 BC and is a leap year.
"""
import operator
from . import core
from . import calendar as callib

#: number of years in a julian cycle.
years_in_cycle = 4

#: Julian Day Number of the first day of year zero, 0000-01-01.
datum = 1721058

cycle = ('julian-cycle', 1, callib.leap_cycle)
calendar = callib.aggregate(cycle)

def resolve_by_months(months,
	_select_months = operator.itemgetter(0),
	_select_days = operator.itemgetter(1),
	_calendar = calendar,
):
	return callib.resolve((_select_months, _select_days), months, _calendar)

#: Total number of months in a Julian cycle.
months_in_cycle = callib.months_in_year * years_in_cycle

#: Total number of days in a Julian cycle.
days_in_cycle = calendar[-1][1]

def year_is_leap(y):
	"""
	Given a julian calendar year, determine whether it is a leap year.
	"""
	core.integer(y, 'year')
	return y % 4 == 0

def days_from_month(months, _resolver=resolve_by_months):
	cycles, day_of_cycle, moy, _d = _resolver(months)
	return (cycles * days_in_cycle) + day_of_cycle

def days_from_date(date):
	"""
	Convert a Julian date, (year, month, day), to the number of days since 0000-01-01.
	"""
	year, month, day = date
	core.integer(year, 'year')
	core.integer(month, 'month')
	core.integer(day, 'day')
	return days_from_month((month - 1) + (year * callib.months_in_year)) + (day - 1)

def jd_from_date(date):
	"""
	Convert a proleptic Julian (year, month, day) into a Julian Day Number.
	"""
	return days_from_date(date) + datum

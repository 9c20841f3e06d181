"""
"""
import itertools
from .. import core
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/False == gregorian.year_is_leap(1998)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(0)
	test/False == gregorian.year_is_leap(-100)
	test/True == gregorian.year_is_leap(-400)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1600, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_cycle_totals(test):
	test/gregorian.days_in_cycle == 146097
	test/gregorian.months_in_cycle == 4800

dfm_io_samples = [
	(0, 0),
	(1, 31),
	(2, 60),
	(12, 366),
	(-1, -31),
	(-12, -365),
]

def test_days_from_month(test):
	for month, days in dfm_io_samples:
		test/days == gregorian.days_from_month(month)

date_io_samples = [
	# whole cycle checks
	((2400,1,1), 6 * gregorian.days_in_cycle),
	((2000,1,1), 5 * gregorian.days_in_cycle),
	((1600,1,1), 4 * gregorian.days_in_cycle),
	((400,1,1), gregorian.days_in_cycle),
	((0,1,1), 0),
	((0,1,2), 1),
	((400,1,3), 2 + gregorian.days_in_cycle),
	((-400,1,1), -gregorian.days_in_cycle),
	((0,3,1), 31 + 29),
	((100,3,1), (25 * 1461) + 31 + 28),
]

def test_days_from_date(test):
	for date, days in date_io_samples:
		test/days == gregorian.days_from_date(date)

def test_days_from_date_overflow(test):
	# Excess fields overflow onto the following units.
	test/gregorian.days_from_date((1999, 13, 1)) == gregorian.days_from_date((2000, 1, 1))
	test/gregorian.days_from_date((2000, 2, 30)) == gregorian.days_from_date((2000, 3, 1))
	test/gregorian.days_from_date((2000, 1, 0)) == gregorian.days_from_date((1999, 12, 31))

jd_samples = [
	((2000, 1, 1), 2451545),
	((1970, 1, 1), 2440588),
	((1858, 11, 17), 2400001),
	((1582, 10, 15), 2299161),
	((1752, 9, 14), 2361222),
	((-4713, 11, 24), 0),
]

def test_jd_from_date(test):
	for date, jd in jd_samples:
		test/jd == gregorian.jd_from_date(date)

def test_invalid_fields(test):
	with test/core.InvalidInput as exc:
		gregorian.days_from_date((2000.0, 1, 1))
	with test/core.InvalidInput as exc:
		gregorian.jd_from_date((2000, '1', 1))
	with test/core.InvalidInput as exc:
		gregorian.year_is_leap(None)

if __name__ == '__main__':
	import sys; from .. import harness
	harness.execute(sys.modules[__name__])

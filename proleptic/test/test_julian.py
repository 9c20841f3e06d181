"""
"""
from .. import core
from .. import julian
from .. import gregorian

def test_year_is_leap(test):
	for y in (1900, 2000, 1700, 0, -4, 4, 1996, 1 << 40):
		test/julian.year_is_leap(y) == True
	for y in (1999, 1, -1, 1582, 3):
		test/julian.year_is_leap(y) == False

def test_cycle_totals(test):
	test/julian.days_in_cycle == 1461
	test/julian.months_in_cycle == 48

def test_days_from_date(test):
	test/julian.days_from_date((0, 1, 1)) == 0
	test/julian.days_from_date((4, 1, 1)) == 1461
	test/julian.days_from_date((-4, 1, 1)) == -1461
	test/julian.days_from_date((1, 1, 1)) == 366
	test/julian.days_from_date((1, 3, 1)) == 366 + 31 + 28
	test/julian.days_from_date((0, 3, 1)) == 31 + 29

jd_samples = [
	((-4712, 1, 1), 0),
	((1582, 10, 4), 2299160),
	((1752, 9, 2), 2361221),
	((2000, 1, 1), 2451558),
	((1, 1, 1), 1721424),
]

def test_jd_from_date(test):
	for date, jd in jd_samples:
		test/jd == julian.jd_from_date(date)

def test_calendar_drift(test):
	# The calendars agree during the third century and drift apart by
	# a day for each skipped Gregorian century leap.
	test/julian.jd_from_date((200, 3, 1)) == gregorian.jd_from_date((200, 3, 1))
	test/(julian.jd_from_date((1582, 10, 5)) - gregorian.jd_from_date((1582, 10, 5))) == 10
	test/(julian.jd_from_date((1752, 9, 3)) - gregorian.jd_from_date((1752, 9, 3))) == 11
	test/(julian.jd_from_date((2000, 1, 1)) - gregorian.jd_from_date((2000, 1, 1))) == 13

def test_invalid_fields(test):
	with test/core.InvalidInput as exc:
		julian.jd_from_date((1582, 10, 4.5))
	with test/core.InvalidInput as exc:
		julian.year_is_leap('4')

if __name__ == '__main__':
	import sys; from .. import harness
	harness.execute(sys.modules[__name__])

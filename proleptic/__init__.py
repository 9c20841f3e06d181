"""
# Proleptic calendar date core.

# Dates are Julian Day Numbers, built on the built-in &int so that day counts have no
# practical bound. A &.reform.Reform decides whether a day is interpreted using the
# Julian or the Gregorian calendar; the named reforms are:

# - &.reform.GREGORIAN, always Gregorian.
# - &.reform.ITALY, Gregorian from 1582-10-15. The default.
# - &.reform.ENGLAND, Gregorian from 1752-09-14.
# - &.reform.JULIAN, never Gregorian.

# The surface functionality is provided by &.library:

#!python
	from proleptic import library as libdate

	d = libdate.from_jd(2451545) # 2000-01-01
	assert d.is_gregorian()
	assert d.julian() == d

	assert libdate.julian_leap(1900)
	assert not libdate.gregorian_leap(1900)
	assert libdate.leap(1500) # Julian under ITALY

# Ordering is defined by the day number alone; two Dates referring to the same day
# are equal regardless of their reform. The unbounded thresholds are the eternals
# &.eternal.always and &.eternal.never, which are ordered before and after every integer.

# Field extraction, formatting, and time of day are not provided.
"""
__pkg_bottom__ = True

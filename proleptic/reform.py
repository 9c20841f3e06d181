"""
# Calendar reform thresholds.

# A &Reform designates the first Julian Day Number interpreted using the
# Gregorian calendar. Days before the threshold are interpreted using the
# Julian calendar. The unbounded thresholds, &.eternal.always and
# &.eternal.never, describe calendars that are always Gregorian and never
# Gregorian respectively.

# [ Elements ]
# /GREGORIAN/
	# Always Gregorian; the threshold is &.eternal.always.
# /ITALY/
	# 1582-10-15, the first day of the Gregorian calendar's earliest civil adoption.
# /ENGLAND/
	# 1752-09-14, the first Gregorian day in Great Britain and its colonies.
# /JULIAN/
	# Always Julian; the threshold is &.eternal.never.
"""
from . import core
from . import eternal
from . import julian
from . import gregorian

class Reform(object):
	"""
	# The threshold at which dates switch from Julian to Gregorian interpretation.

	# [ Properties ]
	# /threshold/
		# The first Gregorian day number, or an &eternal.Infinity.
	"""
	__slots__ = ('threshold',)
	threshold: object

	def __init__(self, threshold):
		if not isinstance(threshold, eternal.Infinity):
			core.integer(threshold, 'threshold')
		self.threshold = threshold

	def __setattr__(self, name, value):
		if hasattr(self, name):
			raise AttributeError("reforms are immutable")
		super().__setattr__(name, value)

	@classmethod
	def at(Class, jd):
		"""
		# Construct a reform whose first Gregorian day is &jd.
		"""
		return Class(core.integer(jd, 'jd'))

	@classmethod
	def of(Class, value):
		"""
		# Interpret &value as a &Reform.

		# &Reform instances are returned as-is; integers and eternals are
		# used as the threshold.
		"""
		if isinstance(value, Class):
			return value
		return Class(value)

	@classmethod
	def select(Class, identifier:str):
		"""
		# Resolve a named reform, case insensitively, or a decimal day number.
		"""
		if not isinstance(identifier, str):
			raise core.InvalidInput('reform identifier', identifier)

		key = identifier.strip().lower()
		if key in names:
			return names[key]

		try:
			jd = int(key, 10)
		except ValueError:
			raise core.InvalidInput('reform identifier', identifier) from None

		return Class.at(jd)

	def is_finite(self) -> bool:
		return not isinstance(self.threshold, eternal.Infinity)

	def __repr__(self):
		for name, r in names.items():
			if r == self:
				return '{0}.{1}'.format(__name__, name.upper())
		return '{0}.{1}.at({2!r})'.format(__name__, self.__class__.__name__, self.threshold)

	def __hash__(self):
		return hash(self.threshold)

	def __eq__(self, operand):
		if isinstance(operand, Reform):
			return compare(self, operand) == 0
		return False

	def __ne__(self, operand):
		return not self.__eq__(operand)

	def __lt__(self, operand):
		return compare(self, operand) < 0

	def __le__(self, operand):
		return compare(self, operand) <= 0

	def __gt__(self, operand):
		return compare(self, operand) > 0

	def __ge__(self, operand):
		return compare(self, operand) >= 0

GREGORIAN = Reform(eternal.always)
ITALY = Reform(2299161)
ENGLAND = Reform(2361222)
JULIAN = Reform(eternal.never)

names = {
	'italy': ITALY,
	'england': ENGLAND,
	'julian': JULIAN,
	'gregorian': GREGORIAN,
}

def threshold(value, parameter='reform'):
	"""
	# Identify the threshold of a &Reform, &int, or &eternal.Infinity.
	"""
	if isinstance(value, Reform):
		return value.threshold
	if isinstance(value, eternal.Infinity):
		return value
	return core.integer(value, parameter)

def compare(former, latter):
	"""
	# Compare two reforms by their thresholds returning `-1`, `0`, or `1`.
	"""
	return eternal.compare(threshold(former, 'former'), threshold(latter, 'latter'))

def is_gregorian_at(reform, jd) -> bool:
	"""
	# Whether the day &jd is interpreted using the Gregorian calendar under &reform.
	"""
	return eternal.compare(core.integer(jd, 'jd'), threshold(reform)) >= 0

def calendar_of(date, reform=ITALY):
	"""
	# Select the calendar module, &gregorian or &julian, interpreting the civil &date.

	# The Gregorian reading decides: when it falls before the threshold the
	# Julian calendar is used. Dates in the reform's gap resolve to the Julian
	# interpretation.
	"""
	if is_gregorian_at(reform, gregorian.jd_from_date(date)):
		return gregorian
	return julian

def jd_from_date(date, reform=ITALY):
	"""
	# Convert a civil (year, month, day) into a Julian Day Number under &reform.
	"""
	return calendar_of(date, reform).jd_from_date(date)

def julian_leap(year) -> bool:
	"""
	# Whether &year is a leap year in the proleptic Julian calendar.
	"""
	return julian.year_is_leap(year)

def gregorian_leap(year) -> bool:
	"""
	# Whether &year is a leap year in the proleptic Gregorian calendar.
	"""
	return gregorian.year_is_leap(year)

def leap(year, reform=ITALY) -> bool:
	"""
	# Whether &year is a leap year in the calendar interpreting its first day
	# under &reform.
	"""
	return calendar_of((core.integer(year, 'year'), 1, 1), reform).year_is_leap(year)

"""
# Julian Day Number based point in time type.

#!python
	d = types.Date.from_jd(2299161)
	assert d.is_gregorian()
	assert d.julian().is_julian()

	# Ordering ignores the reform.
	assert d == d.england()
	assert d.elapse(1) > d.julian()

# [ Elements ]

# /Date/
	# An immutable day number paired with the &reform.Reform used to interpret it.
"""
from . import core
from . import reform as libreform

#: Julian Day Number of the Modified Julian Day epoch, 1858-11-17.
mjd_epoch = 2400001

#: Julian Day Number preceding the first Lilian day, 1582-10-15.
ld_epoch = 2299160

class Date(object):
	"""
	# An Earth-day precision point in time identified by its Julian Day Number.

	# Dates are ordered and compared for equality using their day number alone.
	# The &reform only affects the calendar used to interpret the day.

	# Ordering a Date against any other type, by &compare or the `<`, `<=`, `>`,
	# and `>=` operators, raises &core.InvalidInput. Equality does not raise:
	# `date == 0` is &False so Dates remain usable as set members and mapping keys.

	# [ Properties ]
	# /reform/
		# The &reform.Reform deciding between Julian and Gregorian interpretation.
	"""
	__slots__ = ('_jd', 'reform',)
	_jd: int
	reform: libreform.Reform

	def __init__(self, jd, reform=libreform.ITALY):
		self._jd = core.integer(jd, 'jd')
		self.reform = libreform.Reform.of(reform)

	def __setattr__(self, name, value):
		if hasattr(self, name):
			raise AttributeError("Date instances are immutable")
		super().__setattr__(name, value)

	@classmethod
	def from_jd(Class, n, reform=libreform.ITALY):
		"""
		# Construct a Date from the Julian Day Number &n.

		# [ Parameters ]
		# /n/
			# The day number; any &int.
		# /reform/
			# A &reform.Reform, threshold day number, or &eternal.Infinity.
			# Defaults to &reform.ITALY.
		"""
		return Class(n, reform)

	@classmethod
	def of(Class, *, date, reform=libreform.ITALY):
		"""
		# Construct a Date from a civil (year, month, day) interpreted under &reform.
		"""
		reform = libreform.Reform.of(reform)
		return Class(libreform.jd_from_date(date, reform), reform)

	@staticmethod
	def valid_jd(n) -> bool:
		"""
		# Whether &n can be used as a Julian Day Number.
		"""
		return isinstance(n, int) and not isinstance(n, bool)

	def jd(self) -> int:
		return self._jd

	def mjd(self) -> int:
		"""
		# The Modified Julian Day number.
		"""
		return self._jd - mjd_epoch

	def ld(self) -> int:
		"""
		# The Lilian day number; day one is 1582-10-15.
		"""
		return self._jd - ld_epoch

	def is_gregorian(self) -> bool:
		return libreform.is_gregorian_at(self.reform, self._jd)

	def is_julian(self) -> bool:
		return not self.is_gregorian()

	def new_reform(self, reform):
		"""
		# Construct a Date for the same day interpreted under &reform.
		"""
		return self.__class__(self._jd, reform)

	def italy(self):
		return self.new_reform(libreform.ITALY)

	def england(self):
		return self.new_reform(libreform.ENGLAND)

	def julian(self):
		return self.new_reform(libreform.JULIAN)

	def gregorian(self):
		return self.new_reform(libreform.GREGORIAN)

	def elapse(self, days):
		"""
		# Construct the Date &days after this one, keeping the reform.
		"""
		return self.__class__(self._jd + core.integer(days, 'days'), self.reform)

	def rollback(self, days):
		"""
		# Construct the Date &days before this one, keeping the reform.
		"""
		return self.__class__(self._jd - core.integer(days, 'days'), self.reform)

	def __add__(self, days):
		if isinstance(days, Date):
			return NotImplemented
		return self.elapse(days)
	__radd__ = __add__

	def __sub__(self, days):
		if isinstance(days, Date):
			return NotImplemented
		return self.rollback(days)

	def compare(self, operand) -> int:
		"""
		# Compare the day numbers of two Dates returning `-1`, `0`, or `1`.

		# &core.InvalidInput is raised when &operand is not a &Date.
		"""
		if not isinstance(operand, Date):
			raise core.unordered(self, operand)
		a = self._jd
		b = operand._jd
		return (a > b) - (a < b)

	def __eq__(self, operand):
		if isinstance(operand, Date):
			return self._jd == operand._jd
		return False

	def __ne__(self, operand):
		return not self.__eq__(operand)

	def __lt__(self, operand):
		return self.compare(operand) < 0

	def __le__(self, operand):
		return self.compare(operand) <= 0

	def __gt__(self, operand):
		return self.compare(operand) > 0

	def __ge__(self, operand):
		return self.compare(operand) >= 0

	def __hash__(self):
		return hash(self._jd)

	def __repr__(self):
		return '{0}.{1}.from_jd({2!r}, {3!r})'.format(
			__name__, self.__class__.__name__, self._jd, self.reform
		)

	def __str__(self):
		return 'JD ' + str(self._jd)

def compare(former, latter) -> int:
	"""
	# Compare two &Date instances returning `-1`, `0`, or `1`.
	"""
	if not isinstance(former, Date):
		raise core.unordered(latter, former)
	return former.compare(latter)

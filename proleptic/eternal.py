"""
# Eternals are the unbounded points of the day continuum. They are used to
# represent thresholds that are never, or always, crossed.

# Only two instances exist: &always, preceding every finite day number, and
# &never, following every finite day number. &Infinity reuses them on
# construction so identity and equality coincide.

# [ Elements ]
# /always/
	# Point at negative infinity.
# /never/
	# Point at positive infinity.
# /compare/
	# Three-way comparison over eternals and integers.
"""
from . import core

# Sorted by index use: -1 is always and 1 is never.
points = (
	None,
	'never',
	'always',
)

instances = None

class Infinity(object):
	"""
	# Directional unbounded day number.

	# [ Properties ]
	# /direction/
		# `-1` for &always, `+1` for &never.
	"""
	__slots__ = ('direction',)
	direction: int

	def __new__(Class, direction):
		core.integer(direction, 'direction')
		if direction > 0:
			return instances[1]
		elif direction < 0:
			return instances[-1]
		raise core.InvalidInput('direction', direction)

	def __setattr__(self, name, value):
		raise AttributeError("eternals are immutable")

	def __neg__(self):
		return instances[-self.direction]

	def __pos__(self):
		return self

	def __abs__(self):
		return instances[1]

	def __float__(self, choice=(0.0, float('inf'), float('-inf'))):
		return choice[self.direction]

	def __hash__(self):
		return hash(float(self))

	def __repr__(self, choice=points):
		return '{0}.{1}'.format(__name__, choice[self.direction])

	def __str__(self, choice=points):
		return choice[self.direction]

	def __eq__(self, operand):
		if isinstance(operand, Infinity):
			return self is operand
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

def _instantiate(direction):
	i = object.__new__(Infinity)
	object.__setattr__(i, 'direction', direction)
	return i

instances = (None, _instantiate(1), _instantiate(-1))
del _instantiate

never = instances[1]
always = instances[-1]

def rank(value, parameter='value', *, isinstance=isinstance):
	"""
	# Map &value onto a pair whose natural tuple order is the order of the continuum.

	# Finite integers rank between &always, `(-1, 0)`, and &never, `(1, 0)`.
	"""
	if isinstance(value, Infinity):
		return (value.direction, 0)
	return (0, core.integer(value, parameter))

def compare(former, latter):
	"""
	# Compare two points of the continuum returning `-1`, `0`, or `1`.

	# Each of &former and &latter must be an &Infinity or an &int;
	# &core.InvalidInput is raised otherwise.
	"""
	a = rank(former, 'former')
	b = rank(latter, 'latter')
	return (a > b) - (a < b)

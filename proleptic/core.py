"""
# Exceptions and boundary checks shared by the calendar modules.

# [ Elements ]
# /Error/
	# Base class of all exceptions raised by the package.
# /InvalidInput/
	# A value that is not an integer was given where a day number or a
	# calendar field was required, or an ordering was requested against
	# an unrelated type.
"""

class Error(Exception):
	"""
	# Base class for proleptic calendar errors.
	"""

class InvalidInput(Error, TypeError):
	"""
	# Malformed value given to a calendar operation.
	"""

	def __init__(self, parameter, value):
		self.parameter = parameter
		self.value = value
		super().__init__(parameter, value)

	def __str__(self):
		return "{0} requires an integer, not {1!r}".format(self.parameter, self.value)

def integer(value, parameter, *, isinstance=isinstance, int=int, bool=bool):
	"""
	# Return &value if it is an &int, otherwise raise &InvalidInput.

	# &bool instances are rejected even though they are &int subclasses.
	"""
	if isinstance(value, int) and not isinstance(value, bool):
		return value
	raise InvalidInput(parameter, value)

def unordered(former, latter):
	"""
	# Construct the &InvalidInput raised when &latter cannot be ordered against &former.
	"""
	return InvalidInput(former.__class__.__name__ + ' comparison', latter)

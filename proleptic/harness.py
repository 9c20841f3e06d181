"""
# Contention based test primitives and a module level runner.

# Test functions receive a &Test and state expectations with the true division operator:

#!python
	def test_leap(test):
		test/True == gregorian.year_is_leap(2000)

		with test/core.InvalidInput as exc:
			gregorian.year_is_leap('1900')

# &execute runs the `test_` functions of a module in source order and raises the
# &Fate of the first failure. The package's `conftest.py` hands &Test instances to pytest.
"""
import operator

class Absurdity(Exception):
	"""
	# A contention that did not hold.
	"""

	symbols = {
		'__eq__': '==', '__ne__': '!=',
		'__lt__': '<', '__gt__': '>',
		'__le__': '<=', '__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter):
		self.operator = operator
		self.former = former
		self.latter = latter
		super().__init__(str(self))

	def __str__(self):
		op = self.symbols.get(self.operator, self.operator)
		return '{0!r} {1} {2!r}'.format(self.former, op, self.latter)

def _contend(name, check):
	def contend(self, operand):
		if not check(self.object, operand):
			raise Absurdity(name, self.object, operand)
		return True
	contend.__name__ = name
	return contend

class Contention(object):
	"""
	# The operand of `test/operand`; comparisons against it raise &Absurdity when false.

	# Used as a context manager, the operand is an exception type that the block must raise.
	"""
	__slots__ = ('object', 'storage')

	def __init__(self, object):
		self.object = object
		self.storage = None

	__eq__ = _contend('__eq__', operator.eq)
	__ne__ = _contend('__ne__', operator.ne)
	__lt__ = _contend('__lt__', operator.lt)
	__gt__ = _contend('__gt__', operator.gt)
	__le__ = _contend('__le__', operator.le)
	__ge__ = _contend('__ge__', operator.ge)
	__mod__ = _contend('__mod__', operator.is_)
	__hash__ = None

	def __enter__(self):
		return (lambda: self.storage)

	def __exit__(self, typ, val, tb):
		if isinstance(val, Fate):
			return False

		self.storage = val
		if not isinstance(val, self.object):
			raise Absurdity("isinstance", self.object, val)
		return True

	def __xor__(self, subject):
		"""
		# Contend that calling &subject raises the operand.
		"""
		with self as exc:
			subject()
		return exc()

	def __lshift__(self, subject):
		"""
		# Contend that &subject is contained by the operand.
		"""
		if subject not in self.object:
			raise Absurdity("__contains__", self.object, subject)
		return True

class Fate(BaseException):
	"""
	# The conclusion of a sealed &Test; `'return'` when it passed, `'fail'` otherwise.
	"""
	line = None

	def __init__(self, content, subtype='fail'):
		super().__init__(content)
		self.content = content
		self.subtype = subtype

	@property
	def negative(self):
		return self.subtype != 'return'

class Test(object):
	"""
	# A test function and, once &seal has been called, its &fate.
	"""
	__slots__ = ('identifier', 'subject', 'fate')

	Absurdity = Absurdity
	Fate = Fate

	def __init__(self, identifier, subject):
		self.identifier = identifier
		self.subject = subject

	def __truediv__(self, object):
		return Contention(object)

	def isinstance(self, *args):
		if not isinstance(*args):
			raise Absurdity("isinstance", *args)

	def fail(self, cause):
		raise Fate(cause)

	def seal(self):
		"""
		# Call the subject with the Test and record the outcome as the &fate.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		try:
			self.subject(self)
		except Fate as fate:
			self.fate = fate
		except Exception as err:
			self.fate = Fate('test raised exception')
			self.fate.__cause__ = err
			tb = err.__traceback__
			while tb.tb_next is not None:
				tb = tb.tb_next
			self.fate.line = tb.tb_lineno
		else:
			self.fate = Fate(None, subtype='return')

def gather(container, prefix='test_'):
	"""
	# The names of the test functions in &container ordered by their first line.
	"""
	names = sorted(x for x in dir(container) if x.startswith(prefix))
	names.sort(key=(lambda x: getattr(container, x).__code__.co_firstlineno))
	return names

def execute(module):
	"""
	# Seal each test in &module raising the first negative &Fate.
	"""
	for identifier in gather(module):
		test = Test(identifier, getattr(module, identifier))
		test.seal()
		if test.fate.negative:
			raise test.fate

"""
# Ordering of the unbounded points against themselves and integers.
"""
import itertools
from .. import core
from .. import eternal as module

def test_instances(test):
	test/module.Infinity(-1) % module.always
	test/module.Infinity(+1) % module.never
	test/module.Infinity(-100) % module.always
	test/module.Infinity(1 << 70) % module.never

	with test/core.InvalidInput as exc:
		module.Infinity(0)
	with test/core.InvalidInput as exc:
		module.Infinity(1.0)
	with test/core.InvalidInput as exc:
		module.Infinity(True)

def test_compare_literals(test):
	neg = module.Infinity(-1)
	pos = module.Infinity(+1)

	test/module.compare(neg, neg) == 0
	test/module.compare(neg, pos) == -1
	test/module.compare(neg, 0) == -1

	test/module.compare(pos, neg) == 1
	test/module.compare(pos, pos) == 0
	test/module.compare(pos, 0) == 1

	test/module.compare(0, neg) == 1
	test/module.compare(0, pos) == -1
	test/module.compare(0, 0) == 0

def test_compare_magnitudes(test):
	for x in (1 << 33, -(1 << 33), 1 << 200, -(1 << 200), 2299161):
		test/module.compare(module.always, x) == -1
		test/module.compare(x, module.always) == 1
		test/module.compare(module.never, x) == 1
		test/module.compare(x, module.never) == -1
		test/module.compare(x, x) == 0

	test/module.compare(1 << 64, (1 << 64) + 1) == -1
	test/module.compare(-5, -6) == 1

def test_antisymmetry(test):
	samples = [module.always, module.never, -(1 << 40), -1, 0, 1, 1 << 40]
	for a, b in itertools.product(samples, repeat=2):
		test/module.compare(a, b) == -module.compare(b, a)

def test_transitivity(test):
	samples = [module.always, -(1 << 40), 0, 1 << 40, module.never]
	for a, b, c in itertools.product(samples, repeat=3):
		if module.compare(a, b) <= 0 and module.compare(b, c) <= 0:
			test/module.compare(a, c) <= 0

def test_operators(test):
	test/module.always < 0
	test/module.always < module.never
	test/module.never > 1 << 100
	test/(0 < module.never) == True
	test/(0 > module.always) == True
	test/(-(1 << 100) >= module.always) == True
	test/(module.never <= module.never) == True
	test/(module.never == module.never) == True
	test/(module.never != module.always) == True
	test/(module.never == float('inf')) == False
	test/sorted([5, module.never, -3, module.always]) == [module.always, -3, 5, module.never]

def test_immutable(test):
	with test/AttributeError as exc:
		module.never.direction = -1
	test/module.never.direction == 1

def test_arithmetic_views(test):
	test/-module.never % module.always
	test/-module.always % module.never
	test/+module.always % module.always
	test/abs(module.always) % module.never
	test/float(module.never) == float('inf')
	test/float(module.always) == float('-inf')
	test/str(module.never) == 'never'
	test/repr(module.always) == module.__name__ + '.always'
	test/hash(module.never) == hash(module.Infinity(1))

def test_invalid_operands(test):
	with test/core.InvalidInput as exc:
		module.compare(module.never, '0')
	with test/core.InvalidInput as exc:
		module.compare(1.5, module.never)
	with test/core.InvalidInput as exc:
		module.compare(None, 0)
	with test/TypeError as exc:
		module.never < 'never'
	test/exc().parameter == 'latter'

if __name__ == '__main__':
	import sys; from .. import harness
	harness.execute(sys.modules[__name__])

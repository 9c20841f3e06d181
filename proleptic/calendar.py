"""
# Calendar cycle aggregation and address resolution.

# Used by &.gregorian and &.julian in order to convert month addresses into day
# addresses. A calendar is described as a tree of nodes, `(title, repeat, sub)`,
# whose leaves are sequences of month lengths. &aggregate totals the tree once so
# &resolve can walk it without iterating over individual years.
"""
import itertools

#: Month lengths of a common year.
common_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Month lengths of a leap year; February gains its twenty-ninth day.
leap_year = (common_year[0], common_year[1] + 1) + common_year[2:]

#: Number of months in a year of either calendar.
months_in_year = len(common_year)

#: The four year leap cycle shared by both calendars.
leap_cycle = (
	('leap', 1, leap_year),
	('years', 3, common_year),
)

def aggregate(node, *,
		chain=itertools.chain,
		accumulate=itertools.accumulate,
		isinstance=isinstance, int=int,
	):
	"""
	# Recursively total the months and days of &node.

	# After aggregation, nodes take the form:
	# `(title, repeat, sub, (months, days), (repeat * months, repeat * days))`.
	"""
	title, repeat, sub = node

	if isinstance(sub[0], int):
		# Leaf; cumulative offsets of each month.
		days = tuple(accumulate(chain((0,), sub)))
		months = tuple(range(len(sub) + 1))
		agg = (months, days)
		month_total = len(sub)
		day_total = days[-1]
	else:
		agg = tuple([aggregate(x) for x in sub])
		month_total = sum([x[-1][0] for x in agg])
		day_total = sum([x[-1][1] for x in agg])

	return (
		title, repeat, agg,
		(month_total, day_total),
		(repeat * month_total, repeat * day_total),
	)

def resolve(selectors, iaddress, calendar, *, divmod=divmod, isinstance=isinstance):
	"""
	# Search the aggregated &calendar for the address corresponding to &iaddress.

	# Returns `(cycles, address, remainder, difference)` where &address is the
	# resolved output address within the cycle, &remainder is the input quantity not
	# consumed, and &difference is the span between the final address part and the next.

	# [ Parameters ]
	# /selectors/
		# Pair of item getters selecting the input and output quantities of a total.
	# /iaddress/
		# The input address; negative addresses resolve into prior cycles.
	# /calendar/
		# The result of &aggregate.
	"""
	sipart, sopart = selectors
	oaddress = 0

	# Align on a cycle.
	cycles, iaddress = divmod(iaddress, sipart(calendar[-1]))

	current = calendar
	while not isinstance(current[2][0][0], int):
		for sub in current[2]:
			title, repeat, inner, fragments, totals = sub
			itotal = sipart(totals)
			if iaddress >= itotal:
				# Completely consumed; continue to the next node.
				iaddress -= itotal
				oaddress += sopart(totals)
			else:
				parts, iaddress = divmod(iaddress, sipart(fragments))
				oaddress += parts * sopart(fragments)
				current = sub
				break
		else:
			raise RuntimeError("calendar address out of bounds")

	iparts = sipart(current[2])
	oparts = sopart(current[2])
	for i in range(len(iparts) - 1):
		if iparts[i+1] > iaddress:
			break

	return (cycles, oaddress + oparts[i], iaddress - iparts[i], oparts[i+1] - oparts[i])

import sys
from collections import Counter

class TooManyAborts(Exception):
	"""
	The first argument is how many attempts in a row came to nothing.
	At that point the rule set and the step count are probably at odds.
	"""
	pass

class Report:
	""" Where the generator says what it is up to, and keeps score. """

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._tally = Counter()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def chatter(self, *args):
		""" Only for the very verbose. """
		if self._verbose > 1:
			print(*args, file=sys.stderr)

	def tally(self, key:str, count:int=1):
		self._tally[key] += count

	def count(self, key:str) -> int:
		return self._tally[key]

	def summary(self) -> dict[str, int]:
		return dict(self._tally)

	def complain_to_console(self):
		""" Emit the score to the console. """
		if self._tally:
			print("  -"*20, file=sys.stderr)
			for key in sorted(self._tally):
				print("%10s: %d"%(key, self._tally[key]), file=sys.stderr)
		sys.stderr.flush()

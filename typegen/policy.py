"""
What to do when a constraint that ought to hold during generation does not.

The strict policy just backtracks. The fault injector mostly gives up on
the whole program, but now and then it shrugs and carries on as if the
constraint held. Those are the programs a sound checker should reject.
"""
from random import Random
from .engine import RetryableConstraintFailure, FatalGenerationAbort

class Strict:
	def weak_assert(self, condition:bool) -> bool:
		"""
		Returns whether a violated constraint was let through,
		which for this policy is never.
		"""
		if not condition:
			raise RetryableConstraintFailure()
		return False

class FaultInjector:
	accepted: int

	def __init__(self, rng:Random, odds:int=20):
		assert odds > 1
		self._rng = rng
		self._odds = odds
		self.accepted = 0

	def weak_assert(self, condition:bool) -> bool:
		if condition:
			return False
		if self._rng.randrange(self._odds):
			raise FatalGenerationAbort("constraint violated")
		self.accepted += 1
		return True

"""
The search that drives the rules.

A rule is a function `rule(env, attempt) -> (fragment, new_env)`. Whenever
it needs something from the environment, it asks the attempt to choose one
candidate for a numbered slot. If some later constraint fails, the rule
bails out, the attempt advances the most recent choice point that still
has alternatives, and the rule runs again from the top. Everything a rule
computes is a function of its choices, so re-running is the same as
resuming.

Two strengths of failure get different treatment:

* RetryableConstraintFailure means "not with these candidates". It never
  leaves `Attempt.run`, which turns exhaustion into the RETRY outcome, and
  then the engine tries some other rule.
* FatalGenerationAbort means the whole program under construction is
  forfeit. `Attempt.run` turns it into ABORT, and the engine re-raises it
  to the attempt boundary in `generate_many`, where the program is dropped.

Between `Attempt.run` and the engine, all communication is by outcome value.
"""
import itertools
from random import Random
from typing import Callable, Iterable, Iterator, NamedTuple, Any
from .diagnostics import Report, TooManyAborts
from .environment import Environment, EMPTY_ENV
from .syntax import Syntax, Statement, Program

class RetryableConstraintFailure(Exception):
	""" A guard or weak assertion failed; some other candidate might do. """
	pass

class FatalGenerationAbort(Exception):
	""" Give up the entire generation attempt, not just this rule. """
	pass


class Ok(NamedTuple):
	fragment: Syntax
	env: Environment
	faults: int

class Signal:
	def __init__(self, name:str): self._name = name
	def __repr__(self): return "<%s>"%self._name

RETRY = Signal("RETRY")
ABORT = Signal("ABORT")


class Namer:
	""" Fresh names, distinct for the life of one program. """
	def __init__(self):
		self._counter = itertools.count()
	def fresh(self, prefix:str) -> str:
		return "%s_%d"%(prefix, next(self._counter))


class Attempt:
	"""
	The choice points of a single rule invocation, explored depth-first.
	Each slot holds a shuffled candidate list and a cursor into it.
	"""
	faults: int

	def __init__(self, rng:Random, names:Namer, max_tries:int=200):
		self._rng = rng
		self._names = names
		self._max_tries = max_tries
		self._slots = {}
		self._trail = []
		self.faults = 0

	def choose(self, slot, producer:Callable[[], Iterable[Any]]):
		if slot not in self._slots:
			candidates = list(producer())
			self._rng.shuffle(candidates)
			self._slots[slot] = [candidates, 0]
		if slot not in self._trail:
			self._trail.append(slot)
		candidates, cursor = self._slots[slot]
		if cursor >= len(candidates):
			raise RetryableConstraintFailure(slot)
		return candidates[cursor]

	def draw(self, slot, n:int) -> int:
		""" A uniform pick from range(n), held steady (and retried) like any other choice. """
		return self.choose(slot, lambda: range(n))

	@staticmethod
	def require(condition:bool):
		""" Shape guards are always strict, whatever the assertion policy. """
		if not condition:
			raise RetryableConstraintFailure()

	def fresh(self, prefix:str) -> str:
		return self._names.fresh(prefix)

	def backtrack(self) -> bool:
		""" Step to the next combination of choices. False when there are none left. """
		while self._trail:
			slot = self._trail.pop()
			entry = self._slots[slot]
			entry[1] += 1
			if entry[1] < len(entry[0]):
				return True
			del self._slots[slot]
		return False

	def run(self, rule, env:Environment):
		for _ in range(self._max_tries):
			self._trail.clear()
			self.faults = 0
			try:
				fragment, new_env = rule(env, self)
			except RetryableConstraintFailure:
				if not self.backtrack(): return RETRY
			except FatalGenerationAbort:
				return ABORT
			else:
				return Ok(fragment, new_env, self.faults)
		return RETRY


class Engine:
	def __init__(self, rule_set, rng:Random, report:Report, *, max_rule_tries:int=50, max_tries:int=200):
		self._rule_set = rule_set
		self._rng = rng
		self._report = report
		self._max_rule_tries = max_rule_tries
		self._max_tries = max_tries

	def generate(self, steps:int) -> Program:
		""" One program of `steps` rule applications, or FatalGenerationAbort. """
		rules = self._rule_set.catalog()
		names = Namer()
		env = EMPTY_ENV
		statements, faults = [], 0
		for _ in range(steps):
			ok = self._step(rules, env, names)
			env = ok.env
			faults += ok.faults
			if isinstance(ok.fragment, Statement):
				statements.append(ok.fragment)
		return Program(statements, faults)

	def _step(self, rules, env:Environment, names:Namer) -> Ok:
		for _ in range(self._max_rule_tries):
			rule = rules[self._rng.randrange(len(rules))]
			outcome = Attempt(self._rng, names, self._max_tries).run(rule, env)
			if outcome is ABORT:
				raise FatalGenerationAbort(rule.__name__)
			elif outcome is RETRY:
				self._report.tally("retry")
				self._report.chatter("No dice:", rule.__name__)
			else:
				self._report.chatter("Applied:", rule.__name__)
				return outcome
		raise FatalGenerationAbort("no rule applies after %d tries"%self._max_rule_tries)

	def generate_many(self, count:int, steps:int, max_attempts:int=100) -> Iterator[Program]:
		"""
		The attempt boundary: an aborted attempt is thrown away whole
		and a fresh one begun from the empty environment.
		"""
		produced = streak = 0
		while produced < count:
			try:
				program = self.generate(steps)
			except FatalGenerationAbort as ex:
				self._report.tally("abort")
				self._report.info("Abandoned an attempt:", *ex.args)
				streak += 1
				if streak >= max_attempts:
					raise TooManyAborts(streak)
			else:
				streak = 0
				produced += 1
				self._report.tally("program")
				self._report.tally("fault", program.injected_faults)
				yield program

"""
This generates small, probably-well-typed Flow programs for fuzzing a type checker.

{0}

For example:

    typegen -n 5 -s 12 --seed 7

will print five programs of twelve generation steps each.

    typegen -n 100 --random -o out

will write a hundred programs into the folder "out", some of which
(those marked "injected faults") ought to fail to type-check.

    typegen -h

will explain all the arguments.
"""
import sys, argparse
from pathlib import Path
from random import Random

parser = argparse.ArgumentParser(
	prog="typegen",
	description="Type-directed random program generator.",
)
parser.add_argument('-n', "--count", type=int, default=1, help="How many programs to produce.")
parser.add_argument('-s', "--steps", type=int, default=10, help="How many rule applications per program.")
parser.add_argument("--seed", type=int, default=None, help="Seed for the random-number generator, for reproducible runs.")
parser.add_argument('-r', "--random", action="store_true", help="Occasionally let a violated typing constraint through.")
parser.add_argument('-o', "--output", type=Path, default=None, help="Write each program into this folder instead of to standard output.")
parser.add_argument("--max-attempts", type=int, default=100, help="Give up after this many aborted attempts in a row.")
parser.add_argument('-v', "--verbose", action="count", help="Say more about what's going on. Twice for a blow-by-blow account.")

def run(args):
	from .diagnostics import Report, TooManyAborts
	from .engine import Engine
	from .rules import RuleSet, RandomizedRuleSet
	from .printer import render_program
	report = Report(verbose=args.verbose)
	rng = Random(args.seed)
	rule_set = RandomizedRuleSet(rng) if args.random else RuleSet()
	engine = Engine(rule_set, rng, report)
	if args.output is not None:
		args.output.mkdir(parents=True, exist_ok=True)
	try:
		for index, program in enumerate(engine.generate_many(args.count, args.steps, args.max_attempts)):
			text = render_program(program)
			if args.output is None:
				if index: print()
				print(text, end="")
			else:
				path = args.output / ("prog_%d.js" % index)
				path.write_text(text, encoding="utf-8")
				report.info("Wrote", path)
	except TooManyAborts as ex:
		report.complain_to_console()
		print("Giving up after %d aborted attempts in a row."%ex.args[0], file=sys.stderr)
		return 1
	if args.verbose:
		report.complain_to_console()
	return 0

def main():
	if len(sys.argv) > 1:
		exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))

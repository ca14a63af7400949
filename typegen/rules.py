"""
One rule per production of the little grammar the generator speaks.

Every rule takes the current environment and the attempt that holds its
choice points, and gives back a fragment of syntax together with a new
environment. Shape guards (`attempt.require`) always backtrack. Typing
constraints go through `weak_assert`, so the assertion policy decides
whether a violation backtracks, aborts, or slips through.
"""
from random import Random
from .domain import (
	StructuralType, Property, ObjectType, UnionType, Param, FunctionType,
	NUMBER, STRING, VOID, is_equivalent,
)
from .subtyping import is_subtype
from .environment import (
	Environment, ValueBinding, TypeBinding,
	require_expr, require_type, property_paths,
)
from .engine import Attempt
from .policy import Strict, FaultInjector
from .syntax import (
	EMPTY, Literal, Identifier, ObjectLiteral, PropertyRead, Call,
	VarDecl, PropertyWrite, FunctionDef, ExprStmt,
)

WORDS = ("foo", "bar", "baz", "quux")

def _prop_names():
	count = 0
	while True:
		yield "p_%d"%count
		count += 1

def _required(name:str, typ:StructuralType) -> Property:
	return Property(name, typ, optional=False, static=False)


class RuleSet:
	def __init__(self, policy=None):
		self.policy = Strict() if policy is None else policy

	def weak_assert(self, attempt:Attempt, condition:bool):
		if self.policy.weak_assert(condition):
			attempt.faults += 1

	def rule_num_lit(self, env:Environment, attempt:Attempt):
		lit = Literal(attempt.draw("value", 100))
		return lit, env.extend(ValueBinding(lit, NUMBER), TypeBinding(NUMBER))

	def rule_str_lit(self, env:Environment, attempt:Attempt):
		lit = Literal(WORDS[attempt.draw("value", len(WORDS))])
		return lit, env.extend(ValueBinding(lit, STRING), TypeBinding(STRING))

	def rule_union_type(self, env:Environment, attempt:Attempt):
		chosen = []
		for slot in range(2):  # Always exactly two alternatives.
			t = attempt.choose(slot, lambda: require_type(env))
			# Do not pick the same type again!
			attempt.require(not any(is_equivalent(t, c) for c in chosen))
			chosen.append(t)
		union = UnionType(chosen[0], chosen[1])
		return EMPTY, env.add_binding(TypeBinding(union))

	def rule_obj_type(self, env:Environment, attempt:Attempt):
		limit = attempt.draw("count", 2) + 1
		types = [attempt.choose(slot, lambda: require_type(env)) for slot in range(limit)]
		obj = ObjectType([_required(n, t) for n, t in zip(_prop_names(), types)], exact=False)
		return EMPTY, env.add_binding(TypeBinding(obj))

	def rule_obj_lit(self, env:Environment, attempt:Attempt):
		limit = attempt.draw("count", 2) + 1
		picked = []
		for slot in range(limit):
			vb = attempt.choose(slot, lambda: require_expr(env))
			# Functions do not get to be properties of an object.
			attempt.require(not isinstance(vb.type, FunctionType))
			picked.append(vb)
		names = list(zip(_prop_names(), picked))
		lit = ObjectLiteral([(n, vb.expr) for n, vb in names])
		obj = ObjectType([_required(n, vb.type) for n, vb in names], exact=False)
		return lit, env.extend(ValueBinding(lit, obj), TypeBinding(obj))

	def rule_vardecl_with_type(self, env:Environment, attempt:Attempt):
		rhs = attempt.choose(0, lambda: require_expr(env))
		# Keeps the search on the cases that exercise depth subtyping.
		attempt.require(isinstance(rhs.expr, Identifier) or isinstance(rhs.type, ObjectType))
		vtype = attempt.choose(1, lambda: require_type(env))
		self.weak_assert(attempt, is_subtype(rhs.type, vtype))
		vname = attempt.fresh("v")
		decl = VarDecl(vname, rhs.expr, annotation=vtype)
		return decl, env.extend(ValueBinding(Identifier(vname), vtype), TypeBinding(vtype))

	def rule_prop_read(self, env:Environment, attempt:Attempt):
		obj = attempt.choose(0, lambda: require_expr(env))
		attempt.require(isinstance(obj.type, ObjectType))
		path, ptype = attempt.choose(1, lambda: property_paths(obj.type, False))
		vname = attempt.fresh("v")
		decl = VarDecl(vname, PropertyRead(obj.expr, path))
		return decl, env.add_binding(ValueBinding(Identifier(vname), ptype))

	def rule_prop_update(self, env:Environment, attempt:Attempt):
		obj = attempt.choose(0, lambda: require_expr(env))
		attempt.require(isinstance(obj.expr, Identifier) and isinstance(obj.type, ObjectType))
		path, ptype = attempt.choose(1, lambda: property_paths(obj.type, True))
		rhs = attempt.choose(2, lambda: require_expr(env))
		self.weak_assert(attempt, is_subtype(rhs.type, ptype))
		write = PropertyWrite(obj.expr, path, rhs.expr)
		return write, env.add_binding(ValueBinding(PropertyRead(obj.expr, path), ptype))

	def rule_func_mutate(self, env:Environment, attempt:Attempt):
		param_type = attempt.choose(0, lambda: require_type(env))
		# An object with one property only, and that property a union.
		attempt.require(
			isinstance(param_type, ObjectType)
			and len(param_type.properties) == 1
			and isinstance(param_type.properties[0].type, UnionType)
		)
		path, ptype = attempt.choose(1, lambda: property_paths(param_type, True))
		rhs = attempt.choose(2, lambda: require_expr(env))
		self.weak_assert(attempt, is_subtype(rhs.type, ptype))
		pname = attempt.fresh("param")
		fname = attempt.fresh("f")
		write = PropertyWrite(Identifier(pname), path, rhs.expr)
		func_def = FunctionDef(fname, pname, param_type, [write], VOID)
		ftype = FunctionType([Param(param_type)], VOID)
		return func_def, env.extend(ValueBinding(Identifier(fname), ftype), TypeBinding(ftype))

	def rule_func_call(self, env:Environment, attempt:Attempt):
		callee = attempt.choose(0, lambda: require_expr(env))
		attempt.require(isinstance(callee.type, FunctionType))
		args = []
		for i, param in enumerate(callee.type.params):
			arg = attempt.choose(i+1, lambda: require_expr(env))
			self.weak_assert(attempt, is_subtype(arg.type, param.type))
			args.append(arg.expr)
		call = Call(callee.expr, args)
		return ExprStmt(call), env.add_binding(ValueBinding(call, callee.type.return_type))

	def catalog(self):
		"""
		The five rules that build statements appear twice,
		which doubles their chance of selection.
		"""
		return [
			self.rule_num_lit,
			self.rule_str_lit,
			self.rule_union_type,
			self.rule_obj_type,
			self.rule_obj_lit,
			self.rule_vardecl_with_type,
			self.rule_prop_update,
			self.rule_func_mutate,
			self.rule_func_call,
			self.rule_prop_read,
			self.rule_vardecl_with_type,
			self.rule_prop_update,
			self.rule_func_mutate,
			self.rule_func_call,
			self.rule_prop_read,
		]


def RandomizedRuleSet(rng:Random, odds:int=20) -> RuleSet:
	""" The same rules, but now and then a violated constraint gets through. """
	return RuleSet(FaultInjector(rng, odds))

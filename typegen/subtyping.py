"""
The subtype decision procedure.

This is unilateral and not especially clever:

* A union on the right is satisfied only by something structurally equal
  to one of its alternatives. There is no further subtyping into the member.
* Object against object is width subtyping, recursing on the property types.
  Optional properties get no special treatment.
* Function against function is the usual contravariant/covariant business.
* Anything else must match exactly.

Allowing the recursion on object properties is a loose form of depth
subtyping, which is how `{p: number}` gets passed where `{p: number | string}`
is wanted. That's unsound in general, and a checker should sometimes
object. Finding out whether it does is rather the point.
"""
from boozetools.support.foundation import Visitor
from .domain import (
	StructuralType, Primitive, ObjectType, UnionType, FunctionType,
	is_equivalent,
)

class SubtypeChecker(Visitor):
	"""
	Dispatches on the would-be supertype, with the candidate subtype
	riding along as the second argument.
	"""

	def check(self, sub:StructuralType, sup:StructuralType) -> bool:
		return self.visit(sup, sub)

	@staticmethod
	def visit_UnionType(sup:UnionType, sub:StructuralType) -> bool:
		return any(is_equivalent(sub, m) for m in sup.members())

	def visit_ObjectType(self, sup:ObjectType, sub:StructuralType) -> bool:
		if not isinstance(sub, ObjectType):
			return is_equivalent(sub, sup)
		have = {p.name: p.type for p in sub.properties}
		for p in sup.properties:
			if p.name not in have or not self.check(have[p.name], p.type):
				return False
		return True

	def visit_FunctionType(self, sup:FunctionType, sub:StructuralType) -> bool:
		if not isinstance(sub, FunctionType):
			return is_equivalent(sub, sup)
		if sub.arity() != sup.arity():
			return False
		for mine, theirs in zip(sub.params, sup.params):
			if not self.check(theirs.type, mine.type):
				return False
		return self.check(sub.return_type, sup.return_type)

	@staticmethod
	def visit_Primitive(sup:Primitive, sub:StructuralType) -> bool:
		return is_equivalent(sub, sup)

_checker = SubtypeChecker()

def is_subtype(t1:StructuralType, t2:StructuralType) -> bool:
	""" Does t1 <: t2 hold? """
	return _checker.check(t1, t2)

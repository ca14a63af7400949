"""
The Type Model
===============

These are the structural types the generator reasons about while it grows
a program. They are value objects: two types with the same structure get
the same equivalence class, and that class number is what all the
equality tests look at.

Membership tests (as in "is this one of the union's alternatives?") go by
structural equality. Subtyping proper lives over in `subtyping.py`.

---------------------------------------------------------------------------
"""

from typing import NamedTuple, Sequence, Optional

_TYPE_NUMBERING = {}

class StructuralType:
	equivalence_class: int

	def __init__(self, domain_key):
		type_key = (type(self), domain_key)
		try:
			self.equivalence_class = _TYPE_NUMBERING[type_key]
		except KeyError:
			self.equivalence_class = _TYPE_NUMBERING[type_key] = len(_TYPE_NUMBERING)

	def __eq__(self, other):
		return isinstance(other, StructuralType) and is_equivalent(self, other)
	def __hash__(self): return self.equivalence_class

	def __repr__(self) -> str:
		return self.render()

	def render(self) -> str:
		raise NotImplementedError(type(self))

	def render_nested(self) -> str:
		""" How this type looks as one piece of some larger type """
		return self.render()


def is_equivalent(s:StructuralType, t:StructuralType) -> bool:
	return s.equivalence_class == t.equivalence_class

def _classes(components:Sequence[StructuralType]):
	return tuple(t.equivalence_class for t in components)

class Primitive(StructuralType):
	""" Equality here is by name and nothing else. """
	def __init__(self, kind:str):
		super().__init__(kind)
		self.kind = kind
	def render(self) -> str: return self.kind

NUMBER = Primitive("number")
STRING = Primitive("string")
BOOLEAN = Primitive("boolean")
VOID = Primitive("void")


class Property(NamedTuple):
	name: str
	type: StructuralType
	optional: bool = False
	static: bool = False

	def render(self) -> str:
		return "%s%s: %s"%(self.name, "?" if self.optional else "", self.type.render())

class ObjectType(StructuralType):
	def __init__(self, properties:Sequence[Property], exact:bool=False):
		self.properties = tuple(properties)
		names = [p.name for p in self.properties]
		assert len(names) == len(set(names)), names
		self.exact = exact
		key = tuple((p.name, p.type.equivalence_class, p.optional, p.static) for p in self.properties)
		super().__init__((exact, key))

	def property_names(self):
		return [p.name for p in self.properties]

	def render(self) -> str:
		bra, ket = ("{|", "|}") if self.exact else ("{", "}")
		return bra + ", ".join(p.render() for p in self.properties) + ket

def object_property(obj:ObjectType, name:str) -> Optional[Property]:
	for p in obj.properties:
		if p.name == name: return p


class UnionType(StructuralType):
	"""
	At least two alternatives. Nothing here stops two of them from being
	the same type; whatever builds a union is responsible for that.
	"""
	def __init__(self, first:StructuralType, second:StructuralType, rest:Sequence[StructuralType]=()):
		self.first, self.second = first, second
		self.rest = tuple(rest)
		super().__init__(_classes(self.members()))

	def members(self) -> tuple[StructuralType, ...]:
		return (self.first, self.second) + self.rest

	def render(self) -> str:
		return " | ".join(m.render_nested() for m in self.members())
	def render_nested(self) -> str:
		return "(%s)"%self.render()


class Param(NamedTuple):
	type: StructuralType
	optional: bool = False

class FunctionType(StructuralType):
	def __init__(self, params:Sequence[Param], return_type:StructuralType):
		self.params = tuple(params)
		self.return_type = return_type
		key = tuple((p.type.equivalence_class, p.optional) for p in self.params)
		super().__init__((key, return_type.equivalence_class))

	def arity(self) -> int: return len(self.params)

	def render(self) -> str:
		params = ", ".join(
			("_%d?: %s"%(i, p.type.render()) if p.optional else p.type.render())
			for i, p in enumerate(self.params)
		)
		return "(%s) => %s"%(params, self.return_type.render_nested())
	def render_nested(self) -> str:
		return "(%s)"%self.render()

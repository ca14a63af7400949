"""
The pool of typed expressions and types that rules draw upon.

This is the canonical list-structured environment: each Environment is a
binding atop whatever came before. Adding a binding makes a new one and
leaves the old alone, so rewinding after a failed attempt is just a matter
of holding on to the earlier value.
"""
from typing import NamedTuple, Iterator, Optional, Union
from .domain import StructuralType, ObjectType
from .syntax import Expression

class ValueBinding(NamedTuple):
	expr: Expression
	type: StructuralType

class TypeBinding(NamedTuple):
	type: StructuralType

Binding = Union[ValueBinding, TypeBinding]


class Environment:
	binding: Optional[Binding]
	parent: Optional["Environment"]

	def __init__(self, binding:Optional[Binding]=None, parent:Optional["Environment"]=None):
		assert (binding is None) == (parent is None)
		self.binding = binding
		self.parent = parent
		self._size = 0 if parent is None else len(parent) + 1
		self._members = frozenset() if parent is None else parent._members | {binding}

	def __len__(self): return self._size

	def __contains__(self, binding:Binding) -> bool:
		return binding in self._members

	def __iter__(self) -> Iterator[Binding]:
		""" Oldest first. """
		stack = []
		env = self
		while env.parent is not None:
			stack.append(env.binding)
			env = env.parent
		return reversed(stack)

	def __repr__(self): return "<Environment: %d bindings>"%len(self)

	def add_binding(self, binding:Binding) -> "Environment":
		assert isinstance(binding, (ValueBinding, TypeBinding)), binding
		if binding in self: return self
		return Environment(binding, self)

	def extend(self, *bindings:Binding) -> "Environment":
		env = self
		for b in bindings: env = env.add_binding(b)
		return env

	def expressions(self) -> list[ValueBinding]:
		return [b for b in self if isinstance(b, ValueBinding)]

	def types(self) -> list[StructuralType]:
		return [b.type for b in self if isinstance(b, TypeBinding)]

EMPTY_ENV = Environment()


def require_expr(env:Environment) -> list[ValueBinding]:
	return env.expressions()

def require_type(env:Environment) -> list[StructuralType]:
	return env.types()

def property_paths(typ:StructuralType, for_write:bool) -> list[tuple[tuple[str, ...], StructuralType]]:
	"""
	Every property path into an object type, nested objects included,
	paired with the type found at the end of it. A write must not go
	through (or land on) an optional property.
	"""
	found = []
	def walk(obj:ObjectType, prefix:tuple[str, ...]):
		for p in obj.properties:
			if for_write and p.optional: continue
			path = prefix + (p.name,)
			found.append((path, p.type))
			if isinstance(p.type, ObjectType): walk(p.type, path)
	if isinstance(typ, ObjectType): walk(typ, ())
	return found

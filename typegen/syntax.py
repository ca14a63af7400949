"""
The fragments of program text the generator knows how to build.
Rules construct these bottom-up; the printer turns a Program into source text.
Expressions and statements are kept apart because only statements
make it into the printed program: an expression matters only once
some later statement refers to it.
"""
from typing import Sequence, Optional, Union
from .domain import StructuralType

class Syntax:
	pass

class Expression(Syntax):
	pass

class Statement(Syntax):
	pass

class _Empty(Syntax):
	""" What a rule gives back when it only added types to the environment. """
	def __repr__(self): return "<empty>"

EMPTY = _Empty()

class Literal(Expression):
	def __init__(self, value:Union[int, float, str]):
		assert isinstance(value, (int, float, str)), type(value)
		self.value = value
	def __repr__(self): return "<lit:%r>"%self.value
	def __eq__(self, other): return type(other) is Literal and type(self.value) is type(other.value) and self.value == other.value
	def __hash__(self): return hash((Literal, self.value))

class Identifier(Expression):
	def __init__(self, name:str):
		self.name = name
	def __repr__(self): return "<id:%s>"%self.name
	def __eq__(self, other): return type(other) is Identifier and self.name == other.name
	def __hash__(self): return hash((Identifier, self.name))

class ObjectLiteral(Expression):
	def __init__(self, properties:Sequence[tuple[str, Expression]]):
		self.properties = tuple(properties)
	def __repr__(self): return "<obj:%s>"%(", ".join("%s=%r"%p for p in self.properties))
	def __eq__(self, other): return type(other) is ObjectLiteral and self.properties == other.properties
	def __hash__(self): return hash((ObjectLiteral, self.properties))

class PropertyRead(Expression):
	def __init__(self, obj:Expression, path:Sequence[str]):
		assert path
		self.obj = obj
		self.path = tuple(path)
	def __repr__(self): return "<read:%r.%s>"%(self.obj, ".".join(self.path))
	def __eq__(self, other): return type(other) is PropertyRead and (self.obj, self.path) == (other.obj, other.path)
	def __hash__(self): return hash((PropertyRead, self.obj, self.path))

class Call(Expression):
	def __init__(self, callee:Expression, arguments:Sequence[Expression]):
		self.callee = callee
		self.arguments = tuple(arguments)
	def __repr__(self): return "<call:%r%r>"%(self.callee, self.arguments)
	def __eq__(self, other): return type(other) is Call and (self.callee, self.arguments) == (other.callee, other.arguments)
	def __hash__(self): return hash((Call, self.callee, self.arguments))

class VarDecl(Statement):
	def __init__(self, name:str, init:Expression, annotation:Optional[StructuralType]=None):
		self.name = name
		self.init = init
		self.annotation = annotation
	def __repr__(self): return "<var %s:%s = %r>"%(self.name, self.annotation, self.init)

class PropertyWrite(Statement):
	def __init__(self, obj:Expression, path:Sequence[str], rhs:Expression):
		assert path
		self.obj = obj
		self.path = tuple(path)
		self.rhs = rhs
	def __repr__(self): return "<write:%r.%s = %r>"%(self.obj, ".".join(self.path), self.rhs)

class FunctionDef(Statement):
	def __init__(self, name:str, param:str, param_type:StructuralType, body:Sequence[Statement], return_type:StructuralType):
		self.name = name
		self.param = param
		self.param_type = param_type
		self.body = tuple(body)
		self.return_type = return_type
	def __repr__(self): return "<function %s(%s:%s)>"%(self.name, self.param, self.param_type)

class ExprStmt(Statement):
	def __init__(self, expr:Expression):
		self.expr = expr
	def __repr__(self): return "<stmt:%r>"%self.expr


class Program:
	"""
	A finished generation attempt. The injected_faults count says how
	many violated constraints the fault injector let through: when it is
	non-zero, a sound checker ought to reject the program.
	"""
	def __init__(self, statements:Sequence[Statement], injected_faults:int=0):
		assert all(isinstance(s, Statement) for s in statements)
		self.statements = list(statements)
		self.injected_faults = injected_faults
	def __len__(self): return len(self.statements)

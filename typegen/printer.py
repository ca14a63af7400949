"""
Turn a generated Program into Flow-annotated JavaScript.
Types render themselves; this handles the syntax around them.
"""
from boozetools.support.foundation import Visitor
from . import syntax

INDENT = "  "

class Printer(Visitor):

	def program(self, program:syntax.Program) -> str:
		lines = ["// @flow"]
		if program.injected_faults:
			lines.append("// injected faults: %d"%program.injected_faults)
		for stmt in program.statements:
			lines.extend(self.visit(stmt, ""))
		return "\n".join(lines) + "\n"

	def statement(self, stmt:syntax.Statement) -> str:
		return "\n".join(self.visit(stmt, ""))

	def expression(self, expr:syntax.Expression) -> str:
		return self.visit(expr)

	# Statements yield their lines.

	def visit_VarDecl(self, decl:syntax.VarDecl, indent:str):
		if decl.annotation is None:
			head = "var %s"%decl.name
		else:
			head = "var %s: %s"%(decl.name, decl.annotation.render())
		return [indent + "%s = %s;"%(head, self.visit(decl.init))]

	def visit_PropertyWrite(self, write:syntax.PropertyWrite, indent:str):
		lhs = self._member(write.obj, write.path)
		return [indent + "%s = %s;"%(lhs, self.visit(write.rhs))]

	def visit_FunctionDef(self, fn:syntax.FunctionDef, indent:str):
		head = "function %s(%s: %s): %s {"%(fn.name, fn.param, fn.param_type.render(), fn.return_type.render())
		lines = [indent + head]
		for stmt in fn.body:
			lines.extend(self.visit(stmt, indent + INDENT))
		lines.append(indent + "}")
		return lines

	def visit_ExprStmt(self, stmt:syntax.ExprStmt, indent:str):
		text = self.visit(stmt.expr)
		if isinstance(stmt.expr, syntax.ObjectLiteral):
			text = "(%s)"%text  # Otherwise it reads as a block.
		return [indent + text + ";"]

	# Expressions yield their text.

	@staticmethod
	def visit_Literal(lit:syntax.Literal):
		if isinstance(lit.value, str):
			return '"%s"'%lit.value.replace("\\", "\\\\").replace('"', '\\"')
		return repr(lit.value)

	@staticmethod
	def visit_Identifier(ident:syntax.Identifier):
		return ident.name

	def visit_ObjectLiteral(self, lit:syntax.ObjectLiteral):
		return "{%s}"%", ".join("%s: %s"%(name, self.visit(e)) for name, e in lit.properties)

	def visit_PropertyRead(self, read:syntax.PropertyRead):
		return self._member(read.obj, read.path)

	def visit_Call(self, call:syntax.Call):
		callee = self.visit(call.callee)
		if not isinstance(call.callee, (syntax.Identifier, syntax.PropertyRead)):
			callee = "(%s)"%callee
		return "%s(%s)"%(callee, ", ".join(self.visit(a) for a in call.arguments))

	def _member(self, obj:syntax.Expression, path) -> str:
		base = self.visit(obj)
		if isinstance(obj, (syntax.ObjectLiteral, syntax.Literal)):
			base = "(%s)"%base
		return base + "".join("."+name for name in path)

_printer = Printer()

def render_program(program:syntax.Program) -> str:
	return _printer.program(program)

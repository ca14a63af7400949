import unittest

from typegen.domain import (
	Primitive, Property, ObjectType, UnionType, Param, FunctionType,
	NUMBER, STRING, BOOLEAN, VOID, is_equivalent, object_property,
)
from typegen.subtyping import is_subtype

def obj(**props):
	return ObjectType([Property(name, t) for name, t in props.items()])

class StructuralEqualityTests(unittest.TestCase):
	""" The type model compares by structure, not by identity. """

	def test_primitives_are_nominal(self):
		self.assertEqual(Primitive("number"), NUMBER)
		self.assertNotEqual(NUMBER, STRING)

	def test_objects_compare_structurally(self):
		self.assertTrue(is_equivalent(obj(p=NUMBER, q=STRING), obj(p=NUMBER, q=STRING)))
		self.assertFalse(is_equivalent(obj(p=NUMBER), obj(p=STRING)))
		self.assertFalse(is_equivalent(obj(p=NUMBER), ObjectType([Property("p", NUMBER)], exact=True)))
		self.assertFalse(is_equivalent(obj(p=NUMBER), ObjectType([Property("p", NUMBER, optional=True)])))

	def test_property_order_is_part_of_the_structure(self):
		self.assertNotEqual(obj(p=NUMBER, q=STRING), obj(q=STRING, p=NUMBER))

	def test_union_alternatives_are_ordered(self):
		self.assertEqual(UnionType(NUMBER, STRING), UnionType(NUMBER, STRING))
		self.assertNotEqual(UnionType(NUMBER, STRING), UnionType(STRING, NUMBER))
		self.assertEqual((NUMBER, STRING, VOID), UnionType(NUMBER, STRING, [VOID]).members())

	def test_duplicate_property_names_are_refused(self):
		with self.assertRaises(AssertionError):
			ObjectType([Property("p", NUMBER), Property("p", STRING)])

	def test_object_property(self):
		o = obj(p=NUMBER, q=STRING)
		self.assertIs(STRING, object_property(o, "q").type)
		self.assertIsNone(object_property(o, "r"))

	def test_render(self):
		for typ, text in [
			(NUMBER, "number"),
			(obj(p_0=NUMBER, p_1=STRING), "{p_0: number, p_1: string}"),
			(ObjectType([Property("p", NUMBER, optional=True)], exact=True), "{|p?: number|}"),
			(UnionType(NUMBER, STRING), "number | string"),
			(UnionType(UnionType(NUMBER, STRING), VOID), "(number | string) | void"),
			(FunctionType([Param(obj(p_0=UnionType(NUMBER, STRING)))], VOID), "({p_0: number | string}) => void"),
			(UnionType(FunctionType([Param(NUMBER)], VOID), STRING), "((number) => void) | string"),
		]:
			with self.subTest(text):
				self.assertEqual(text, typ.render())


class UnionMembershipTests(unittest.TestCase):
	""" Subtype-of-union means equal to a member. Nothing deeper. """

	def setUp(self) -> None:
		self.union = UnionType(NUMBER, STRING)

	def test_direct_members(self):
		self.assertTrue(is_subtype(NUMBER, self.union))
		self.assertTrue(is_subtype(STRING, self.union))
		self.assertFalse(is_subtype(VOID, self.union))
		self.assertFalse(is_subtype(BOOLEAN, UnionType(NUMBER, STRING, [VOID])))
		self.assertTrue(is_subtype(VOID, UnionType(NUMBER, STRING, [VOID])))

	def test_membership_is_shallow(self):
		narrow = obj(p=NUMBER)
		wide = obj(p=NUMBER, q=STRING)
		union = UnionType(narrow, STRING)
		assert is_subtype(wide, narrow)
		self.assertTrue(is_subtype(narrow, union))
		self.assertFalse(is_subtype(wide, union))

	def test_union_is_not_a_member_of_itself(self):
		self.assertFalse(is_subtype(self.union, self.union))

	def test_union_on_the_left_only(self):
		self.assertFalse(is_subtype(self.union, NUMBER))


class ObjectSubtypingTests(unittest.TestCase):

	def test_width(self):
		self.assertTrue(is_subtype(obj(p_0=NUMBER, p_1=STRING), obj(p_0=NUMBER)))
		self.assertTrue(is_subtype(obj(p_0=NUMBER), obj(p_0=NUMBER)))
		self.assertTrue(is_subtype(obj(p_0=NUMBER), obj()))

	def test_missing_property(self):
		self.assertFalse(is_subtype(obj(p_1=STRING), obj(p_0=NUMBER)))
		self.assertFalse(is_subtype(obj(p_0=NUMBER), obj(p_0=NUMBER, p_1=STRING)))

	def test_recursive_property_check(self):
		self.assertTrue(is_subtype(obj(p=obj(q=NUMBER)), obj(p=obj(q=NUMBER))))
		self.assertFalse(is_subtype(obj(p=obj(q=STRING)), obj(p=obj(q=NUMBER))))
		self.assertTrue(is_subtype(obj(p=obj(q=NUMBER, r=VOID)), obj(p=obj(q=NUMBER))))
		self.assertTrue(is_subtype(obj(p=obj(q=obj(r=NUMBER, s=STRING))), obj(p=obj(q=obj(r=NUMBER)))))

	def test_depth_through_a_union_property(self):
		""" The loose case that lets {p: number} stand in for {p: number | string}. """
		self.assertTrue(is_subtype(obj(p=NUMBER), obj(p=UnionType(NUMBER, STRING))))
		self.assertFalse(is_subtype(obj(p=VOID), obj(p=UnionType(NUMBER, STRING))))

	def test_optional_is_not_special(self):
		required = obj(p=NUMBER)
		optional = ObjectType([Property("p", NUMBER, optional=True)])
		self.assertTrue(is_subtype(required, optional))
		self.assertTrue(is_subtype(optional, required))
		self.assertFalse(is_subtype(obj(), optional))

	def test_object_against_other_things(self):
		self.assertFalse(is_subtype(obj(p=NUMBER), NUMBER))
		self.assertFalse(is_subtype(NUMBER, obj()))
		self.assertFalse(is_subtype(FunctionType([], VOID), obj()))


class FunctionSubtypingTests(unittest.TestCase):

	def test_identical(self):
		f = FunctionType([Param(NUMBER)], VOID)
		self.assertTrue(is_subtype(f, FunctionType([Param(NUMBER)], VOID)))

	def test_parameters_are_contravariant(self):
		takes_narrow = FunctionType([Param(obj(p=NUMBER))], VOID)
		takes_wide = FunctionType([Param(obj(p=NUMBER, q=STRING))], VOID)
		self.assertTrue(is_subtype(takes_narrow, takes_wide))
		self.assertFalse(is_subtype(takes_wide, takes_narrow))

	def test_result_is_covariant(self):
		gives_wide = FunctionType([], obj(p=NUMBER, q=STRING))
		gives_narrow = FunctionType([], obj(p=NUMBER))
		self.assertTrue(is_subtype(gives_wide, gives_narrow))
		self.assertFalse(is_subtype(gives_narrow, gives_wide))

	def test_arity_must_agree(self):
		self.assertFalse(is_subtype(FunctionType([Param(NUMBER)], VOID), FunctionType([Param(NUMBER), Param(NUMBER)], VOID)))

	def test_function_against_other_things(self):
		self.assertFalse(is_subtype(NUMBER, FunctionType([], NUMBER)))
		self.assertFalse(is_subtype(FunctionType([], NUMBER), NUMBER))


class PrimitiveSubtypingTests(unittest.TestCase):
	def test_exact_match_only(self):
		self.assertTrue(is_subtype(NUMBER, NUMBER))
		self.assertFalse(is_subtype(NUMBER, STRING))
		self.assertFalse(is_subtype(VOID, NUMBER))


if __name__ == '__main__':
	unittest.main()

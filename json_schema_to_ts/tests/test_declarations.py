from unittest import TestCase

from json_schema_to_ts.pipeline.config import GeneratorOptions
from json_schema_to_ts.pipeline.errors import UnsupportedNodeError
from json_schema_to_ts.pipeline.generator.context import GenerationContext, ProcessedSet
from json_schema_to_ts.pipeline.generator.declarations import (
    declare_enums,
    declare_named_interfaces,
    declare_named_types,
)
from json_schema_to_ts.pipeline.schema_ast import (
    ArrayNode,
    EnumNode,
    EnumParam,
    InterfaceNode,
    InterfaceParam,
    IntersectionNode,
    LiteralNode,
    NumberNode,
    StringNode,
    TupleNode,
    UnionNode,
)


def make_enum(name, *values):
    return EnumNode([EnumParam(value.capitalize(), LiteralNode(value)) for value in values], standalone_name=name)


class TestProcessedSet(TestCase):
    def test_identity_and_name(self):
        processed = ProcessedSet()
        first = StringNode(standalone_name="Name")
        processed.add(first)
        self.assertIn(first, processed)
        self.assertIn(StringNode(standalone_name="Name"), processed)
        self.assertNotIn(StringNode(standalone_name="Other"), processed)
        self.assertNotIn(StringNode(), processed)
        self.assertEqual(processed.names, frozenset({"Name"}))

    def test_unnamed_nodes_are_distinct(self):
        processed = ProcessedSet()
        processed.add(StringNode())
        self.assertNotIn(StringNode(), processed)
        self.assertEqual(len(processed), 1)

    def test_context_reset(self):
        context = GenerationContext()
        node = StringNode(standalone_name="A")
        context.named_types.add(node)
        context.named_interfaces.add(node)
        context.enums.add(node)
        context.reset()
        self.assertNotIn(node, context.named_types)
        self.assertNotIn(node, context.named_interfaces)
        self.assertNotIn(node, context.enums)


class TestDeclareNamedTypes(TestCase):
    """Test the type alias pass"""

    def setUp(self):
        self.options = GeneratorOptions(banner_comment="")

    def declare(self, node, processed=None):
        return declare_named_types(node, self.options, processed if processed is not None else ProcessedSet())

    def test_unnamed_scalar_declares_nothing(self):
        self.assertEqual(self.declare(StringNode()), "")

    def test_named_scalar(self):
        self.assertEqual(self.declare(StringNode(standalone_name="Email")), "export type Email = string")

    def test_named_array_after_its_element(self):
        node = ArrayNode(StringNode(standalone_name="Tag"), standalone_name="Tags")
        self.assertEqual(self.declare(node), "export type Tag = string\nexport type Tags = Tag[]")

    def test_named_union_before_its_members(self):
        member = NumberNode(standalone_name="Count")
        node = UnionNode([StringNode(), member], standalone_name="Value")
        self.assertEqual(self.declare(node), "export type Value = (string | Count)\nexport type Count = number")

    def test_named_tuple_and_intersection(self):
        self.assertEqual(
            self.declare(TupleNode([NumberNode(), NumberNode()], standalone_name="Point")),
            "export type Point = [number, number]",
        )
        a = InterfaceNode(standalone_name="A")
        b = InterfaceNode(standalone_name="B")
        self.assertEqual(self.declare(IntersectionNode([a, b], standalone_name="AB")), "export type AB = (A & B)")

    def test_interfaces_and_enums_are_not_declared(self):
        node = InterfaceNode(
            [
                InterfaceParam("color", make_enum("Color", "red"), is_required=True),
                InterfaceParam("id", StringNode(standalone_name="Id"), is_required=True),
            ],
            standalone_name="Widget",
        )
        self.assertEqual(self.declare(node), "export type Id = string")

    def test_super_types_are_traversed(self):
        base = InterfaceNode([InterfaceParam("id", StringNode(standalone_name="Id"))], standalone_name="Base")
        node = InterfaceNode(standalone_name="Child", super_types=[base])
        self.assertEqual(self.declare(node), "export type Id = string")

    def test_shared_node_is_declared_once(self):
        shared = StringNode(standalone_name="Id")
        node = InterfaceNode(
            [
                InterfaceParam("a", shared),
                InterfaceParam("b", ArrayNode(shared)),
                InterfaceParam("c", UnionNode([shared, NumberNode()])),
            ],
            standalone_name="Root",
        )
        self.assertEqual(self.declare(node).count("export type Id ="), 1)

    def test_same_name_is_declared_once(self):
        node = InterfaceNode(
            [
                InterfaceParam("a", StringNode(standalone_name="Id")),
                InterfaceParam("b", NumberNode(standalone_name="Id")),
            ],
            standalone_name="Root",
        )
        self.assertEqual(self.declare(node), "export type Id = string")

    def test_cyclic_union_terminates(self):
        node = UnionNode([StringNode()], standalone_name="Nested")
        node.params.append(ArrayNode(node))
        self.assertEqual(self.declare(node), "export type Nested = (string | Nested[])")

    def test_processed_set_is_updated(self):
        processed = ProcessedSet()
        node = StringNode(standalone_name="Email")
        self.declare(node, processed)
        self.assertIn(node, processed)
        self.assertEqual(self.declare(node, processed), "")

    def test_unsupported_node_raises(self):
        with self.assertRaises(UnsupportedNodeError):
            self.declare(ArrayNode("string"))


class TestDeclareNamedInterfaces(TestCase):
    """Test the interface pass"""

    def setUp(self):
        self.address = InterfaceNode([InterfaceParam("street", StringNode(), is_required=True)], standalone_name="Address")
        self.root = InterfaceNode([InterfaceParam("address", self.address, is_required=True)], standalone_name="Person")

    def declare(self, node, options, root_name="Person"):
        return declare_named_interfaces(node, options, root_name, ProcessedSet())

    def test_declares_externally_referenced(self):
        options = GeneratorOptions(declare_externally_referenced=True)
        expected = "export interface Person {\naddress: Address\n}\nexport interface Address {\nstreet: string\n}"
        self.assertEqual(self.declare(self.root, options), expected)

    def test_declares_only_root(self):
        options = GeneratorOptions(declare_externally_referenced=False)
        self.assertEqual(self.declare(self.root, options), "export interface Person {\naddress: Address\n}")

    def test_unnamed_interface_is_not_declared(self):
        node = InterfaceNode([InterfaceParam("inner", InterfaceNode([InterfaceParam("x", NumberNode())]))], standalone_name="Person")
        self.assertEqual(self.declare(node, GeneratorOptions()), "export interface Person {\ninner?: {\nx?: number\n}\n}")

    def test_interfaces_inside_arrays_and_set_operations(self):
        a = InterfaceNode(standalone_name="A")
        b = InterfaceNode(standalone_name="B")
        node = UnionNode([ArrayNode(a), IntersectionNode([b])], standalone_name="Person")
        self.assertEqual(self.declare(node, GeneratorOptions()), "export interface A {\n\n}\nexport interface B {\n\n}")

    def test_interfaces_inside_tuples_are_not_declared(self):
        node = TupleNode([InterfaceNode(standalone_name="A")], standalone_name="Person")
        self.assertEqual(self.declare(node, GeneratorOptions()), "")

    def test_self_reference_terminates(self):
        node = InterfaceNode(standalone_name="Person")
        node.params = [InterfaceParam("friends", ArrayNode(node))]
        self.assertEqual(self.declare(node, GeneratorOptions()), "export interface Person {\nfriends?: Person[]\n}")

    def test_mutual_reference_declares_each_once(self):
        parent = InterfaceNode(standalone_name="Parent")
        child = InterfaceNode([InterfaceParam("parent", parent, is_required=True)], standalone_name="Child")
        parent.params = [InterfaceParam("children", ArrayNode(child), is_required=True)]
        expected = "export interface Parent {\nchildren: Child[]\n}\nexport interface Child {\nparent: Parent\n}"
        self.assertEqual(self.declare(parent, GeneratorOptions(), root_name="Parent"), expected)


class TestDeclareEnums(TestCase):
    """Test the enum pass"""

    def setUp(self):
        self.options = GeneratorOptions(enable_const_enums=False)

    def declare(self, node):
        return declare_enums(node, self.options, ProcessedSet())

    def test_enum(self):
        self.assertEqual(self.declare(make_enum("Color", "red")), 'export enum Color {\nRed = "red"\n}')

    def test_enums_in_arrays_tuples_and_interfaces(self):
        node = InterfaceNode(
            [
                InterfaceParam("colors", ArrayNode(make_enum("Color", "red"))),
                InterfaceParam("pair", TupleNode([make_enum("Size", "small"), make_enum("Shape", "round")])),
            ],
            super_types=[InterfaceNode([InterfaceParam("mood", make_enum("Mood", "happy"))], standalone_name="Base")],
            standalone_name="Root",
        )
        declared = self.declare(node)
        self.assertEqual(
            [line for line in declared.split("\n") if line.startswith("export")],
            ["export enum Color {", "export enum Size {", "export enum Shape {", "export enum Mood {"],
        )

    def test_enums_in_set_operations_are_not_declared(self):
        node = UnionNode([make_enum("Color", "red"), StringNode()], standalone_name="Root")
        self.assertEqual(self.declare(node), "")

    def test_shared_enum_is_declared_once(self):
        color = make_enum("Color", "red")
        node = InterfaceNode([InterfaceParam("a", color), InterfaceParam("b", ArrayNode(color))], standalone_name="Root")
        self.assertEqual(self.declare(node).count("export enum Color"), 1)

    def test_same_name_collision_is_declared_once(self):
        node = InterfaceNode(
            [
                InterfaceParam("a", make_enum("Color", "red")),
                InterfaceParam("b", make_enum("Color", "blue")),
            ],
            standalone_name="Root",
        )
        self.assertEqual(self.declare(node), 'export enum Color {\nRed = "red"\n}')

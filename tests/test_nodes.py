import unittest

from yamltree.nodes import MapNode, ScalarNode, SequenceNode, from_python, new_node, to_python


class TestNodes(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(ScalarNode("x").kind, "scalar")
        self.assertEqual(SequenceNode().kind, "sequence")
        self.assertEqual(MapNode().kind, "map")

    def test_new_node(self):
        self.assertEqual(new_node("map"), MapNode())
        self.assertEqual(new_node("sequence"), SequenceNode())
        self.assertEqual(new_node("scalar"), ScalarNode(""))
        with self.assertRaises(ValueError):
            new_node("tuple")

    def test_scalar_equality_ignores_style(self):
        """Block style is presentation only."""
        self.assertEqual(ScalarNode("a\nb", "literal"), ScalarNode("a\nb", "folded"))
        self.assertNotEqual(ScalarNode("a"), ScalarNode("b"))
        self.assertNotEqual(ScalarNode("a"), "a")

    def test_from_python_scalars(self):
        tree = from_python({"none": None, "yes": True, "no": False, "n": 3, "f": 1.5, "text": "a\nb"})
        self.assertEqual(
            to_python(tree),
            {"none": "", "yes": "true", "no": "false", "n": "3", "f": "1.5", "text": "a\nb"},
        )
        self.assertEqual(tree.entries["text"].style, "literal")
        self.assertEqual(tree.entries["n"].style, "plain")

    def test_from_python_collections(self):
        tree = from_python({1: ("a", ["b"]), "m": {}})
        self.assertIsInstance(tree.entries["1"], SequenceNode)
        self.assertEqual(to_python(tree), {"1": ["a", ["b"]], "m": {}})

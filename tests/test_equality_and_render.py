"""Unit tests for structural equality and tree rendering."""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from levelgraph import (
    ConfigurationError,
    Graph,
    GraphConfig,
    RenderConfig,
    SimpleParticipant,
    build_graph,
)


DIAMOND = [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]


class TestEquality(unittest.TestCase):
    """Graphs compare by (participant, level) per level."""

    def test_reflexive(self):
        graph = build_graph("A", DIAMOND)
        self.assertEqual(graph, graph)

    def test_same_links_different_order(self):
        first = build_graph("A", DIAMOND)
        second = build_graph("A", list(reversed(DIAMOND[:2])) + [("C", "D"), ("B", "D")])
        self.assertEqual(first, second)
        self.assertEqual(second, first)

    def test_same_levels_different_topology(self):
        """Only membership per level counts, not who links to whom."""
        first = build_graph("A", [("A", "B"), ("A", "C"), ("B", "D")])
        second = build_graph("A", [("A", "B"), ("A", "C"), ("C", "D")])
        self.assertEqual(first, second)

    def test_different_size(self):
        first = build_graph("A", DIAMOND)
        second = build_graph("A", DIAMOND + [("D", "E")])
        self.assertNotEqual(first, second)

    def test_different_levels(self):
        first = build_graph("A", [("A", "B"), ("A", "C")])
        second = build_graph("A", [("A", "B"), ("B", "C")])
        self.assertNotEqual(first, second)

    def test_same_shape_different_participants(self):
        first = build_graph("A", [("A", "B"), ("A", "C")])
        second = build_graph("A", [("A", "B"), ("A", "X")])
        self.assertNotEqual(first, second)

    def test_level_assignment_matters(self):
        """Same participants, same number of levels, different buckets."""
        first = build_graph("A", [("A", "B"), ("B", "C"), ("A", "D")])
        second = build_graph("A", [("A", "B"), ("B", "D"), ("A", "C")])
        self.assertEqual(first.size(), second.size())
        self.assertEqual(first.level(), second.level())
        self.assertNotEqual(first, second)

    def test_different_root(self):
        self.assertNotEqual(Graph("A"), Graph("B"))

    def test_other_types(self):
        graph = Graph("A")
        self.assertFalse(graph == "A")
        self.assertTrue(graph != 1)

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Graph("A"))

    def test_participant_objects(self):
        def make(order):
            people = {name: SimpleParticipant(i, name=name) for i, name in enumerate("ABCD")}
            graph = Graph(people["A"])
            for parent, target in order:
                graph.insert(people[parent], people[target])
            return graph

        self.assertEqual(make(DIAMOND), make(list(reversed(DIAMOND[:2])) + DIAMOND[2:]))

    def test_participants_sharing_an_id(self):
        first = Graph("R")
        first.add("A")
        first.add(SimpleParticipant("A"))
        second = Graph("R")
        second.add(SimpleParticipant("A"))
        second.add("A")
        self.assertEqual(first.size(), 3)
        self.assertEqual(first, second)
        self.assertEqual(second, first)


class TestRendering(unittest.TestCase):
    """Test the text tree."""

    def test_root_only(self):
        self.assertEqual(str(Graph("A")), "(A,0)")

    def test_diamond_prints_shared_child_per_path(self):
        graph = build_graph("A", DIAMOND)
        expected = "\n".join([
            "(A,0)",
            "   L---(C,1)",
            "      L---(D,2)",
            "   L---(B,1)",
            "      L---(D,2)",
        ])
        self.assertEqual(str(graph), expected)
        self.assertEqual(str(graph).count("(D,2)"), 2)

    def test_compact_render(self):
        graph = build_graph("A", [("A", "B"), ("B", "C")], config=GraphConfig.compact())
        self.assertEqual(str(graph), "(A,0)\n +-(B,1)\n  +-(C,2)")

    def test_participant_text(self):
        graph = Graph(SimpleParticipant(1, name="billing"))
        graph.add(SimpleParticipant(2))
        self.assertEqual(str(graph), "(billing,0)\n   L---(2,1)")

    def test_repr(self):
        graph = build_graph("A", DIAMOND)
        self.assertEqual(repr(graph), "Graph(root='A', size=4, levels=3)")


class TestConfig(unittest.TestCase):
    """Test configuration validation."""

    def test_defaults_are_valid(self):
        self.assertEqual(GraphConfig().validate(), [])
        self.assertEqual(GraphConfig.ascii_tree(), GraphConfig())
        self.assertEqual(GraphConfig.compact().validate(), [])

    def test_empty_indent_rejected(self):
        config = GraphConfig(render=RenderConfig(indent=""))
        self.assertIn("indent cannot be empty", config.validate())
        with self.assertRaises(ConfigurationError) as ctx:
            Graph("A", config)
        self.assertIn("indent cannot be empty", ctx.exception.problems)

    def test_newline_marker_rejected(self):
        config = GraphConfig(render=RenderConfig(branch_marker="\n"))
        self.assertEqual(len(config.validate()), 1)

    def test_probe_flag_must_be_bool(self):
        config = GraphConfig(dedupe_cycle_probe="yes")
        self.assertIn("dedupe_cycle_probe must be a bool", config.validate())


if __name__ == "__main__":
    unittest.main()

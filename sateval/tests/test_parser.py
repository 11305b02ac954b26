import unittest

from ..clause import Clause, Operator
from ..errors import InvalidClauseString
from ..instance import SatInstance
from ..literal import Literal
from ..parser import parse_clause, parse_instance, parse_literal


class TestParseLiteral(unittest.TestCase):

    def test_simple(self):
        self.assertEqual(parse_literal("a"), Literal("a"))
        self.assertEqual(parse_literal("  x_1 "), Literal("x_1"))

    def test_negations(self):
        for s in ("-a", "~a", "!a", "- a"):
            self.assertEqual(parse_literal(s), Literal("a", True))

    def test_invalid(self):
        for s in ("", "-", "--a", "a b", "a | b", "(a)"):
            with self.assertRaises(InvalidClauseString):
                parse_literal(s)


class TestParseClause(unittest.TestCase):

    def test_or(self):
        # Given
        clause_string = "a | -b | c"

        # When
        clause = parse_clause(clause_string)

        # Then
        self.assertEqual(clause, Clause(
            Operator.OR, [Literal("a"), Literal("b", True), Literal("c")]))

    def test_and(self):
        clause = parse_clause("c&~b")

        self.assertEqual(
            clause, Clause(Operator.AND, [Literal("c"), Literal("b", True)]))

    def test_single_literal_is_or(self):
        self.assertEqual(
            parse_clause("-a"), Clause(Operator.OR, [Literal("a", True)]))

    def test_empty_clauses(self):
        self.assertEqual(parse_clause("AND()"), Clause(Operator.AND))
        self.assertEqual(parse_clause(" OR( ) "), Clause(Operator.OR))

    def test_canonical_strings(self):
        for s in ("a | -b", "c & -b", "x1 | x2 | -x1", "AND()", "OR()"):
            self.assertEqual(str(parse_clause(s)), s)

    def test_invalid(self):
        # Given
        invalid = [
            "",
            "   ",
            "a |",
            "| a",
            "a b",
            "a | b & c",
            "a || b",
            "(a | b)",
            "-",
            "AND(a)",
        ]

        # Then
        for s in invalid:
            with self.assertRaises(InvalidClauseString):
                parse_clause(s)

    def test_mixed_operators_message(self):
        r_message = "Mixed operators in clause string: 'a | b & c'"

        with self.assertRaisesRegex(InvalidClauseString, r_message):
            parse_clause("a | b & c")


class TestParseInstance(unittest.TestCase):

    def test_parse_instance(self):
        # When
        instance = parse_instance(["a | b", "c & -b"])

        # Then
        self.assertIsInstance(instance, SatInstance)
        self.assertEqual([str(c) for c in instance], ["a | b", "c & -b"])

    def test_empty(self):
        self.assertEqual(parse_instance([]), SatInstance())

import unittest

from ..clause import Clause, Operator
from ..instance import ClauseReport, SatInstance
from ..literal import Literal
from ..state import InstanceState, LiteralState
from ..truth import Truth


A, NOT_A = Literal("a"), Literal("a", True)
B, NOT_B = Literal("b"), Literal("b", True)
C, NOT_C = Literal("c"), Literal("c", True)


def S(**values):
    return InstanceState.from_mapping(values)


class TestSatInstance(unittest.TestCase):

    def setUp(self):
        # (a | b) & (c & -b)
        self.instance = SatInstance([
            Clause(Operator.OR, [A, B]),
            Clause(Operator.AND, [C, NOT_B]),
        ])

    def test_satisfied(self):
        state = S(a=True, b=False, c=True)

        self.assertTrue(self.instance.satisfied_by(state))

    def test_counter_example(self):
        # Given
        state = S(a=False, b=True, c=True)

        # When
        reports = self.instance.evaluate(state)

        # Then
        self.assertFalse(self.instance.satisfied_by(state))
        self.assertEqual(
            [report.truth for report in reports], [Truth.TRUE, Truth.FALSE])

    def test_partial_assignment(self):
        state = S(a=True, c=True)

        self.assertFalse(self.instance.satisfied_by(state))
        self.assertEqual(self.instance.missing_variables(state), ["b"])

    def test_conjunction_ignores_clause_operators(self):
        # Two OR clauses must both hold
        instance = SatInstance([
            Clause(Operator.OR, [A]),
            Clause(Operator.OR, [B]),
        ])

        self.assertFalse(instance.satisfied_by(S(a=True, b=False)))
        self.assertTrue(instance.satisfied_by(S(a=True, b=True)))

    def test_empty_instance(self):
        instance = SatInstance()

        self.assertTrue(instance.satisfied_by(S()))
        self.assertTrue(instance.satisfied_by(S(a=None)))
        self.assertEqual(instance.inspect(), [])
        self.assertEqual(instance.variable_names(), [])
        self.assertEqual(instance.evaluate(S()), [])

    def test_evaluate_reports(self):
        # Given
        state = S(a=True, b=None, c=True)

        # When
        reports = self.instance.evaluate(state)

        # Then
        self.assertEqual(reports, [
            ClauseReport(0, self.instance.clauses[0], Truth.UNKNOWN),
            ClauseReport(1, self.instance.clauses[1], Truth.UNKNOWN),
        ])
        self.assertFalse(any(report.satisfied for report in reports))

    def test_inspect(self):
        # When
        literals = self.instance.inspect()

        # Then
        self.assertEqual(literals, [A, B, C])

    def test_inspect_is_deterministic(self):
        instance = SatInstance([
            Clause(Operator.AND, [NOT_C, B]),
            Clause(Operator.OR, [NOT_A, C, A]),
        ])

        self.assertEqual(instance.inspect(), instance.inspect())
        self.assertEqual(instance.inspect(), [A, B, C])

    def test_inspect_keeps_negation_of_single_polarity_variable(self):
        instance = SatInstance([Clause(Operator.OR, [NOT_B, A])])

        self.assertEqual(instance.inspect(), [A, NOT_B])

    def test_inspect_only_collapses_adjacent_inverses(self):
        # Given
        instance = SatInstance([
            Clause(Operator.OR, [A, NOT_A]),
            Clause(Operator.AND, [A]),
        ])

        # When
        literals = instance.inspect()

        # Then
        # sorted: a, a, -a; the duplicate plain literal is kept
        self.assertEqual(literals, [A, A])
        self.assertEqual(
            sorted(set(literal.name for literal in literals)),
            instance.variable_names())

    def test_variable_names(self):
        instance = SatInstance([
            Clause(Operator.OR, [NOT_C, A, A, NOT_A]),
            Clause(Operator.AND, [B, NOT_C]),
        ])

        self.assertEqual(instance.variable_names(), ["a", "b", "c"])

    def test_inspect_feeds_assignment(self):
        # Given
        literals = self.instance.inspect()
        state = InstanceState([
            LiteralState(literals[0], True),
            LiteralState(literals[1], False),
            LiteralState(literals[2], True),
        ])

        # Then
        self.assertTrue(self.instance.satisfied_by(state))

    def test_clauses_are_kept(self):
        self.assertEqual(len(self.instance), 2)
        self.assertEqual(
            list(self.instance),
            [Clause(Operator.OR, [A, B]), Clause(Operator.AND, [C, NOT_B])])

    def test_invalid_members(self):
        with self.assertRaises(TypeError):
            SatInstance(["a | b"])

    def test_from_strings(self):
        instance = SatInstance.from_strings(["a | b", "c & -b"])

        self.assertEqual(instance, self.instance)

"""
A SAT instance: an implicit conjunction of clauses.

"""
import logging

from attr import attr, attributes
from attr.validators import deep_iterable, instance_of

from .clause import Clause
from .literal import Literal
from .truth import Truth


logger = logging.getLogger(__name__)


@attributes(frozen=True)
class ClauseReport(object):
    """ The outcome of one clause of an instance under a given state. """

    index = attr(validator=instance_of(int))
    clause = attr(validator=instance_of(Clause))
    truth = attr(validator=instance_of(Truth))

    @property
    def satisfied(self):
        return self.truth is Truth.TRUE


@attributes(frozen=True, order=False)
class SatInstance(object):
    """ An ordered sequence of clauses which must all hold.

    The conjunction between clauses is fixed: it is not an :class:`Operator`
    and does not depend on the operator of any clause.
    """

    clauses = attr(
        default=(), converter=tuple,
        validator=deep_iterable(member_validator=instance_of(Clause)))

    @classmethod
    def from_strings(cls, clause_strings):
        """ Create an instance from a sequence of pretty clause strings.

        >>> instance = SatInstance.from_strings(["a | b", "c & -b"])
        >>> [str(literal) for literal in instance.inspect()]
        ['a', 'b', 'c']
        """
        from .parser import parse_instance
        return parse_instance(clause_strings)

    def __len__(self):
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)

    def inspect(self):
        """ Return the variables this instance refers to, as literals.

        Every literal of every clause is sorted, then each literal which is
        the inverse of the literal kept just before it is dropped. Since a
        plain literal sorts right before its negation, a variable used with
        both polarities is reported once, by its plain literal.

        Only adjacent inverses collapse: duplicates of the same literal are
        all kept. Use :meth:`variable_names` for one entry per variable.
        """
        literals = sorted(
            literal for clause in self.clauses for literal in clause)

        retained = []
        for literal in literals:
            if retained and literal.inverse_of(retained[-1]):
                continue
            retained.append(literal)
        return retained

    def variable_names(self):
        """ Return the sorted, distinct variable names of this instance. """
        return sorted(
            set(literal.name for clause in self.clauses for literal in clause))

    def missing_variables(self, state):
        """ Return the variable names whose value state does not determine.
        """
        return [
            name for name in self.variable_names()
            if not state.truth_of(Literal(name)).is_known
        ]

    def evaluate(self, state):
        """ Evaluate every clause against state.

        Returns
        -------
        reports : list of ClauseReport
            One report per clause, in clause order.
        """
        reports = [
            ClauseReport(index, clause, clause.evaluate(state))
            for index, clause in enumerate(self.clauses)
        ]
        logger.debug(
            "%d/%d clauses satisfied",
            sum(1 for report in reports if report.satisfied), len(reports))
        return reports

    def satisfied_by(self, state):
        """ Whether every clause is satisfied by state.

        An instance without clauses is satisfied by any state.
        """
        return all(clause.satisfied_by(state) for clause in self.clauses)

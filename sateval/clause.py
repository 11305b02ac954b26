"""
Clauses: a group of literals combined by a single operator.

"""
import enum

from attr import attr, attributes
from attr.validators import deep_iterable, instance_of

from .literal import Literal
from .truth import Truth


class Operator(enum.Enum):
    AND = "&"
    OR = "|"


@attributes(frozen=True, order=False)
class Clause(object):
    """ A clause combines its literals with exactly one operator.

    Parameters
    ----------
    operator : Operator
        How the literal truths are combined.
    literals : iterable of Literal
        The literals of the clause, kept in the given order. Duplicates are
        kept as is.
    """

    operator = attr(validator=instance_of(Operator))
    literals = attr(
        default=(), converter=tuple,
        validator=deep_iterable(member_validator=instance_of(Literal)))

    @classmethod
    def from_string(cls, s):
        """ Create a clause from a pretty string, e.g. 'a | -b' or 'c & d'.
        """
        from .parser import parse_clause
        return parse_clause(s)

    def __len__(self):
        return len(self.literals)

    def __iter__(self):
        return iter(self.literals)

    def resolve(self, state):
        """ Return the truth of each literal under state, in clause order.
        """
        return [state.truth_of(literal) for literal in self.literals]

    def evaluate(self, state):
        """ Return the three-valued truth of this clause under state.

        Any literal of unknown truth makes the whole clause UNKNOWN, even
        when the known literals alone would decide it. An empty AND clause
        is TRUE, an empty OR clause is FALSE.
        """
        truths = self.resolve(state)
        if not all(truth.is_known for truth in truths):
            return Truth.UNKNOWN

        if self.operator is Operator.OR:
            result = any(truth is Truth.TRUE for truth in truths)
        else:
            result = all(truth is Truth.TRUE for truth in truths)
        return Truth.from_value(result)

    def satisfied_by(self, state):
        """ Whether state fully determines this clause to be true. """
        return self.evaluate(state) is Truth.TRUE

    def to_string(self):
        if len(self.literals) == 0:
            return "{}()".format(self.operator.name)
        separator = " {} ".format(self.operator.value)
        return separator.join(str(literal) for literal in self.literals)

    def __str__(self):
        return self.to_string()

from attr import attr, attributes
from attr.validators import instance_of

from .errors import InvalidLiteral


def _non_empty(instance, attribute, value):
    if len(value) == 0:
        raise InvalidLiteral("A literal needs a non-empty variable name")


@attributes(frozen=True)
class Literal(object):
    """ A named boolean variable together with its polarity.

    Literals compare equal when both name and polarity match. They are
    totally ordered by name first, then by polarity, the plain literal
    sorting before its negation::

        >>> literals = [Literal("b"), Literal("a", negated=True), Literal("a")]
        >>> [str(literal) for literal in sorted(literals)]
        ['a', '-a', 'b']

    The name is an opaque identifier: two literals with the same name
    always refer to the same variable.
    """

    name = attr(validator=[instance_of(str), _non_empty])
    negated = attr(default=False, validator=instance_of(bool))

    @classmethod
    def from_string(cls, s):
        """ Create a literal from a pretty string such as 'a' or '-a'. """
        # FIXME: local import to workaround circular imports
        from .parser import parse_literal
        return parse_literal(s)

    def same_name_as(self, other):
        """ Whether both literals refer to the same variable. """
        return self.name == other.name

    def inverse_of(self, other):
        """ Whether other is the same variable with the opposite polarity.
        """
        return self.same_name_as(other) and self.negated != other.negated

    def negate(self):
        return Literal(self.name, not self.negated)

    def __str__(self):
        return '{}{}'.format('-' if self.negated else '', self.name)

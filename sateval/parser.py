"""
Parser for pretty literal and clause strings.

A literal is a variable name, optionally prefixed by a negation mark
('-', '~' or '!'). A clause joins literals with either '|' (OR) or '&'
(AND), never both::

    a | -b
    c & ~b

'AND()' and 'OR()' denote empty clauses.
"""
import re

from .clause import Clause, Operator
from .errors import InvalidClauseString
from .instance import SatInstance
from .literal import Literal


_NAME_R = r"[^\s|&()~!\-][^\s|&()]*"
_NOT_R = r"[\-~!]"
_OR_R = r"\|"
_AND_R = r"&"
_WS_R = r"\s+"

_CLAUSE_SCANNER = re.Scanner([
    (_NAME_R, lambda scanner, token: NameToken(token)),
    (_NOT_R, lambda scanner, token: NotToken(token)),
    (_OR_R, lambda scanner, token: OrToken(token)),
    (_AND_R, lambda scanner, token: AndToken(token)),
    (_WS_R, lambda scanner, token: None),
])

_EMPTY_CLAUSE_R = re.compile(r"^\s*(AND|OR)\(\s*\)\s*$")


class Token(object):
    kind = None

    def __init__(self, value=None):
        self.value = value

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.value)


class NameToken(Token):
    kind = "name"


class NotToken(Token):
    kind = "not"


class OperatorToken(Token):
    kind = "operator"
    operator = None


class OrToken(OperatorToken):
    kind = "or"
    operator = Operator.OR


class AndToken(OperatorToken):
    kind = "and"
    operator = Operator.AND


def _tokenize(scanner, s):
    scanned, remaining = scanner.scan(s)
    if len(remaining) > 0:
        msg = "Invalid clause string: {0!r}".format(s)
        raise InvalidClauseString(msg)
    return scanned


class _ClauseParser(object):
    """A simple parser for clause strings."""
    def __init__(self):
        self._scanner = _CLAUSE_SCANNER

    def parse_literal(self, literal_string):
        tokens = _tokenize(self._scanner, literal_string)
        literal, position = self._literal(tokens, 0, literal_string)
        if position != len(tokens):
            msg = "Invalid literal string: {0!r}".format(literal_string)
            raise InvalidClauseString(msg)
        return literal

    def parse(self, clause_string):
        m = _EMPTY_CLAUSE_R.match(clause_string)
        if m is not None:
            return Clause(Operator[m.group(1)], ())

        tokens = _tokenize(self._scanner, clause_string)
        if len(tokens) == 0:
            msg = "Empty clause string: {0!r}".format(clause_string)
            raise InvalidClauseString(msg)

        operator = None
        literals = []
        position = 0
        while True:
            literal, position = self._literal(tokens, position, clause_string)
            literals.append(literal)
            if position == len(tokens):
                break

            token = tokens[position]
            if not isinstance(token, OperatorToken):
                msg = "Expected '|' or '&' after {0!r} in {1!r}".format(
                    str(literal), clause_string)
                raise InvalidClauseString(msg)
            if operator is None:
                operator = token.operator
            elif token.operator is not operator:
                msg = "Mixed operators in clause string: {0!r}".format(
                    clause_string)
                raise InvalidClauseString(msg)
            position += 1

        # A lone literal is a disjunction of one.
        return Clause(operator or Operator.OR, literals)

    def _literal(self, tokens, position, s):
        negated = False
        if position < len(tokens) and isinstance(tokens[position], NotToken):
            negated = True
            position += 1

        if position >= len(tokens) or \
                not isinstance(tokens[position], NameToken):
            msg = "Expected a variable name at token {0} of {1!r}".format(
                position, s)
            raise InvalidClauseString(msg)
        return Literal(tokens[position].value, negated), position + 1


_PARSER = _ClauseParser()


def parse_literal(literal_string):
    """ Parse a single literal, e.g. '-a'. """
    return _PARSER.parse_literal(literal_string)


def parse_clause(clause_string):
    """ Parse a clause string, e.g. 'a | -b'. """
    return _PARSER.parse(clause_string)


def parse_instance(clause_strings):
    """ Parse a sequence of clause strings into a SatInstance. """
    return SatInstance(parse_clause(s) for s in clause_strings)

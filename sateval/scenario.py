"""
YAML scenario files: an instance, an assignment and the expected outcome.

A scenario looks as follows::

    clauses:
      - a | b
      - c & -b
    assignment:
      a: true
      b: false
      c: true
    satisfied: true

"""
import logging

import yaml

from .errors import InvalidClauseString, InvalidLiteral, InvalidScenario
from .parser import parse_instance
from .state import InstanceState


logger = logging.getLogger(__name__)


_KEYS = ("clauses", "assignment", "satisfied")


def _get(data, key, default):
    value = data.get(key)
    return default if value is None else value


def _parse_clauses(data, path):
    clauses = _get(data, "clauses", [])
    if not isinstance(clauses, list) or \
            not all(isinstance(c, str) for c in clauses):
        raise InvalidScenario("'clauses' must be a list of strings", path)
    try:
        return parse_instance(clauses)
    except (InvalidClauseString, InvalidLiteral) as e:
        raise InvalidScenario(str(e), path) from e


def _parse_assignment(data, path):
    assignment = _get(data, "assignment", {})
    if not isinstance(assignment, dict):
        raise InvalidScenario("'assignment' must be a mapping", path)
    for name, value in assignment.items():
        if not isinstance(name, str):
            # YAML reads unquoted on/off/yes/no and numbers as non strings
            msg = ("variable name {!r} in 'assignment' was read as {}, "
                   "quote it to use it as a name")
            raise InvalidScenario(
                msg.format(name, type(name).__name__), path)
        if len(name) == 0:
            raise InvalidScenario("empty variable name in 'assignment'", path)
        if value is not None and not isinstance(value, bool):
            msg = "value of {!r} must be true, false or null, got {!r}"
            raise InvalidScenario(msg.format(name, value), path)
    return InstanceState.from_mapping(assignment)


class Scenario(object):

    @classmethod
    def from_yaml(cls, file_or_filename):
        if isinstance(file_or_filename, str):
            path = file_or_filename
            with open(file_or_filename, encoding="utf-8") as fp:
                data = cls._load(fp, path)
        else:
            path = getattr(file_or_filename, "name", None)
            data = cls._load(file_or_filename, path)

        if not isinstance(data, dict):
            raise InvalidScenario("a scenario must be a mapping", path)

        unknown = sorted(str(key) for key in data if key not in _KEYS)
        if unknown:
            msg = "unknown keys: {}".format(", ".join(unknown))
            raise InvalidScenario(msg, path)

        instance = _parse_clauses(data, path)
        state = _parse_assignment(data, path)

        satisfied = data.get("satisfied")
        if satisfied is not None and not isinstance(satisfied, bool):
            msg = "'satisfied' must be true or false, got {!r}"
            raise InvalidScenario(msg.format(satisfied), path)

        logger.debug("Loaded scenario %s: %d clauses, %d states",
                     path, len(instance), len(state))
        return cls(instance, state, satisfied)

    @staticmethod
    def _load(fp, path):
        try:
            return yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise InvalidScenario("invalid YAML: {}".format(e), path) from e
        except UnicodeDecodeError as e:
            raise InvalidScenario("not valid UTF-8: {}".format(e), path) from e

    def __init__(self, instance, state, satisfied=None):
        self.instance = instance
        self.state = state
        self.satisfied = satisfied

    @property
    def has_expectation(self):
        return self.satisfied is not None

    def evaluate(self):
        return self.instance.satisfied_by(self.state)

    def check(self):
        """ Whether the instance evaluates to the expected outcome.

        Always True for scenarios without an expected outcome.
        """
        if not self.has_expectation:
            return True
        return self.evaluate() == self.satisfied

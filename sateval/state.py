#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
from collections import OrderedDict

from attr import attr, attributes
from attr.validators import instance_of, optional

from .literal import Literal
from .truth import Truth


logger = logging.getLogger(__name__)


@attributes(frozen=True)
class LiteralState(object):
    """ The observed value of a variable.

    ``value`` is the truth of the bare variable ``literal.name``; None means
    the value is not determined yet. Clauses apply their own polarity on
    top of it, so the polarity of ``literal`` itself does not take part in
    evaluation.
    """

    literal = attr(validator=instance_of(Literal))
    value = attr(default=None, validator=optional(instance_of(bool)))

    @property
    def name(self):
        return self.literal.name

    @property
    def truth(self):
        return Truth.from_value(self.value)


class InstanceState(object):

    """A possibly partial assignment of truth values, keyed by variable
    name."""

    @classmethod
    def from_mapping(cls, mapping):
        """ Create a state from a mapping of variable name to value.

        Parameters
        ----------
        mapping : dict
            Maps variable names to True, False or None.
        """
        return cls(
            LiteralState(Literal(name), value)
            for name, value in mapping.items()
        )

    def __init__(self, states=None):
        self._states = OrderedDict()
        for state in states or ():
            if not isinstance(state, LiteralState):
                msg = "InstanceState expects LiteralState instances, got {!r}"
                raise TypeError(msg.format(state))
            if state.name in self._states:
                # The first state given for a name is authoritative.
                logger.debug("Ignoring duplicate state %r for %r",
                             state, state.name)
                continue
            self._states[state.name] = state

    @property
    def states(self):
        return tuple(self._states.values())

    def lookup(self, name):
        """ Return the state recorded for name, or None. """
        return self._states.get(name)

    def truth_of(self, literal):
        """ Return the truth of literal, its polarity applied.

        A variable without state, or whose value is None, is UNKNOWN.
        """
        state = self._states.get(literal.name)
        if state is None:
            return Truth.UNKNOWN
        truth = state.truth
        if literal.negated:
            return truth.negate()
        return truth

    def __len__(self):
        return len(self._states)

    def __iter__(self):
        return iter(self._states.values())

    def __contains__(self, name):
        if isinstance(name, Literal):
            name = name.name
        return name in self._states

    def __eq__(self, other):
        if not isinstance(other, InstanceState):
            return NotImplemented
        return self.states == other.states

    __hash__ = None

    def __repr__(self):
        return "InstanceState({!r})".format(list(self.states))

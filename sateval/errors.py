#!/usr/bin/env python
# -*- coding: utf-8 -*-


class SatEvalException(Exception):
    pass


class InvalidLiteral(SatEvalException):
    pass


class InvalidClauseString(SatEvalException):
    pass


class InvalidScenario(SatEvalException):
    def __init__(self, reason, path=None):
        self.reason = reason
        self.path = path
        if path is not None:
            msg = "{0}: {1}".format(path, reason)
        else:
            msg = reason
        super(InvalidScenario, self).__init__(msg)

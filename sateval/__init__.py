from .clause import Clause, Operator
from .errors import (
    SatEvalException, InvalidClauseString, InvalidLiteral, InvalidScenario
)
from .instance import ClauseReport, SatInstance
from .literal import Literal
from .parser import parse_clause, parse_instance, parse_literal
from .scenario import Scenario
from .state import InstanceState, LiteralState
from .truth import Truth

try:  # pragma: no cover
    from ._version import version as __version__
except ImportError:  # pragma: no cover
    __version__ = "unknown"


__all__ = [
    'Clause',
    'ClauseReport',
    'InstanceState',
    'InvalidClauseString',
    'InvalidLiteral',
    'InvalidScenario',
    'Literal',
    'LiteralState',
    'Operator',
    'SatEvalException',
    'SatInstance',
    'Scenario',
    'Truth',
    'parse_clause',
    'parse_instance',
    'parse_literal',
    '__version__']

import argparse
import logging
import sys

from sateval.errors import InvalidScenario
from sateval.scenario import Scenario
from sateval.utils import timed_context


def evaluate_and_print(scenario, inspect=False, explain=False,
                       stream=None):
    """ Evaluate a scenario and print the outcome.

    Returns whether the outcome matches the scenario's expectation.
    """
    stream = stream or sys.stdout
    instance, state = scenario.instance, scenario.state

    if inspect:
        literals = instance.inspect()
        print("VARIABLES: {}".format(
            " ".join(str(literal) for literal in literals)), file=stream)

    with timed_context("Evaluate") as timer:
        satisfied = instance.satisfied_by(state)
        reports = instance.evaluate(state) if explain else []

    for report in reports:
        print("{:>4} {:7} : {}".format(
            report.index, str(report.truth), report.clause), file=stream)

    missing = instance.missing_variables(state)
    if missing:
        print("UNKNOWN: {}".format(" ".join(missing)), file=stream)

    print("SATISFIED" if satisfied else "UNSATISFIED", file=stream)

    fmt = "ELAPSED : {description:20} : {elapsed:e}"
    print(timer.pretty(fmt), file=sys.stderr)

    matched = scenario.check()
    if not matched:
        msg = "MISMATCH: expected {}"
        expected = "SATISFIED" if scenario.satisfied else "UNSATISFIED"
        print(msg.format(expected), file=stream)
    return matched


def main(argv=None):
    argv = argv or sys.argv[1:]

    p = argparse.ArgumentParser(
        description="Evaluate a SAT instance against an assignment.")
    p.add_argument("scenario", help="Path to the YAML scenario file.")
    p.add_argument("--inspect", action="store_true",
                   help="Print the variables of the instance.")
    p.add_argument("--explain", action="store_true",
                   help="Print the truth of every clause.")
    p.add_argument("-d", "--debug", default=0, action="count")

    ns = p.parse_args(argv)

    logging.basicConfig(
        format=('%(asctime)s %(levelname)-8.8s [%(name)s:%(lineno)s]'
                ' %(message)s'),
        datefmt='%Y-%m-%d %H:%M:%S',
        level=('WARNING', 'INFO', 'DEBUG')[min(ns.debug, 2)])

    try:
        scenario = Scenario.from_yaml(ns.scenario)
    except (InvalidScenario, OSError) as e:
        print("INVALID SCENARIO: {}".format(e), file=sys.stderr)
        return 2

    matched = evaluate_and_print(scenario, inspect=ns.inspect,
                                 explain=ns.explain)
    return 0 if matched else 1


if __name__ == '__main__':
    sys.exit(main())

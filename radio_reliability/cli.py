#!/usr/bin/env python3
"""
Radio Reliability Calculator - Command Line

Interactive front-end: prompts for the components of a scheme, prints the
component list and the connection list, then asks for the connection type
and prints the reliability metrics.

Usage:
    radio-reliability                       interactive prompts
    radio-reliability --csv parts.csv       components from a CSV file
    radio-reliability --topology 2          skip the connection prompt
    radio-reliability --report out.md       also write a report

Exit status: 0 on completion (an invalid connection choice or an empty
scheme is reported and still exits 0), 2 on unparsable or invalid input
or a report that cannot be written.
"""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .bom_import import load_components_csv
from .components import SHARED_FIELDS, ComponentInput, get_field_definitions, kind_from_selector
from .config import load_settings
from .errors import EmptySchemeError, InvalidChoiceError, ParseError, ValidationError
from .i18n import Messages
from .reliability_math import parse_float, parse_int
from .report_generator import ReportData, ReportGenerator
from .scheme import Scheme

logger = logging.getLogger(__name__)


class PromptSession:
    """Prompt / whitespace-delimited token reader over text streams."""

    def __init__(self, messages: Messages, stdin: TextIO = None, stdout: TextIO = None):
        self.messages = messages
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._tokens: List[str] = []

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def write_lines(self, lines) -> None:
        for line in lines:
            self.write(line)

    def _next_token(self, field: str) -> str:
        while not self._tokens:
            line = self.stdin.readline()
            if not line:
                raise ParseError(field, "", f"Unexpected end of input while reading {field!r}")
            self._tokens = line.split()
        return self._tokens.pop(0)

    def ask(self, prompt_key: str, field: str) -> str:
        self.stdout.write(self.messages.get(prompt_key))
        self.stdout.flush()
        return self._next_token(field)

    def ask_float(self, prompt_key: str, field: str) -> float:
        return parse_float(self.ask(prompt_key, field), field)

    def ask_int(self, prompt_key: str, field: str) -> int:
        return parse_int(self.ask(prompt_key, field), field)


def read_component(session: PromptSession) -> ComponentInput:
    """Prompt for one component: selector, shared fields, then kind fields."""
    selector = session.ask("prompt.kind", "kind")
    shared = {}
    for name, d in SHARED_FIELDS.items():
        shared[name] = session.ask_float(d["prompt"], name)

    specific = {}
    kind = kind_from_selector(selector)
    if kind is not None:
        for name, d in get_field_definitions(kind).items():
            specific[name] = session.ask_float(d["prompt"], name)
    return ComponentInput(selector=selector, specific=specific, **shared)


def store_entries(session: PromptSession, scheme: Scheme, entries) -> int:
    stored = 0
    for i, entry in enumerate(entries):
        if scheme.input_component(i, entry) is None:
            session.write(scheme.messages.get("error.unknown_kind"))
        else:
            stored += 1
    return stored


def input_components(session: PromptSession, scheme: Scheme) -> int:
    """Interactive component input. Returns the number of stored components."""
    count = session.ask_int("prompt.count", "count")
    # Lazy so each component is stored before the next one is prompted
    entries = (read_component(session) for _ in range(count))
    return store_entries(session, scheme, entries)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radio-reliability",
        description="Reliability metrics for a series or parallel radio component scheme.",
    )
    parser.add_argument("--csv", metavar="FILE", help="read components from a CSV file")
    parser.add_argument("--topology", metavar="N", help="connection type: 1 series, 2 parallel")
    parser.add_argument("--config", metavar="FILE", help="settings JSON file")
    parser.add_argument("--report", metavar="FILE", help="write a report after calculation")
    parser.add_argument(
        "--format",
        choices=["text", "markdown", "csv", "json"],
        help="report format (default: from the report file extension)",
    )
    return parser


def run(argv: Optional[List[str]] = None, stdin: TextIO = None, stdout: TextIO = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    msg = Messages(settings.language)
    session = PromptSession(msg, stdin, stdout)

    try:
        scheme = Scheme.from_settings(settings, messages=msg)
        if args.csv:
            store_entries(session, scheme, load_components_csv(args.csv))
        else:
            input_components(session, scheme)

        session.write_lines(scheme.display_components())
        session.write_lines(scheme.display_connection_scheme())

        choice = args.topology
        if choice is None:
            choice = session.ask("prompt.connection", "connection")
        metrics = scheme.calculate_reliability(choice)
    except ParseError as e:
        session.write(msg.get("error.parse", field=e.field, raw=e.raw))
        logger.error("%s", e)
        return 2
    except ValidationError as e:
        session.write(str(e))
        logger.error("%s", e)
        return 2
    except InvalidChoiceError:
        session.write(msg.get("error.invalid_choice"))
        return 0
    except EmptySchemeError:
        session.write(msg.get("error.empty_scheme"))
        return 0

    session.write_lines(scheme.format_metrics(metrics))

    if args.report:
        try:
            ReportGenerator().write(ReportData.from_scheme(scheme, metrics), args.report, args.format)
        except OSError as e:
            session.write(msg.get("error.report", path=args.report, reason=e.strerror or e))
            logger.error("Cannot write report %s: %s", args.report, e)
            return 2
        logger.info("Report written to %s", args.report)
    return 0


def main() -> int:
    return run()


if __name__ == "__main__":
    sys.exit(main())

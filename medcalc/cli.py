"""
Command-line front end for the MedCalc catalog.

Usage:
    medcalc list --specialty Cardiology
    medcalc list --search gap
    medcalc show bmi
    medcalc calc bmi weight=70 height=175
    medcalc ask "70kg patient with a large leg burn, what should I use?"
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional, Sequence

from rich import print as rprint

from .advisor import ClinicalAdvisor
from .engine import CalculatorSession
from .models import ALL_SPECIALTIES, CalculatorDefinition, Specialty
from .registry import REGISTRY, FormulaRegistry

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "These calculators are provided for informational purposes only. Results should not "
    "replace professional clinical judgment. Always verify calculations independently "
    "before administering medication or treatments."
)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity level."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _format_input(inp) -> str:
    unit = f" [{inp.unit}]" if inp.unit else ""
    line = f"  {inp.id}: {inp.label}{unit}"
    if inp.is_choice:
        opts = ", ".join(f"{c.label}={c.value:g}" for c in inp.choices)
        line += f" (choices: {opts})"
    if inp.default_value is not None:
        line += f" default={inp.default_value:g}"
    return line


def _cmd_list(args: argparse.Namespace, registry: FormulaRegistry) -> int:
    calcs = registry.by_specialty_and_search(args.specialty, args.search)
    if not calcs:
        print("No calculators found.")
        return 0
    for c in calcs:
        print(f"{c.id:<20} {c.short_name:<20} {c.specialty.value:<18} {c.name}")
    return 0


def _cmd_show(args: argparse.Namespace, registry: FormulaRegistry) -> int:
    calc = registry.get(args.calc_id)
    print(f"{calc.name} ({calc.short_name}) - {calc.specialty.value}")
    print(calc.description)
    print("Inputs:")
    for inp in calc.inputs:
        print(_format_input(inp))
    return 0


def _parse_assignments(calc: CalculatorDefinition, pairs: Sequence[str]) -> List[tuple]:
    assignments = []
    for pair in pairs:
        field_id, sep, raw = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected field=value, got '{pair}'")
        calc.get_input(field_id)
        assignments.append((field_id, raw))
    return assignments


def _cmd_calc(args: argparse.Namespace, registry: FormulaRegistry) -> int:
    calc = registry.get(args.calc_id)
    session = CalculatorSession(calc)
    for field_id, raw in _parse_assignments(calc, args.values):
        session.set(field_id, raw)
    result = session.calculate()

    if args.json:
        print(json.dumps({"calculator": calc.id, "inputs": session.values, **result.model_dump()}, indent=2))
        return 0
    rprint(f"[bold]{calc.name}[/bold]: {result.value} {result.unit}")
    if result.interpretation:
        print(result.interpretation)
    print()
    print(DISCLAIMER)
    return 0


def _cmd_ask(args: argparse.Namespace, registry: FormulaRegistry) -> int:
    advisor = ClinicalAdvisor(calculators=registry.all())
    answer = advisor.ask(args.query)
    if answer is None:
        print("Please enter a question.")
        return 2
    print(answer)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="medcalc", description="Medical reference calculators.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List calculators")
    p_list.add_argument(
        "--specialty",
        default=ALL_SPECIALTIES,
        choices=[ALL_SPECIALTIES] + [s.value for s in Specialty],
        help="Filter by specialty (default: All)",
    )
    p_list.add_argument("--search", default="", help="Match name or short name")
    p_list.set_defaults(func=_cmd_list)

    p_show = sub.add_parser("show", help="Describe a calculator and its inputs")
    p_show.add_argument("calc_id")
    p_show.set_defaults(func=_cmd_show)

    p_calc = sub.add_parser("calc", help="Evaluate a calculator")
    p_calc.add_argument("calc_id")
    p_calc.add_argument("values", nargs="*", metavar="field=value")
    p_calc.add_argument("--json", action="store_true", help="Print the result as JSON")
    p_calc.set_defaults(func=_cmd_calc)

    p_ask = sub.add_parser("ask", help="Ask the clinical assistant which calculator to use")
    p_ask.add_argument("query")
    p_ask.set_defaults(func=_cmd_ask)
    return parser


def main(argv: Optional[Sequence[str]] = None, registry: FormulaRegistry = REGISTRY) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        return args.func(args, registry)
    except (KeyError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        message = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
        print(f"Error: {message}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

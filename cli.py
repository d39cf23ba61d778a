#!/usr/bin/env python3
"""
Main CLI for the portfolio advisor.
Usage:
  python cli.py advise LEDGER.csv [--period 1y] [--report PATH]
  python cli.py sip MONTHLY RATE YEARS
  python cli.py fd PRINCIPAL RATE YEARS
  python cli.py allocation PROFILE
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from analysis.advisor_job import AdvisorConfig, AdvisorJobError, run_advisor
from planning.allocation import RiskProfile, PlanningError, allocation_suggestion
from planning.fd import calculate_fd
from planning.sip import calculate_sip
from reports.advisor_report import render_advisor_report
from reports.atomic_writer import write_text_atomic, AtomicWriteError
from reports.formatters import format_currency, format_percentage


# Load environment variables
load_dotenv()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        description='Portfolio advisor: signals, health scoring, and planning calculators',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py advise ./data/ledger.csv
  python cli.py advise ./data/ledger.csv --period 2y --report ./reports/advisor.md
  python cli.py sip 5000 12 10
  python cli.py fd 100000 7 5
  python cli.py allocation balanced
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    advise = subparsers.add_parser('advise', help='Analyze holdings from a transaction ledger CSV')
    advise.add_argument('ledger', help='CSV with ticker, quantity, average_price, is_buy columns')
    advise.add_argument('--period',
                        default=os.getenv('ADVISOR_HISTORY_PERIOD', '1y'),
                        help='History window: 1m, 3m, 6m, 1y, 2y, 5y (default: 1y)')
    advise.add_argument('--output-dir',
                        default=os.getenv('ADVISOR_OUTPUT_DIR', './data/processed/advisor'),
                        help='Directory for result JSON (default: ./data/processed/advisor)')
    advise.add_argument('--no-save',
                        action='store_true',
                        help='Do not write result JSON')
    advise.add_argument('--report',
                        help='Write Markdown report to this path (default: print to stdout)')

    sip = subparsers.add_parser('sip', help='Monthly SIP future value')
    sip.add_argument('monthly', type=float, help='Monthly contribution')
    sip.add_argument('rate', type=float, help='Expected annual return (%%)')
    sip.add_argument('years', type=float, help='Investment horizon in years')

    fd = subparsers.add_parser('fd', help='Fixed deposit maturity (quarterly compounding)')
    fd.add_argument('principal', type=float, help='Deposit amount')
    fd.add_argument('rate', type=float, help='Annual interest rate (%%)')
    fd.add_argument('years', type=float, help='Term in years')

    allocation = subparsers.add_parser('allocation', help='Suggested asset allocation')
    allocation.add_argument('profile', choices=[p.value for p in RiskProfile], help='Risk profile')

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(
        level=os.getenv('ADVISOR_LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    args = build_parser().parse_args(argv)

    if args.command == 'advise':
        return advise(args)
    elif args.command == 'sip':
        return sip(args)
    elif args.command == 'fd':
        return fd(args)
    else:
        return allocation(args)


def advise(args) -> int:
    """Run the advisor over a ledger and emit the Markdown report."""
    try:
        config = AdvisorConfig(
            ledger_path=Path(args.ledger),
            period=args.period,
            output_dir=None if args.no_save else Path(args.output_dir)
        )
    except AdvisorJobError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    result = run_advisor(config)

    if result['status'] != 'completed':
        print(f"ERROR: Advisor failed: {result['error_message']}", file=sys.stderr)
        return 1

    report = render_advisor_report(result)

    if args.report:
        try:
            write_text_atomic(report, Path(args.report))
        except AtomicWriteError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        print(f"Report: {args.report}")
    else:
        print(report)

    if result['output_path']:
        print(f"Metrics: {result['output_path']}")

    return 0


def sip(args) -> int:
    """Print SIP projection."""
    result = calculate_sip(args.monthly, args.rate, args.years)

    print(f"Total invested:  {format_currency(result.total_invested)}")
    print(f"Future value:    {format_currency(result.future_value)}")
    print(f"Wealth gained:   {format_currency(result.wealth_gained)}")
    print(f"Return multiple: {result.return_multiple:.2f}x")
    return 0


def fd(args) -> int:
    """Print FD maturity."""
    result = calculate_fd(args.principal, args.rate, args.years)

    print(f"Principal:        {format_currency(result.principal)}")
    print(f"Maturity amount:  {format_currency(result.maturity_amount)}")
    print(f"Interest earned:  {format_currency(result.interest_earned)}")
    print(f"Effective return: {format_percentage(result.effective_return, 2)}")
    return 0


def allocation(args) -> int:
    """Print allocation for a risk profile."""
    try:
        suggestion = allocation_suggestion(args.profile)
    except PlanningError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"{suggestion.label}: {suggestion.description}")
    print()
    print(f"  Equity: {suggestion.equity}%")
    print(f"  Debt:   {suggestion.debt}%")
    print(f"  Gold:   {suggestion.gold}%")
    print(f"  Liquid: {suggestion.liquid}%")
    print()
    for tip in suggestion.suggestions:
        print(f"- {tip}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

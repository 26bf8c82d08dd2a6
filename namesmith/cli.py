#!/usr/bin/env python3
"""
namesmith CLI
=============
Command-line interface for keyword-driven brand name generation.

Usage:
    namesmith generate "mental health" --style brandable
    namesmith generate flow --style compound --randomness low --seed 7
    namesmith discover "privacy app" --ai
    namesmith check Clovana
    namesmith roots "privacy focused mental health app"
"""

import argparse
import json
import logging
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from namesmith import __version__
from namesmith.models import NameStyle, RandomnessLevel

STYLES = [s.value for s in NameStyle]
RANDOMNESS_LEVELS = [r.value for r in RandomnessLevel]


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False, console: Console = None):
        self.quiet = quiet
        self.console = console or Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        self.err_console.print(f"[red]Error:[/red] {msg}")

    def success(self, msg: str):
        if not self.quiet:
            self.console.print(f"[green]OK:[/green] {msg}")

    def json(self, data):
        # JSON is the payload, so it ignores quiet mode
        print(json.dumps(data, indent=2))

    def table(self, headers: list, rows: list, title: str = None):
        """Print a formatted table."""
        if self.quiet:
            return
        table = Table(title=title, box=box.SIMPLE_HEAD)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def _print_names(names, out: Output, verbose: bool = False):
    rows = []
    for i, c in enumerate(names, 1):
        row = [i, c.name, c.style.value, f"{c.score:.1f}"]
        if verbose:
            row.append(c.rationale or '-')
        rows.append(row)

    headers = ['#', 'Name', 'Style', 'Score']
    if verbose:
        headers.append('Rationale')
    out.table(headers, rows)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate brand names with the procedural core."""
    from namesmith.generators import BrandNameGenerator
    from namesmith.models import GenerationRequest

    request = GenerationRequest.create(
        args.keyword, args.style, args.randomness, args.availability)
    names = BrandNameGenerator(seed=args.seed).generate(request)

    if args.json:
        out.json([c.to_dict() for c in names])
        return 0

    if not names:
        out.print("No names generated.")
        return 0

    _print_names(names, out, verbose=args.verbose)
    return 0


def cmd_discover(args, out: Output):
    """Run the multi-attempt pipeline, optionally with Claude as primary source."""
    from namesmith.config import get_config
    from namesmith.entropy import get_rng
    from namesmith.models import GenerationRequest
    from namesmith.pipeline import NamePipeline
    from namesmith.sources import AnthropicNameSource, LocalNameSource

    request = GenerationRequest.create(
        args.keyword, args.style, args.randomness,
        industry=args.industry, vibe=args.vibe, country=args.country,
    )

    local = LocalNameSource(seed=args.seed)
    primary = None
    if args.ai:
        if not get_config().has_anthropic:
            out.error("AI generation requires ANTHROPIC_API_KEY in .env or the environment")
            return 1
        primary = AnthropicNameSource(rng=get_rng(args.seed))

    result = NamePipeline(primary=primary, fallback=local).run(request)

    if args.json:
        out.json({
            'source': result.source,
            'attempts': result.attempts,
            'names': [c.to_dict() for c in result.names],
        })
        return 0

    out.print(f"Source: {result.source}, attempts: {result.attempts}")
    if not result.names:
        out.print("No names generated.")
        return 0
    _print_names(result.names, out, verbose=args.verbose)
    return 0


def cmd_check(args, out: Output):
    """Run the quality gate on a single name."""
    from namesmith.quality import check_quality

    ok, reason = check_quality(args.name)
    if ok:
        out.success(f"{args.name} passes the quality gate")
        return 0
    out.print(f"{args.name} rejected: {reason}")
    return 1


def cmd_roots(args, out: Output):
    """Show the root words extracted from a keyword."""
    from namesmith.keywords import extract_keywords

    roots = extract_keywords(args.keyword)
    if args.json:
        out.json(roots)
    else:
        out.print(', '.join(roots))
    return 0


def cmd_styles(args, out: Output):
    """List available naming styles."""
    out.table(['Style'], [[s] for s in STYLES])
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namesmith',
        description='namesmith - keyword-driven brand name generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate "mental health" --style brandable
  %(prog)s generate flow --style compound --randomness low --seed 7
  %(prog)s discover "privacy app" --ai --industry Health
  %(prog)s check Clovana
  %(prog)s roots "privacy focused mental health app"
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    def add_generation_args(p):
        p.add_argument('keyword', help='Keyword or short description')
        p.add_argument('--style', '-s', choices=STYLES, default='auto', help='Naming style (default: auto)')
        p.add_argument('--randomness', '-r', choices=RANDOMNESS_LEVELS, default='medium',
                       help='Score variance and shuffling (default: medium)')
        p.add_argument('--seed', type=int, help='Seed for reproducible output')
        p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
        p.add_argument('--verbose', '-v', action='store_true', help='Show detailed output and debug logs')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate brand names')
    add_generation_args(p)
    p.add_argument('--availability', '-a', action='store_true',
                   help='Favour coined names likely to have free domains')

    # --- discover ---
    p = subparsers.add_parser('discover', aliases=['disc', 'd'], help='Multi-attempt generation pipeline')
    add_generation_args(p)
    p.add_argument('--ai', action='store_true', help='Use Claude as the primary source')
    p.add_argument('--industry', '-i', help='Industry context for AI generation')
    p.add_argument('--vibe', help='Brand vibe for AI generation (e.g. Playful)')
    p.add_argument('--country', help='Target market for AI generation')

    # --- check ---
    p = subparsers.add_parser('check', aliases=['c'], help='Run the quality gate on a name')
    p.add_argument('name', help='Brand name to check')

    # --- roots ---
    p = subparsers.add_parser('roots', help='Show root words extracted from a keyword')
    p.add_argument('keyword', help='Keyword or short description')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- styles ---
    subparsers.add_parser('styles', help='List naming styles')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Handle aliases
    cmd_map = {
        'gen': 'generate', 'g': 'generate',
        'disc': 'discover', 'd': 'discover',
        'c': 'check',
    }
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))

    if getattr(args, 'verbose', False):
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    commands = {
        'generate': cmd_generate,
        'discover': cmd_discover,
        'check': cmd_check,
        'roots': cmd_roots,
        'styles': cmd_styles,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if getattr(args, 'verbose', False):
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())

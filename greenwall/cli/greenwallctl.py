#!/usr/bin/env python3
"""
greenwall - backdated contribution history generator

Creates ./contribution_project, initializes a git repository there and fills
the past year with backdated commits.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Tuple, List

import yaml
from pydantic import ValidationError

from greenwall.pattern import PatternGenerator, default_window
from greenwall.prompts import IntensityParseError, parse_intensity, prompt_missing
from greenwall.results import StepResult, ErrorKind
from greenwall.runner import create_contribution_pattern, print_summary
from greenwall.session import (
    SessionConfig,
    SessionConfigError,
    load_session_file,
    missing_fields,
)


logger = logging.getLogger(__name__)

EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='greenwall',
        description='Generate a backdated contribution history in a fresh git repository',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument('--name', dest='user_name', help='Commit author name (prompted if omitted)')
    parser.add_argument('--email', dest='user_email', help='Commit author email (prompted if omitted)')
    parser.add_argument(
        '--intensity',
        help='Probability (0-1) that a day gets commits (prompted if omitted)'
    )
    parser.add_argument('--config', type=Path, help='YAML session file')
    parser.add_argument(
        '--project-dir',
        type=Path,
        help='Repository directory (default: ./contribution_project)'
    )
    parser.add_argument('--seed', type=int, help='Seed for reproducible patterns')
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the planned commit schedule without creating anything'
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Log level for progress output on stderr (default: INFO)'
    )

    return parser


def collect_session(
    args: argparse.Namespace,
    input_fn: Callable[[str], str] = input
) -> Tuple[Optional[SessionConfig], StepResult]:
    """
    Assemble the session from the config file, flags and prompts.

    Flags override the config file; prompts fill whatever is still missing.
    """
    values = {}

    try:
        if args.config is not None:
            values.update(load_session_file(args.config))

        overrides = {
            'user_name': args.user_name,
            'user_email': args.user_email,
            'project_dir': args.project_dir,
            'seed': args.seed,
        }
        if args.intensity is not None:
            overrides['intensity'] = parse_intensity(args.intensity)

        values.update({key: value for key, value in overrides.items() if value is not None})

        values = prompt_missing(values, missing_fields(values), input_fn=input_fn)

        session = SessionConfig(**values)

    except FileNotFoundError as e:
        return None, StepResult.failed(ErrorKind.FILESYSTEM, str(e))
    except (IntensityParseError, SessionConfigError, ValidationError, yaml.YAMLError) as e:
        return None, StepResult.failed(ErrorKind.PARSE, str(e))
    except EOFError:
        return None, StepResult.failed(ErrorKind.PARSE, "Input ended before all session fields were given")

    return session, StepResult.ok(path=session.project_dir)


def print_schedule(session: SessionConfig):
    """Print the planned commits for the default window."""
    start, end = default_window()
    generator = PatternGenerator(session)

    count = 0
    for event in generator.plan(start, end):
        print(f"{event.timestamp.strftime('%Y-%m-%d %H:%M')}  {event.path}")
        count += 1

    print(f"\n✓ {count} commits planned from {start} to {end}")


def run(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input) -> int:
    """Run the CLI and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr
    )

    session, result = collect_session(args, input_fn=input_fn)
    if session is None:
        logger.error(f"Invalid session input ({result.error_kind.value}): {result.error_summary}")
        return EXIT_PARSE_ERROR

    if args.dry_run:
        print_schedule(session)
        return 0

    run_result = create_contribution_pattern(session)
    print_summary(session, run_result)
    return run_result.exit_code


def main():
    """Main CLI entry point."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(130)


if __name__ == '__main__':
    main()

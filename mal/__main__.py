"""CLI: python -m mal [--test FILE ...] [--prompt TEXT]"""

import argparse
import sys

from .config import DEFAULT_PROMPT, ReplConfig, configure_logging, get_log_level
from .fixtures import load_fixture_file, run_fixtures
from .repl import repl


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="mal",
        description="Read and print mal forms, interactively or from fixture files.",
    )
    parser.add_argument(
        "--test",
        nargs="+",
        metavar="FILE",
        help="Run .mal fixture files instead of starting the REPL",
    )
    parser.add_argument("--prompt", help="Override the REPL prompt")
    args = parser.parse_args(argv)

    config = ReplConfig(prompt=args.prompt or DEFAULT_PROMPT, log_level=get_log_level())
    configure_logging(config.log_level)

    if args.test:
        failed = 0
        total = 0
        for path in args.test:
            report = run_fixtures(load_fixture_file(path))
            total += len(report.passed) + len(report.failed)
            failed += len(report.failed)
            for case, reason in report.failed:
                print(f"{case.source}:{case.line} - FAILED: {reason}", file=sys.stderr)
        print(f"{total - failed}/{total} passed")
        sys.exit(1 if failed else 0)

    repl(config)


if __name__ == "__main__":
    main()

"""
regexform CLI - Command line interface
"""
import asyncio
import argparse
import signal
import sys
from typing import List, Optional

from loguru import logger as log

from .core import regexform
from .patterns import FormPattern, PatternConfigError, FIELDS
from .validator import FormSubmission, validate


class RegexFormCLI:
    """Command line interface for regexform"""

    def __init__(self):
        self.running = True

    async def run_server(self, patterns: FormPattern, port: int, host: str, verbose: bool = False) -> int:
        """Serve the form until a shutdown signal arrives"""

        def signal_handler():
            log.info("Shutdown signal received...")
            self.running = False

        loop = asyncio.get_running_loop()
        for sig in [signal.SIGTERM, signal.SIGINT]:
            loop.add_signal_handler(sig, signal_handler)

        app = regexform(patterns, port=port, host=host, verbose=verbose)
        try:
            if not await app.start():
                return 1
            print(f"Visit: {app.url}/")
            print("Press Ctrl+C to stop...")
            while self.running:
                await asyncio.sleep(1)
        finally:
            await app.stop()
        return 0

    def check_command(self, patterns: FormPattern, submission: FormSubmission, verbose: bool = False) -> int:
        """Validate one submission and print a line per field"""
        result = validate(submission, patterns, verbose=verbose)
        for name, field_result in result.items():
            print(f"{name}: {'ok' if field_result.is_valid else field_result.error}")
        return 0 if result.is_valid else 1


def patterns_from_args(args: argparse.Namespace) -> FormPattern:
    base = FormPattern.strict() if args.strict else FormPattern.permissive()
    overrides = {name: getattr(args, f"{name}_pattern") for name in FIELDS}
    return FormPattern.from_mapping(overrides, base=base)


def add_pattern_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--strict", action="store_true", help="Start from the strict pattern preset")
    for name in FIELDS:
        parser.add_argument(f"--{name}-pattern", help=f"Regex the {name} field must match")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="regexform", description="Regex-validated form server")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Serve the form")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Server host")
    serve_parser.add_argument("--port", type=int, default=8080, help="First port to try")
    add_pattern_arguments(serve_parser)

    # Check command
    check_parser = subparsers.add_parser("check", help="Validate values without a server")
    for name in FIELDS:
        check_parser.add_argument(f"--{name}", help=f"Submitted {name}")
    add_pattern_arguments(check_parser)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if not args.verbose:
        log.remove()
        log.add(sys.stderr, level="INFO")

    try:
        patterns = patterns_from_args(args)
    except PatternConfigError as err:
        log.error(f"Bad pattern configuration: {err}")
        return 2

    cli = RegexFormCLI()

    if args.command == "serve":
        try:
            return asyncio.run(cli.run_server(patterns, args.port, args.host, args.verbose))
        except KeyboardInterrupt:
            return 0

    submission = FormSubmission(title=args.title, phone=args.phone, mail=args.mail, save=True)
    return cli.check_command(patterns, submission, args.verbose)


if __name__ == "__main__":
    sys.exit(main())

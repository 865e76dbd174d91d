"""nbsandbox CLI.

Provides command-line interface for sandbox profiles, including:
- Generating a profile from permissions
- Minifying a profile for use as a single shell argument
- Printing the default template
"""

import argparse
import logging
import sys

from .. import __version__
from ..exceptions import NbSandboxError


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="nbsandbox",
        description="nbsandbox - macOS sandbox profiles for notebook kernels",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a sandbox profile",
        description="Generate a sandbox profile from a permissions file and options",
    )
    generate_parser.add_argument(
        "--permissions",
        "-p",
        dest="permissions_path",
        default=None,
        help="Permissions YAML file (default: from settings or standard locations)",
    )
    generate_parser.add_argument(
        "--template",
        "-t",
        dest="template_path",
        default=None,
        help="Profile template file (default: embedded notebook profile)",
    )
    generate_parser.add_argument(
        "--minify",
        action="store_true",
        default=None,
        help="Collapse the profile onto a single line",
    )
    generate_parser.add_argument(
        "--resolve",
        action="store_true",
        default=None,
        help="Resolve symlinks in declared paths",
    )
    generate_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the profile to a file instead of stdout",
    )
    for category, metavar, help_text in [
        ("allow-read", "PATH", "Allow reading PATH and below"),
        ("deny-read", "PATH", "Deny reading PATH and below"),
        ("allow-write", "PATH", "Allow writing PATH and below"),
        ("deny-write", "PATH", "Deny writing PATH and below"),
        ("allow-run", "PROGRAM", "Allow executing PROGRAM"),
        ("deny-run", "PROGRAM", "Deny executing PROGRAM"),
    ]:
        generate_parser.add_argument(
            f"--{category}",
            action="append",
            default=None,
            metavar=metavar,
            help=f"{help_text} (repeatable, replaces the file's list)",
        )
    generate_parser.add_argument(
        "--allow-net",
        action="store_true",
        help="Allow network access",
    )

    # minify command
    minify_parser = subparsers.add_parser(
        "minify",
        help="Minify a sandbox profile",
        description="Strip comments and blank lines and join the profile onto one line",
    )
    minify_parser.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="Profile file (default: stdin)",
    )
    minify_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the result to a file instead of stdout",
    )

    # template command
    template_parser = subparsers.add_parser(
        "template",
        help="Print the default profile template",
    )
    template_parser.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the template to a file instead of stdout",
    )

    return parser


def run_generate(args: argparse.Namespace) -> int:
    """Run the generate command."""
    from .profile_cmd import cmd_generate

    return cmd_generate(
        permissions_path=args.permissions_path,
        template_path=args.template_path,
        minify=args.minify,
        resolve=args.resolve,
        output=args.output,
        allow_read=args.allow_read,
        deny_read=args.deny_read,
        allow_write=args.allow_write,
        deny_write=args.deny_write,
        allow_net=args.allow_net,
        allow_run=args.allow_run,
        deny_run=args.deny_run,
    )


def run_minify(args: argparse.Namespace) -> int:
    """Run the minify command."""
    from .profile_cmd import cmd_minify

    return cmd_minify(input_path=args.input_path, output=args.output)


def run_template(args: argparse.Namespace) -> int:
    """Run the template command."""
    from .profile_cmd import cmd_template

    return cmd_template(output=args.output)


def configure_logging() -> None:
    """Configure logging from settings."""
    from ..config.settings import get_settings

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging()

    try:
        if args.command == "generate":
            return run_generate(args)
        elif args.command == "minify":
            return run_minify(args)
        elif args.command == "template":
            return run_template(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130
    except (NbSandboxError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

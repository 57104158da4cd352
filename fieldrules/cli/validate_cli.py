"""
Command-line interface for validating field values.

Usage:
    python -m fieldrules.cli.validate_cli check --value <value> --rule <rule> [--rule <rule> ...]
    python -m fieldrules.cli.validate_cli check --value <value> --rules-file <path> --field <name>
    python -m fieldrules.cli.validate_cli list-rules
"""

import argparse
import json
import sys

from fieldrules.core.rules import RuleConfigLoader, get_default_engine
from fieldrules.core.validators import RuleConfigurationError
from fieldrules.observability.logger import get_logger

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def check_command(args) -> int:
    """
    Execute the check command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    try:
        if args.rules_file:
            if not args.field:
                logger.error("--field is required with --rules-file")
                return EXIT_CONFIG_ERROR
            rules = RuleConfigLoader(args.rules_file).load_field(args.field)
        else:
            rules = args.rule or []

        result = get_default_engine().evaluate_rule_set(args.value, rules)

    except (RuleConfigurationError, FileNotFoundError, KeyError) as e:
        logger.error(f"Invalid rule configuration: {e}")
        print(json.dumps({"error": str(e), "error_type": type(e).__name__}))
        return EXIT_CONFIG_ERROR

    print(result.model_dump_json())
    return EXIT_VALID if result.valid else EXIT_INVALID


def list_rules_command(args) -> int:
    """Print every registered rule with its default message."""
    registry = get_default_engine().registry

    print(f"{'Rule':<16} {'Default message'}")
    print(f"{'-' * 60}")
    for name in sorted(registry):
        print(f"{name:<16} {registry[name].message('<param>')}")

    return EXIT_VALID


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate a field value against declarative rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a value against rules given inline
  python -m fieldrules.cli.validate_cli check --value ab --rule required --rule min:5

  # Check a value against the rules of a field in a YAML file
  python -m fieldrules.cli.validate_cli check --value jdoe42 \\
      --rules-file config/rules.yaml --field username

  # Show the built-in rules
  python -m fieldrules.cli.validate_cli list-rules
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate a value")
    check_parser.add_argument(
        "--value",
        required=True,
        help="Field value to validate"
    )
    check_parser.add_argument(
        "--rule",
        action="append",
        help="Rule identifier, repeatable, evaluated in order (e.g. min:5)"
    )
    check_parser.add_argument(
        "--rules-file",
        help="Path to a YAML rules file"
    )
    check_parser.add_argument(
        "--field",
        help="Field whose rules to use from --rules-file"
    )

    subparsers.add_parser("list-rules", help="List registered rules")

    args = parser.parse_args(argv)

    if args.command == "check":
        return check_command(args)
    elif args.command == "list-rules":
        return list_rules_command(args)

    parser.print_help()
    return EXIT_CONFIG_ERROR


if __name__ == "__main__":
    sys.exit(main())

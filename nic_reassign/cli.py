"""
NIC Reassign - Command Line Interface

Moves the NIC (and with it the private IP) of a Windows ZCA VM to a
Linux ZCA appliance VM in Azure, or reverts that move.

Usage:
    reassign-nic --original-zca-ip 10.0.0.4 --original-zvm-appliance-ip 10.0.0.5 \\
        --alternative-zca-ip 10.0.0.9

    reassign-nic --original-zca-ip 10.0.0.4 --original-zvm-appliance-ip 10.0.0.5 \\
        --alternative-zca-ip 10.0.0.9 --revert
"""

import argparse
import json
import sys
from typing import Any, Dict

import yaml

from nic_reassign.core.config import ReassignConfig, RunMode, VERSION
from nic_reassign.main import run


class OutputFormatter:
    """
    Handle output formatting of the final run summary.

    Supports: json, yaml, table
    """

    @staticmethod
    def format_output(data: Dict[str, Any], format_type: str = 'table'):
        """Format output based on format type."""
        if format_type == 'json':
            return json.dumps(data, indent=2)
        elif format_type == 'yaml':
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        elif format_type == 'table':
            return OutputFormatter._format_table(data)
        else:
            return str(data)

    @staticmethod
    def _format_table(data: Dict[str, Any]) -> str:
        """Format as a two column table."""
        lines = []
        lines.append("+-" + "-" * 50 + "-+")
        for key, value in data.items():
            lines.append(f"| {key:20} | {str(value):27} |")
        lines.append("+-" + "-" * 50 + "-+")
        return "\n".join(lines)


class ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with code 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser.

    Returns:
        Configured ArgumentParser
    """

    parser = ArgumentParser(
        prog='reassign-nic',
        description=(
            'Reassign the NIC of the Windows ZCA VM to the Linux ZCA VM. Once completed, '
            'the Linux ZCA is assigned the original Windows ZCA IP address and the Windows '
            'ZCA VM is assigned the alternative IP address. Both VMs are restarted.'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES
    To reassign the NIC:
        $ reassign-nic --original-zca-ip 10.0.0.4 \\
            --original-zvm-appliance-ip 10.0.0.5 --alternative-zca-ip 10.0.0.9

    To revert all changes, call the tool exactly as in the reassignment run
    and add --revert:
        $ reassign-nic --original-zca-ip 10.0.0.4 \\
            --original-zvm-appliance-ip 10.0.0.5 --alternative-zca-ip 10.0.0.9 --revert

NOTES
    Both VMs must be in the same subscription, resource group, region and subnet.
    The subscription defaults to AZURE_SUBSCRIPTION_ID, then to the one selected
    with: az account set --subscription <subscription_id>
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'reassign-nic v{VERSION}'
    )

    required = parser.add_argument_group('REQUIRED FLAGS')
    required.add_argument(
        '--original-zca-ip',
        metavar='IPV4',
        required=True,
        help='Current private IP address of the Windows ZCA VM.'
    )
    required.add_argument(
        '--original-zvm-appliance-ip',
        metavar='IPV4',
        required=True,
        help='Current private IP address of the Linux ZCA (ZVM appliance) VM.'
    )
    required.add_argument(
        '--alternative-zca-ip',
        metavar='IPV4',
        required=True,
        help='Free private IP address the Windows ZCA VM moves to.'
    )

    optional = parser.add_argument_group('OPTIONAL FLAGS')
    optional.add_argument(
        '--revert',
        action='store_true',
        help='Undo a previous reassignment made with the same three addresses.'
    )
    optional.add_argument(
        '--subscription',
        metavar='SUBSCRIPTION_ID',
        help='Azure subscription holding both VMs.'
    )
    optional.add_argument(
        '--dry-run',
        action='store_true',
        help='Resolve and validate, then print the planned actions without executing them.'
    )

    output = parser.add_argument_group('OUTPUT FLAGS')
    output.add_argument(
        '--verbose',
        action='store_true',
        help='Show resolved resources and every Azure call.'
    )
    output.add_argument(
        '--log-file',
        metavar='LOG_FILE',
        help='Write logs to this file.'
    )
    output.add_argument(
        '--format',
        metavar='FORMAT',
        choices=['json', 'yaml', 'table', 'disable'],
        default='table',
        help='Format of the final summary. One of: json, yaml, table, disable. Default: table'
    )

    return parser


def args_to_config(args: argparse.Namespace) -> ReassignConfig:
    """Convert arguments to ReassignConfig."""
    return ReassignConfig(
        original_zca_ip=args.original_zca_ip,
        original_appliance_ip=args.original_zvm_appliance_ip,
        alternative_zca_ip=args.alternative_zca_ip,
        mode=RunMode.REVERT if args.revert else RunMode.APPLY,
        subscription_id=args.subscription,
        verbose=args.verbose,
        log_file=args.log_file,
        dry_run=args.dry_run,
        output_format=args.format
    )


def main(argv=None):
    """Main CLI entry point."""

    parser = create_parser()
    args = parser.parse_args(argv)
    config = args_to_config(args)

    try:
        outcome = run(config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled by user.", file=sys.stderr)
        return 130  # Standard exit code for SIGINT
    except Exception as e:
        print(f"ERROR: (reassign-nic) Unexpected error: {str(e)}", file=sys.stderr)
        return 1

    if config.output_format != 'disable':
        summary = {'operation': config.mode.value}
        summary.update(outcome.to_dict())
        print(OutputFormatter.format_output(summary, config.output_format))

    return outcome.exit_code


if __name__ == '__main__':
    sys.exit(main())

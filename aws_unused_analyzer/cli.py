"""
CLI interface for AWS Unused Access Analyzer
"""
import logging
import sys

import click
import colorama
from botocore.exceptions import BotoCoreError, ClientError
from colorama import Fore, Style

from . import __version__
from .analyzer import UnusedAccessAnalyzer
from .config import DEFAULT_OUTPUT_FILE, DEFAULT_UNUSED_ACCESS_AGE, LOG_FORMAT
from .exceptions import AnalyzerError
from .session import client_config, create_session, get_owner_account
from .utils import create_pretty_table, findings_to_json, summary_rows, write_report

CONTEXT_SETTINGS = dict(help_option_names=['-h', '--help'])


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(
    version=__version__,
    prog_name='AWS Unused Access Analyzer',
    message='%(prog)s v%(version)s - Find unused IAM access in an AWS account'
)
def main():
    """
    AWS Unused Access Analyzer reports IAM users, roles, credentials and
    permissions that have not been used within a configurable number of days.

    \b
    Commands:
      analyze         Analyze the account and write a findings report
      version         Show the version and exit

    \b
    Examples:
      aws-unused-analyzer analyze --region us-west-2
      aws-unused-analyzer analyze --profile audit --unused-access-age 180
      aws-unused-analyzer analyze --output json --output-file report.json
    """
    pass


@main.command('analyze')
@click.option('--profile', default=None,
              help='AWS profile to use for authentication (from ~/.aws/credentials)')
@click.option('--region', '-r', default=None,
              help='AWS region (defaults to AWS_REGION, AWS_DEFAULT_REGION, then us-east-1)')
@click.option('--access-key', '-a', default=None, help='AWS access key id')
@click.option('--secret-key', '-s', default=None, help='AWS secret access key')
@click.option('--unused-access-age', '-u', type=click.IntRange(min=0),
              default=DEFAULT_UNUSED_ACCESS_AGE, show_default=True,
              help='Days without use after which access is reported as unused')
@click.option('--output-file', '-o', type=click.Path(dir_okay=False, writable=True),
              default=DEFAULT_OUTPUT_FILE, show_default=True,
              help='File the JSON findings report is written to')
@click.option('--output', type=click.Choice(['table', 'json', 'none']), default='table',
              show_default=True, help='What to print on stdout once the report is written')
@click.option('--best-effort', is_flag=True,
              help='Skip identities whose analysis fails instead of aborting the run')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def analyze(profile, region, access_key, secret_key, unused_access_age,
            output_file, output, best_effort, verbose):
    """
    Analyze IAM users and roles for unused access.

    \b
    Reported findings:
    • UnusedIamUserPassword   - console password not used within the age window
    • UnusedIamUserAccessKey  - access keys not used within the age window
    • UnusedIamRole           - role not assumed within the age window
    • UnusedPermission        - services and actions not accessed within the age window
    """
    colorama.init()
    configure_logging(verbose)

    try:
        session = create_session(
            region=region,
            access_key=access_key,
            secret_key=secret_key,
            profile=profile
        )
        owner_account = get_owner_account(session)
        iam_client = session.client('iam', config=client_config())
    except (AnalyzerError, ClientError, BotoCoreError) as e:
        click.echo(f"{Fore.RED}Error connecting to AWS: {e}{Style.RESET_ALL}", err=True)
        sys.exit(1)

    if output == 'table':
        click.echo(f"Analyzing account {owner_account} for access unused in the last {unused_access_age} days...")

    analyzer = UnusedAccessAnalyzer(
        iam_client,
        owner_account,
        unused_access_age=unused_access_age,
        fail_fast=not best_effort
    )
    try:
        findings = analyzer.analyze()
        write_report(findings, output_file)
    except (AnalyzerError, ClientError, BotoCoreError, OSError) as e:
        click.echo(f"{Fore.RED}Error during analysis: {e}{Style.RESET_ALL}", err=True)
        sys.exit(1)

    for arn, error in analyzer.errors:
        click.echo(f"{Fore.YELLOW}Skipped {arn}: {error}{Style.RESET_ALL}", err=True)

    if output == 'json':
        click.echo(findings_to_json(findings))
    elif output == 'table':
        if findings:
            table = create_pretty_table(
                "Unused Access Findings",
                ["Resource", "Finding", "Details"],
                summary_rows(findings)
            )
            click.echo(table.get_string())
            click.echo(f"\n{Fore.YELLOW}Analysis complete. Found {len(findings)} findings.{Style.RESET_ALL}")
        else:
            click.echo(f"{Fore.GREEN}No unused access found.{Style.RESET_ALL}")
        click.echo(f"Report written to {output_file}")


@main.command('version')
def version():
    """Display the version of AWS Unused Access Analyzer."""
    click.echo(f"AWS Unused Access Analyzer v{__version__}")


if __name__ == '__main__':
    main()

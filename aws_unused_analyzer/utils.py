"""
Report output helpers
"""
import json

from prettytable import PrettyTable

from .finding import FindingType, UnusedUserAccessKeyDetails, UnusedPermissionDetails


def create_pretty_table(title, headers, rows):
    """
    Create a prettytable for displaying results.

    Args:
        title: Table title
        headers: Column headers
        rows: Row data

    Returns:
        PrettyTable: Formatted table
    """
    table = PrettyTable()
    table.title = title
    table.field_names = headers
    for row in rows:
        table.add_row(row)
    table.align = 'l'  # Left-align text
    return table


def findings_to_json(findings):
    return json.dumps([finding.to_dict() for finding in findings], indent=2, ensure_ascii=False)


def write_report(findings, path):
    """
    Write the findings to ``path`` as a JSON array.

    Args:
        findings: list of Finding objects
        path: output file path
    """
    with open(path, 'w', encoding='utf-8') as f:
        f.write(findings_to_json(findings))


def describe_details(finding):
    """Short human-readable summary of a finding's details for the table view."""
    details = finding.finding_details
    if finding.finding_type == FindingType.UNUSED_USER_ACCESS_KEY:
        return ', '.join(d.access_key_id for d in details if isinstance(d, UnusedUserAccessKeyDetails))
    if finding.finding_type == FindingType.UNUSED_PERMISSION:
        return ', '.join(d.service_namespace for d in details if isinstance(d, UnusedPermissionDetails))

    last_accessed = details[0].last_accessed if details else None
    if last_accessed is None:
        return 'never used'
    return f"last used {last_accessed.strftime('%Y-%m-%d')}"


def summary_rows(findings):
    return [
        [finding.resource, finding.finding_type.value, describe_details(finding)]
        for finding in findings
    ]

"""
Enumerate the IAM users and roles that are old enough to evaluate.
"""
import logging

from .age import was_created_before_cutoff
from .config import SERVICE_LINKED_ROLE_PATH
from .iam import list_roles, list_users

logger = logging.getLogger(__name__)


def is_service_linked_role(role):
    return role.get('Path', '/').startswith(SERVICE_LINKED_ROLE_PATH)


def enumerate_users(iam_client, analyzed_at, age_days):
    """
    Get the IAM users created more than ``age_days`` before ``analyzed_at``.

    Younger users are skipped: having no usage yet says nothing about them.
    """
    users = []
    for user in list_users(iam_client):
        if not was_created_before_cutoff(user.get('CreateDate'), analyzed_at, age_days):
            logger.debug("Skipping user %s: created within the last %d days", user['UserName'], age_days)
            continue
        users.append(user)
    return users


def enumerate_roles(iam_client, analyzed_at, age_days):
    """
    Get the IAM roles to evaluate.

    Service-linked roles are managed by AWS and left out, as are roles
    created within the last ``age_days`` days.
    """
    roles = []
    for role in list_roles(iam_client):
        if is_service_linked_role(role):
            logger.debug("Skipping service-linked role %s", role['RoleName'])
            continue
        if not was_created_before_cutoff(role.get('CreateDate'), analyzed_at, age_days):
            logger.debug("Skipping role %s: created within the last %d days", role['RoleName'], age_days)
            continue
        roles.append(role)
    return roles


def enumerate_identities(iam_client, analyzed_at, age_days):
    """
    Args:
        iam_client: Boto3 IAM client
        analyzed_at: instant the cutoff is measured from
        age_days: unused access age in days

    Returns:
        tuple: (users, roles) as returned by ListUsers / ListRoles
    """
    users = enumerate_users(iam_client, analyzed_at, age_days)
    roles = enumerate_roles(iam_client, analyzed_at, age_days)
    logger.info("Found %d users and %d roles to analyze", len(users), len(roles))
    return users, roles

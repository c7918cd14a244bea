"""
Thin wrappers around the boto3 IAM client.

These are the only functions that look at raw IAM responses for usage
signals. Provider quirks (missing login profiles, epoch-zero "never used"
dates) are normalized here so callers only see ``None`` for "never used".
"""
import logging
from datetime import datetime, timezone

from botocore.exceptions import ClientError

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def normalize_last_used(value):
    """
    Map the provider's "never used" encodings to None.

    Args:
        value: datetime from an IAM response, or None

    Returns:
        datetime or None: None when missing or at/before the Unix epoch
    """
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    if value <= EPOCH:
        return None
    return value


def _paginate(iam_client, operation, key):
    paginator = iam_client.get_paginator(operation)
    items = []
    for page in paginator.paginate():
        items.extend(page.get(key, []))
    return items


def list_users(iam_client):
    """Get all IAM users in the account"""
    return _paginate(iam_client, 'list_users', 'Users')


def list_roles(iam_client):
    """Get all IAM roles in the account"""
    return _paginate(iam_client, 'list_roles', 'Roles')


def get_login_profile(iam_client, user_name):
    """
    Get the console login profile of a user.

    Args:
        iam_client: Boto3 IAM client
        user_name: IAM user name

    Returns:
        dict or None: the LoginProfile, None if the user has no console password
    """
    try:
        return iam_client.get_login_profile(UserName=user_name)['LoginProfile']
    except ClientError as e:
        if e.response.get('Error', {}).get('Code') == 'NoSuchEntity':
            logger.debug("User %s has no login profile", user_name)
            return None
        raise


def list_access_keys(iam_client, user_name):
    paginator = iam_client.get_paginator('list_access_keys')
    keys = []
    for page in paginator.paginate(UserName=user_name):
        keys.extend(page.get('AccessKeyMetadata', []))
    return keys


def get_access_key_last_used(iam_client, access_key_id):
    """
    Get when an access key was last used.

    Returns:
        datetime or None: None if the key has never been used
    """
    response = iam_client.get_access_key_last_used(AccessKeyId=access_key_id)
    last_used = (response.get('AccessKeyLastUsed') or {}).get('LastUsedDate')
    return normalize_last_used(last_used)


def get_role_last_used(iam_client, role_name):
    """
    Get when a role was last assumed.

    ListRoles does not return RoleLastUsed, so this calls GetRole.

    Returns:
        datetime or None: None if the role has never been assumed
    """
    role = iam_client.get_role(RoleName=role_name)['Role']
    return normalize_last_used((role.get('RoleLastUsed') or {}).get('LastUsedDate'))

"""
AWS session and credential resolution for the command line.
"""
import logging
import os

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError

from .config import DEFAULT_REGION, USER_AGENT_EXTRA
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def resolve_region(region=None):
    """
    Pick the region: explicit value, then AWS_REGION, then AWS_DEFAULT_REGION, then the default.
    """
    return (
        region
        or os.environ.get('AWS_REGION')
        or os.environ.get('AWS_DEFAULT_REGION')
        or DEFAULT_REGION
    )


def create_session(region=None, access_key=None, secret_key=None, profile=None):
    """
    Create a boto3 session from explicit keys or the default credential chain.

    Args:
        region: AWS region, resolved with resolve_region
        access_key: AWS access key id, must be given together with secret_key
        secret_key: AWS secret access key
        profile: named profile from ~/.aws/credentials

    Returns:
        boto3.Session: session with loadable credentials

    Raises:
        ConfigurationError: if only one key is given or no credentials can be found
    """
    if bool(access_key) != bool(secret_key):
        raise ConfigurationError("Both --access-key and --secret-key must be given together")

    try:
        session = boto3.Session(
            aws_access_key_id=access_key,
            aws_secret_access_key=secret_key,
            profile_name=profile,
            region_name=resolve_region(region)
        )
    except BotoCoreError as e:
        raise ConfigurationError(f"Failed to create AWS session: {e}") from e

    if session.get_credentials() is None:
        raise ConfigurationError("Failed to load AWS credentials from arguments, environment or profile")

    logger.info("Using region %s", session.region_name)
    return session


def client_config():
    return Config(user_agent_extra=USER_AGENT_EXTRA)


def get_owner_account(session):
    """Get the account id the session's credentials belong to."""
    sts_client = session.client('sts', config=client_config())
    return sts_client.get_caller_identity()['Account']

"""
Unused access analysis for IAM users and roles.

``UnusedAccessAnalyzer.analyze`` enumerates the identities of the account,
evaluates each one in turn and returns the findings in the order they were
produced: users first, then roles.
"""
import logging
import time
from datetime import datetime, timezone

from botocore.exceptions import BotoCoreError, ClientError

from . import iam
from .advisor import get_last_accessed
from .age import is_unused, was_created_before_cutoff
from .config import DEFAULT_UNUSED_ACCESS_AGE, POLL_INTERVAL_SECONDS, POLL_MAX_ATTEMPTS
from .exceptions import AnalyzerError
from .finding import (
    Finding,
    FindingType,
    ResourceType,
    UnusedPermissionDetails,
    UnusedRoleDetails,
    UnusedUserAccessKeyDetails,
    UnusedUserPasswordDetails,
)
from .identities import enumerate_identities

logger = logging.getLogger(__name__)


def utc_now():
    return datetime.now(timezone.utc)


class UnusedAccessAnalyzer:
    """
    Find unused credentials, roles and permissions in one AWS account.

    Args:
        iam_client: Boto3 IAM client
        owner_account: account id stamped on every finding
        unused_access_age: days without use after which access counts as unused
        fail_fast: abort the run on the first failing identity; when False the
            identity is logged, recorded in ``errors`` and skipped
        poll_attempts: access advisor status checks per job
        poll_interval: seconds to wait before each status check
        clock: function returning the current aware datetime, defaults to utc_now
        sleep: function used to wait between status checks
    """

    def __init__(self, iam_client, owner_account, unused_access_age=DEFAULT_UNUSED_ACCESS_AGE,
                 fail_fast=True, poll_attempts=POLL_MAX_ATTEMPTS,
                 poll_interval=POLL_INTERVAL_SECONDS, clock=None, sleep=time.sleep):
        self.iam_client = iam_client
        self.owner_account = owner_account
        self.unused_access_age = unused_access_age
        self.fail_fast = fail_fast
        self.poll_attempts = poll_attempts
        self.poll_interval = poll_interval
        self.clock = clock or utc_now
        self.sleep = sleep
        self.errors = []

    def analyze(self):
        """
        Analyze every user and role of the account.

        Returns:
            list: Finding objects, users first, then roles
        """
        self.errors = []
        users, roles = enumerate_identities(self.iam_client, self.clock(), self.unused_access_age)

        findings = []
        for user in users:
            findings.extend(self._run(self.analyze_user, user, user['Arn']))
        for role in roles:
            findings.extend(self._run(self.analyze_role, role, role['Arn']))

        logger.info("Analysis complete: %d findings", len(findings))
        return findings

    def _run(self, check, identity, arn):
        logger.info("Analyzing %s", arn)
        try:
            return check(identity)
        except (AnalyzerError, ClientError, BotoCoreError) as e:
            if self.fail_fast:
                raise
            logger.warning("Skipping %s: %s", arn, e)
            self.errors.append((arn, e))
            return []

    def _finding(self, arn, resource_type, finding_type, details):
        return Finding(
            resource=arn,
            resource_type=resource_type,
            resource_owner_account=self.owner_account,
            finding_type=finding_type,
            finding_details=tuple(details),
        )

    def analyze_user(self, user):
        """
        Check the console password, access keys and permissions of one user.

        Args:
            user: user record from ListUsers

        Returns:
            list: up to three findings (password, access keys, permissions)
        """
        analyzed_at = self.clock()
        arn = user['Arn']
        findings = []

        password = self._check_password(user, analyzed_at)
        if password:
            findings.append(self._finding(
                arn, ResourceType.IAM_USER, FindingType.UNUSED_USER_PASSWORD, [password]))

        access_keys = self._check_access_keys(user, analyzed_at)
        if access_keys:
            findings.append(self._finding(
                arn, ResourceType.IAM_USER, FindingType.UNUSED_USER_ACCESS_KEY, access_keys))

        permissions = self._check_permissions(arn, analyzed_at)
        if permissions:
            findings.append(self._finding(
                arn, ResourceType.IAM_USER, FindingType.UNUSED_PERMISSION, permissions))

        return findings

    def analyze_role(self, role):
        """
        Check when one role was last assumed and which of its permissions are unused.

        Args:
            role: role record from ListRoles

        Returns:
            list: up to two findings (role usage, permissions)
        """
        analyzed_at = self.clock()
        arn = role['Arn']
        findings = []

        last_used = iam.get_role_last_used(self.iam_client, role['RoleName'])
        if is_unused(last_used, analyzed_at, self.unused_access_age):
            findings.append(self._finding(
                arn, ResourceType.IAM_ROLE, FindingType.UNUSED_ROLE,
                [UnusedRoleDetails(last_accessed=last_used)]))

        permissions = self._check_permissions(arn, analyzed_at)
        if permissions:
            findings.append(self._finding(
                arn, ResourceType.IAM_ROLE, FindingType.UNUSED_PERMISSION, permissions))

        return findings

    def _check_password(self, user, analyzed_at):
        login_profile = iam.get_login_profile(self.iam_client, user['UserName'])
        if login_profile is None:
            return None
        if not was_created_before_cutoff(login_profile.get('CreateDate'), analyzed_at, self.unused_access_age):
            return None

        last_used = iam.normalize_last_used(user.get('PasswordLastUsed'))
        if is_unused(last_used, analyzed_at, self.unused_access_age):
            return UnusedUserPasswordDetails(last_accessed=last_used)
        return None

    def _check_access_keys(self, user, analyzed_at):
        unused_keys = []
        for key in iam.list_access_keys(self.iam_client, user['UserName']):
            if not was_created_before_cutoff(key.get('CreateDate'), analyzed_at, self.unused_access_age):
                continue
            access_key_id = key['AccessKeyId']
            last_used = iam.get_access_key_last_used(self.iam_client, access_key_id)
            if is_unused(last_used, analyzed_at, self.unused_access_age):
                unused_keys.append(UnusedUserAccessKeyDetails(
                    access_key_id=access_key_id,
                    last_accessed=last_used,
                ))
        return unused_keys

    def _check_permissions(self, arn, analyzed_at):
        services = get_last_accessed(
            self.iam_client, arn,
            max_attempts=self.poll_attempts,
            interval=self.poll_interval,
            sleep=self.sleep
        )
        unused = []
        for service in services:
            details = UnusedPermissionDetails.from_service_last_accessed(service)
            if details.any_not_used(analyzed_at, self.unused_access_age):
                unused.append(details)
        return unused

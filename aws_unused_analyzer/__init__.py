"""
AWS Unused Access Analyzer - finds unused IAM access in an AWS account

Reports IAM users, roles, credentials and permissions that have not been
used within a configurable number of days.
"""

__version__ = '1.0'
__author__ = 'Aswanth'
__email__ = 'aswanthrajan97@gmail.com'
__description__ = 'Unused IAM access analyzer for AWS accounts'
__url__ = 'https://github.com/'

from .age import is_unused, was_created_before_cutoff
from .advisor import get_last_accessed
from .analyzer import UnusedAccessAnalyzer
from .exceptions import (
    AnalyzerError,
    ConfigurationError,
    AccessAdvisorError,
    JobSubmissionError,
    JobFailedError,
    JobTimeoutError
)
from .finding import (
    Finding,
    FindingType,
    ResourceType,
    UnusedAction,
    UnusedPermissionDetails,
    UnusedRoleDetails,
    UnusedUserAccessKeyDetails,
    UnusedUserPasswordDetails
)
from .identities import enumerate_identities

"""
Data models for unused access findings.

Findings are immutable once built. Each detail record is one variant of a
tagged union; ``to_dict`` wraps the fields in ``{TAG: {...}}`` so consumers
of the JSON report can tell the variants apart.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple
from datetime import datetime

from .age import is_unused


class ResourceType(str, Enum):
    IAM_ROLE = 'AwsIamRole'
    IAM_USER = 'AwsIamUser'


class FindingType(str, Enum):
    UNUSED_ROLE = 'UnusedIamRole'
    UNUSED_USER_ACCESS_KEY = 'UnusedIamUserAccessKey'
    UNUSED_USER_PASSWORD = 'UnusedIamUserPassword'
    UNUSED_PERMISSION = 'UnusedPermission'


def _timestamp(value):
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class UnusedAction:
    action: str
    last_accessed: Optional[datetime] = None

    @classmethod
    def from_tracked_action(cls, tracked_action):
        """Build from one ``TrackedActionsLastAccessed`` entry of an access advisor report."""
        return cls(
            action=tracked_action.get('ActionName', ''),
            last_accessed=tracked_action.get('LastAccessedTime'),
        )

    def to_dict(self):
        return {
            'action': self.action,
            'last_accessed': _timestamp(self.last_accessed),
        }


@dataclass(frozen=True)
class UnusedRoleDetails:
    TAG = 'UnusedIamRoleDetails'

    last_accessed: Optional[datetime] = None

    def to_dict(self):
        return {self.TAG: {'last_accessed': _timestamp(self.last_accessed)}}


@dataclass(frozen=True)
class UnusedUserAccessKeyDetails:
    TAG = 'UnusedIamUserAccessKeyDetails'

    access_key_id: str
    last_accessed: Optional[datetime] = None

    def to_dict(self):
        return {
            self.TAG: {
                'last_accessed': _timestamp(self.last_accessed),
                'access_key_id': self.access_key_id,
            }
        }


@dataclass(frozen=True)
class UnusedUserPasswordDetails:
    TAG = 'UnusedIamUserPasswordDetails'

    last_accessed: Optional[datetime] = None

    def to_dict(self):
        return {self.TAG: {'last_accessed': _timestamp(self.last_accessed)}}


@dataclass(frozen=True)
class UnusedPermissionDetails:
    TAG = 'UnusedPermissionDetails'

    service_namespace: str
    last_accessed: Optional[datetime] = None
    actions: Optional[Tuple[UnusedAction, ...]] = None

    @classmethod
    def from_service_last_accessed(cls, service):
        """
        Build from one ``ServicesLastAccessed`` record of an access advisor report.

        Args:
            service: dict with ServiceNamespace, LastAuthenticated and
                optionally TrackedActionsLastAccessed

        Returns:
            UnusedPermissionDetails: service level timestamp plus every tracked action
        """
        tracked = service.get('TrackedActionsLastAccessed')
        actions = None
        if tracked is not None:
            actions = tuple(UnusedAction.from_tracked_action(action) for action in tracked)
        return cls(
            service_namespace=service['ServiceNamespace'],
            last_accessed=service.get('LastAuthenticated'),
            actions=actions,
        )

    def any_not_used(self, analyzed_at, age_days):
        """True if the service itself or any of its tracked actions is unused."""
        if is_unused(self.last_accessed, analyzed_at, age_days):
            return True
        return any(
            is_unused(action.last_accessed, analyzed_at, age_days)
            for action in self.actions or ()
        )

    def to_dict(self):
        actions = None
        if self.actions is not None:
            actions = [action.to_dict() for action in self.actions]
        return {
            self.TAG: {
                'service_namespace': self.service_namespace,
                'last_accessed': _timestamp(self.last_accessed),
                'actions': actions,
            }
        }


@dataclass(frozen=True)
class Finding:
    """
    A single unused access finding for one IAM identity.

    Fields:
    - resource: ARN of the user or role
    - resource_type: ResourceType of the identity
    - resource_owner_account: account id the identity belongs to
    - finding_type: FindingType
    - finding_details: tuple of detail records, all matching finding_type
    - id: unique identifier, generated when the finding is created
    """
    resource: str
    resource_type: ResourceType
    resource_owner_account: str
    finding_type: FindingType
    finding_details: Tuple[object, ...]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self):
        return {
            'resource': self.resource,
            'resource_type': self.resource_type.value,
            'resource_owner_account': self.resource_owner_account,
            'id': self.id,
            'finding_type': self.finding_type.value,
            'finding_details': [detail.to_dict() for detail in self.finding_details],
        }

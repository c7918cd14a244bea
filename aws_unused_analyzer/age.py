"""
Age threshold checks shared by every last-used signal.

Every comparison between a timestamp and the unused access age goes through
this module so that all signals share the same boundary behavior: a
timestamp exactly ``age_days`` old still counts as used.
"""
from datetime import timedelta, timezone


def _as_utc(value):
    # boto3 returns aware datetimes; naive values are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_older_than(timestamp, analyzed_at, age_days):
    """
    Check whether a timestamp lies strictly more than ``age_days`` before ``analyzed_at``.

    Args:
        timestamp: datetime to judge
        analyzed_at: instant the analysis is performed at
        age_days: threshold in days

    Returns:
        bool: True if ``analyzed_at - timestamp > age_days``
    """
    return _as_utc(analyzed_at) - _as_utc(timestamp) > timedelta(days=age_days)


def is_unused(last_used, analyzed_at, age_days):
    """
    Decide whether a last-used signal counts as unused.

    A missing timestamp means the credential or permission was never used.

    Args:
        last_used: datetime of last use, or None if never used
        analyzed_at: instant the analysis is performed at
        age_days: unused access age in days

    Returns:
        bool: True if the signal is absent or older than the threshold
    """
    if last_used is None:
        return True
    return is_older_than(last_used, analyzed_at, age_days)


def was_created_before_cutoff(created, analyzed_at, age_days):
    """
    Check that an identity or credential is old enough to have a usage history.

    Args:
        created: creation datetime, may be None
        analyzed_at: instant the analysis is performed at
        age_days: unused access age in days

    Returns:
        bool: True if created more than ``age_days`` before ``analyzed_at``
    """
    if created is None:
        return False
    return is_older_than(created, analyzed_at, age_days)

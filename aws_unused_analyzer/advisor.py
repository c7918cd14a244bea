"""
Access advisor job driver.

Generates a service last accessed report for one identity and waits for it:

    submitted -> polling(attempt 1..N) -> completed | failed | timed out

Every poll is preceded by a fixed sleep, so the total wait is bounded by
``max_attempts * interval`` seconds.
"""
import logging
import time

from .config import JOB_GRANULARITY, POLL_INTERVAL_SECONDS, POLL_MAX_ATTEMPTS
from .exceptions import JobFailedError, JobSubmissionError, JobTimeoutError

logger = logging.getLogger(__name__)

JOB_COMPLETED = 'COMPLETED'
JOB_IN_PROGRESS = 'IN_PROGRESS'


def submit_job(iam_client, arn):
    """
    Request a new action level service last accessed job.

    Args:
        iam_client: Boto3 IAM client
        arn: ARN of the user or role

    Returns:
        str: job id

    Raises:
        JobSubmissionError: if the response carries no job id
    """
    response = iam_client.generate_service_last_accessed_details(
        Arn=arn,
        Granularity=JOB_GRANULARITY
    )
    job_id = response.get('JobId')
    if not job_id:
        raise JobSubmissionError(arn)
    logger.debug("Submitted access advisor job %s for %s", job_id, arn)
    return job_id


def _remaining_pages(iam_client, job_id, report):
    services = list(report.get('ServicesLastAccessed', []))
    while report.get('IsTruncated'):
        report = iam_client.get_service_last_accessed_details(
            JobId=job_id,
            Marker=report['Marker']
        )
        services.extend(report.get('ServicesLastAccessed', []))
    return services


def wait_for_job(iam_client, arn, job_id, max_attempts=POLL_MAX_ATTEMPTS,
                 interval=POLL_INTERVAL_SECONDS, sleep=time.sleep):
    """
    Poll a submitted job until it completes.

    Args:
        iam_client: Boto3 IAM client
        arn: ARN the job was generated for, used in error messages
        job_id: id returned by submit_job
        max_attempts: number of status checks before giving up
        interval: seconds to wait before each status check
        sleep: function used to wait

    Returns:
        list: ServicesLastAccessed records from every result page

    Raises:
        JobFailedError: status is neither IN_PROGRESS nor COMPLETED
        JobTimeoutError: still IN_PROGRESS after max_attempts checks
    """
    for attempt in range(1, max_attempts + 1):
        sleep(interval)
        report = iam_client.get_service_last_accessed_details(JobId=job_id)
        status = report.get('JobStatus')
        logger.debug("Job %s attempt %d/%d: %s", job_id, attempt, max_attempts, status)

        if status == JOB_COMPLETED:
            return _remaining_pages(iam_client, job_id, report)
        if status != JOB_IN_PROGRESS:
            reason = report.get('Error', {}).get('Message')
            raise JobFailedError(arn, job_id, status, reason)

    raise JobTimeoutError(arn, job_id, max_attempts, interval)


def get_last_accessed(iam_client, arn, max_attempts=POLL_MAX_ATTEMPTS,
                      interval=POLL_INTERVAL_SECONDS, sleep=time.sleep):
    """Submit an access advisor job for ``arn`` and return its service records."""
    job_id = submit_job(iam_client, arn)
    return wait_for_job(
        iam_client, arn, job_id,
        max_attempts=max_attempts,
        interval=interval,
        sleep=sleep
    )

"""
Exceptions raised by the unused access analyzer
"""


class AnalyzerError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(AnalyzerError):
    """Credentials or region could not be resolved."""


class AccessAdvisorError(AnalyzerError):
    """
    An access advisor job did not produce a usable report.

    Attributes:
        arn: ARN of the identity the job was generated for
    """

    def __init__(self, arn, message):
        super().__init__(f"{message} (arn: {arn})")
        self.arn = arn


class JobSubmissionError(AccessAdvisorError):
    """GenerateServiceLastAccessedDetails returned no job id."""

    def __init__(self, arn):
        super().__init__(arn, "No job id returned while generating service last accessed details")


class JobFailedError(AccessAdvisorError):
    """The job reached a terminal status other than COMPLETED."""

    def __init__(self, arn, job_id, status, reason=None):
        message = f"Access advisor job {job_id} ended with status {status}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(arn, message)
        self.job_id = job_id
        self.status = status


class JobTimeoutError(AccessAdvisorError):
    """The job was still in progress after the last polling attempt."""

    def __init__(self, arn, job_id, attempts, interval):
        super().__init__(
            arn,
            f"Access advisor job {job_id} still in progress after {attempts} attempts "
            f"({attempts * interval}s)"
        )
        self.job_id = job_id
        self.attempts = attempts

"""
Central configuration and tunable constants for the unused access analyzer.
"""

DEFAULT_REGION = 'us-east-1'
DEFAULT_UNUSED_ACCESS_AGE = 90
DEFAULT_OUTPUT_FILE = 'unused_findings.json'

# Access advisor job polling
POLL_MAX_ATTEMPTS = 10
POLL_INTERVAL_SECONDS = 3
JOB_GRANULARITY = 'ACTION_LEVEL'

SERVICE_LINKED_ROLE_PATH = '/aws-service-role/'

USER_AGENT_EXTRA = 'aws-unused-analyzer'

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

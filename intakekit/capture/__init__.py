"""Screenshot capture components for intakekit."""

from intakekit.capture.jobs import DEFAULT_JOBS, validate_jobs
from intakekit.capture.service import Capturer
from intakekit.capture.views import CaptureConfig

__all__ = [
	# Services
	'Capturer',
	# Jobs
	'DEFAULT_JOBS',
	'validate_jobs',
	# Configuration
	'CaptureConfig',
]

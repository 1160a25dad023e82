"""intakekit - tooling for the project intake template.

Components:
- Capturer: captures the documentation screenshots in one browser session
- ScreenshotStorage: writes and lists the captured PNG files
- StatusReportGenerator: renders the roadmap export into the HTML status report
"""

from intakekit.capture.jobs import DEFAULT_JOBS, validate_jobs
from intakekit.capture.service import Capturer
from intakekit.capture.views import CaptureConfig
from intakekit.report.service import StatusReportGenerator
from intakekit.report.views import Priority, ReportConfig, ReportSummary, RoadmapExport, RoadmapItem
from intakekit.shared_views import (
	CaptureOutcome,
	CaptureReport,
	CaptureStatus,
	ScreenshotJob,
	WaitCondition,
)
from intakekit.storage.service import ScreenshotStorage

__version__ = '1.0.0'

__all__ = [
	# Services
	'Capturer',
	'ScreenshotStorage',
	'StatusReportGenerator',
	# Capture
	'CaptureConfig',
	'DEFAULT_JOBS',
	'validate_jobs',
	# Capture models
	'ScreenshotJob',
	'WaitCondition',
	'CaptureOutcome',
	'CaptureReport',
	'CaptureStatus',
	# Report
	'ReportConfig',
	'ReportSummary',
	'RoadmapExport',
	'RoadmapItem',
	'Priority',
]

"""Status report components for intakekit."""

from intakekit.report.service import StatusReportGenerator, format_report_date
from intakekit.report.views import (
	Priority,
	ReportConfig,
	ReportSummary,
	RoadmapExport,
	RoadmapItem,
	parse_priority,
)

__all__ = [
	# Services
	'StatusReportGenerator',
	'format_report_date',
	# Models
	'Priority',
	'parse_priority',
	'RoadmapItem',
	'RoadmapExport',
	# Configuration
	'ReportConfig',
	'ReportSummary',
]

"""Data models for the status report generator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Priority(str, Enum):
	"""Roadmap priority levels, in rank order."""

	URGENT = 'URGENT'
	HIGH = 'HIGH'
	MEDIUM = 'MEDIUM'
	LOW = 'LOW'

	@property
	def color(self) -> str:
		return _PRIORITY_COLORS[self]

	@property
	def label(self) -> str:
		return _PRIORITY_LABELS[self]


_PRIORITY_COLORS = {
	Priority.URGENT: '#e74c3c',
	Priority.HIGH: '#f39c12',
	Priority.MEDIUM: '#3498db',
	Priority.LOW: '#27ae60',
}

_PRIORITY_LABELS = {
	Priority.URGENT: '1 - URGENT Priority',
	Priority.HIGH: '2 - HIGH',
	Priority.MEDIUM: '3 - MEDIUM',
	Priority.LOW: '4 - LOW',
}


def parse_priority(raw: str | None) -> Priority | None:
	"""Parse a tracker priority such as "1 - URGENT".

	Missing values count as LOW. Returns None for names that are not a known
	priority.
	"""
	name = (raw or Priority.LOW.value).split('-')[-1].strip().upper()
	try:
		return Priority(name)
	except ValueError:
		return None


class RoadmapItem(BaseModel):
	"""A single item from the roadmap export."""

	model_config = ConfigDict(extra='ignore')

	name: str = Field(description='Item title')
	client: str | None = Field(default=None, description='Client the item belongs to')
	status: str | None = Field(default=None, description='Workflow status, e.g. "In Progress"')
	priority: str | None = Field(default=None, description='Raw priority, e.g. "2 - HIGH"')
	updates: str | None = Field(default=None, description='Free-text progress notes')


class RoadmapExport(BaseModel):
	"""Raw roadmap export as written by the tracker fetch step."""

	model_config = ConfigDict(extra='ignore', populate_by_name=True)

	item_count: int = Field(default=0, alias='itemCount', description='Number of items in the export')
	items: list[RoadmapItem] = Field(default_factory=list, description='Exported items')


class ReportConfig(BaseModel):
	"""Configuration for the StatusReportGenerator."""

	model_config = ConfigDict(extra='forbid')

	data_path: str = Field(default='data/notion-raw.json', description='Roadmap export to read')
	template_path: str = Field(default='NOTION_PROJECT_STATUS.html', description='HTML report rewritten in place')
	target_clients: list[str] = Field(
		default_factory=lambda: ['CBB', 'DLC', 'Wise Loan'], description='Clients included in the report'
	)
	excluded_statuses: list[str] = Field(
		default_factory=lambda: ['Done', 'Icebox'], description='Statuses left out of the report'
	)
	updates_limit: int = Field(default=500, gt=0, description='Max characters of item updates shown')


class ReportSummary(BaseModel):
	"""Result of generating a status report."""

	model_config = ConfigDict(extra='forbid')

	total_items: int = Field(description='Items in the export')
	item_count: int = Field(description='Items included after filtering')
	report_date: str = Field(description='Date written into the report')
	output_path: str = Field(description='Report file that was rewritten')
	sections: dict[str, int] = Field(default_factory=dict, description='Item count per rendered priority')

"""Status report service - renders the roadmap export into the HTML status report."""

import html as html_lib
import json
import logging
import re
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from intakekit.report.views import (
	Priority,
	ReportConfig,
	ReportSummary,
	RoadmapExport,
	RoadmapItem,
	parse_priority,
)

logger = logging.getLogger(__name__)

_DATE = r'[A-Z][a-z]+ \d{1,2}, \d{4}'
HEADER_DATE_PATTERN = re.compile(rf'<p>{_DATE}</p>')
FOOTER_DATE_PATTERN = re.compile(rf'Report Date:</strong> {_DATE}')
CONTENT_PATTERN = re.compile(r'<div class="content">([\s\S]*?)</div>\s*<footer>')

GroupedItems = dict[Priority, dict[str, list[RoadmapItem]]]


def format_report_date(day: date) -> str:
	"""Format a date as e.g. "December 5, 2025"."""
	return f'{day:%B} {day.day}, {day.year}'


class StatusReportGenerator:
	"""Builds the project status report from a raw roadmap export.

	The export is filtered to the target clients, grouped by priority and
	client, and rendered into the content block of an existing HTML report,
	which is rewritten in place together with its report date.
	"""

	def __init__(self, config: ReportConfig | None = None):
		"""Initialize the StatusReportGenerator.

		Args:
			config: Optional report configuration
		"""
		self.config = config or ReportConfig()

	def load_export(self) -> RoadmapExport:
		"""Load the roadmap export.

		Raises:
			FileNotFoundError: If the data file doesn't exist
			ValueError: If the data is not a valid export
		"""
		data_path = Path(self.config.data_path)

		if not data_path.exists():
			raise FileNotFoundError(f'Data file not found: {data_path}')

		try:
			with open(data_path, 'r', encoding='utf-8') as f:
				raw_data = json.load(f)

			if not isinstance(raw_data, dict) or not isinstance(raw_data.get('items', []), list):
				raise ValueError('expected an object with an "items" list')

			raw_items = raw_data.get('items', [])
			export = RoadmapExport.model_validate({**raw_data, 'items': []})

		except Exception as e:
			logger.error(f'Failed to load roadmap export {data_path}: {str(e)}')
			raise ValueError(f'Invalid roadmap export: {str(e)}') from e

		# Invalid items are skipped, the rest of the export still renders
		for index, raw_item in enumerate(raw_items):
			try:
				export.items.append(RoadmapItem.model_validate(raw_item))
			except ValidationError as e:
				logger.warning(f'Skipping invalid roadmap item #{index + 1}: {e.error_count()} validation error(s)')

		return export

	def filter_items(self, items: list[RoadmapItem]) -> list[RoadmapItem]:
		"""Keep items for target clients that are not in an excluded status."""
		return [
			item
			for item in items
			if item.client
			and any(client in item.client for client in self.config.target_clients)
			and item.status not in self.config.excluded_statuses
		]

	def group_items(self, items: list[RoadmapItem]) -> GroupedItems:
		"""Group items by priority, then by client in first-seen order."""
		grouped: GroupedItems = {priority: {} for priority in Priority}

		for item in items:
			priority = parse_priority(item.priority)
			if priority is None:
				logger.warning(f'Unknown priority: "{item.priority}" for item "{item.name}"')
				continue

			client = item.client or 'Unknown'
			grouped[priority].setdefault(client, []).append(item)

		return grouped

	def _render_updates(self, updates: str) -> str:
		limit = self.config.updates_limit
		text = html_lib.escape(updates[:limit], quote=False)
		if len(updates) > limit:
			text += '...'
		return text

	def render_sections(self, grouped: GroupedItems) -> str:
		"""Render one HTML section per priority that has items."""
		lines: list[str] = []

		for priority in Priority:
			items_by_client = grouped.get(priority, {})

			if not items_by_client:
				logger.info(f'Skipping {priority.value}: no items')
				continue
			logger.info(f'Adding {priority.value} section with {len(items_by_client)} clients')

			color = priority.color
			lines.append('            <section>')
			lines.append(
				f'                <h2 style="border-bottom-color: {color}; color: {color};">{priority.label} Issues</h2>'
			)

			for client, client_items in items_by_client.items():
				lines.append(f'                <h3>{html_lib.escape(client, quote=False)}</h3>')

				for index, item in enumerate(client_items, start=1):
					status = html_lib.escape(item.status or 'Unknown', quote=False)
					lines.append(f'                <div class="issue" style="border-left-color: {color};">')
					lines.append(f'                    <strong>{index}. {html_lib.escape(item.name, quote=False)}</strong>')
					lines.append('                    <div style="color: #666; font-size: 14px; margin: 8px 0;">')
					lines.append(
						f'                        Status: <span style="color: {color}; font-weight: bold;">{status}</span>'
						f' | Priority: {priority.value}'
					)
					lines.append('                    </div>')
					if item.updates:
						lines.append(
							f'                    <div style="color: #444; margin: 8px 0;">{self._render_updates(item.updates)}</div>'
						)
					lines.append('                </div>')

			lines.append('            </section>')

		return '\n'.join(lines)

	def apply_to_template(self, html: str, item_count: int, sections_html: str, report_date: str) -> str:
		"""Write the report date and rendered sections into the template HTML.

		Raises:
			ValueError: If the template has no content block
		"""
		html = HEADER_DATE_PATTERN.sub(lambda _: f'<p>{report_date}</p>', html, count=1)
		html = FOOTER_DATE_PATTERN.sub(lambda _: f'Report Date:</strong> {report_date}', html, count=1)

		match = CONTENT_PATTERN.search(html)
		if not match:
			raise ValueError('Could not find content section in template HTML')

		clients = self.config.target_clients
		summary = (
			f'The product roadmap contains <strong>{item_count} active items</strong> across '
			f'{len(clients)} primary clients ({html_lib.escape(", ".join(clients), quote=False)}). '
			'Below is a breakdown of issues by priority and status.'
		)
		new_content = '\n'.join(
			[
				'<div class="content">',
				'            <div class="summary">',
				f'                <p>{summary}</p>',
				'            </div>',
				'',
				sections_html,
				'        </div>',
				'',
				'        <footer>',
			]
		)

		return html[: match.start()] + new_content + html[match.end() :]

	def generate(self, today: date | None = None) -> ReportSummary:
		"""Generate the report and rewrite the template file in place.

		Args:
			today: Report date, defaults to the current date

		Returns:
			Summary of what was written

		Raises:
			FileNotFoundError: If the data file or template doesn't exist
			ValueError: If the export or template is malformed
		"""
		export = self.load_export()
		logger.info(f'Processing {export.item_count or len(export.items)} items from roadmap export...')

		items = self.filter_items(export.items)
		logger.info(
			f'Filtered to {len(items)} items for target clients '
			f'(excluding {"/".join(self.config.excluded_statuses)})'
		)

		grouped = self.group_items(items)
		sections_html = self.render_sections(grouped)

		template_path = Path(self.config.template_path)
		if not template_path.exists():
			raise FileNotFoundError(f'Template file not found: {template_path}')

		report_date = format_report_date(today or date.today())
		html = template_path.read_text(encoding='utf-8')
		html = self.apply_to_template(html, len(items), sections_html, report_date)
		template_path.write_text(html, encoding='utf-8')

		logger.info(f'✓ Generated report with {len(items)} items')
		logger.info(f'  Report date: {report_date}')
		logger.info(f'  Output: {template_path}')

		return ReportSummary(
			total_items=len(export.items),
			item_count=len(items),
			report_date=report_date,
			output_path=str(template_path),
			sections={
				priority.value: sum(len(client_items) for client_items in by_client.values())
				for priority, by_client in grouped.items()
				if by_client
			},
		)

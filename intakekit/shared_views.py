"""Shared data models for the intakekit capture pipeline."""

from enum import Enum
from pathlib import PurePosixPath
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from uuid_extensions import uuid7str


class WaitCondition(str, Enum):
	"""Load condition a navigation waits for before the page is captured."""

	LOAD = 'load'
	DOM_CONTENT_LOADED = 'domcontentloaded'
	NETWORK_IDLE = 'networkidle'
	COMMIT = 'commit'


class ScreenshotJob(BaseModel):
	"""A single screenshot to capture."""

	model_config = ConfigDict(extra='forbid')

	name: str = Field(description='Output file name, e.g. "github-labels.png"')
	url: str = Field(description='Page to navigate to')
	wait_until: WaitCondition = Field(
		default=WaitCondition.NETWORK_IDLE, description='Load condition to wait for before capturing'
	)
	description: str = Field(default='', description='Human-readable label used in progress output')
	full_page: bool = Field(default=False, description='Capture the full scrollable page instead of the viewport')

	@field_validator('name')
	@classmethod
	def _check_name(cls, value: str) -> str:
		if not value or value in ('.', '..') or '/' in value or '\\' in value:
			raise ValueError(f'Screenshot name must be a plain file name: {value!r}')
		if PurePosixPath(value).suffix.lower() != '.png':
			raise ValueError(f'Screenshot name must end with .png: {value!r}')
		return value

	@field_validator('url')
	@classmethod
	def _check_url(cls, value: str) -> str:
		parsed = urlparse(value)
		if parsed.scheme not in ('http', 'https') or not parsed.netloc:
			raise ValueError(f'Screenshot url must be an absolute http(s) URL: {value!r}')
		return value

	@property
	def label(self) -> str:
		return self.description or self.name


class CaptureStatus(str, Enum):
	"""Status of a single screenshot job."""

	SUCCESS = 'success'
	FAILURE = 'failure'


class CaptureOutcome(BaseModel):
	"""Result of capturing one screenshot job."""

	model_config = ConfigDict(extra='forbid')

	outcome_id: str = Field(default_factory=uuid7str, description='Unique identifier')
	job_name: str = Field(description='Name of the job that produced this outcome')
	url: str = Field(description='Page the job navigated to')
	status: CaptureStatus = Field(description='Whether the screenshot was saved')
	file_path: str | None = Field(default=None, description='Path of the saved image on success')
	error_message: str | None = Field(default=None, description='Truncated error message on failure')
	duration_ms: int | None = Field(default=None, description='Time spent on this job in milliseconds')


class CaptureReport(BaseModel):
	"""Result of a full capture run."""

	model_config = ConfigDict(extra='forbid')

	run_id: str = Field(default_factory=uuid7str, description='Unique run identifier')
	output_dir: str = Field(description='Directory screenshots were written to')
	outcomes: list[CaptureOutcome] = Field(default_factory=list, description='Per-job outcomes in job order')
	total_jobs: int = Field(default=0, description='Number of jobs in the run')
	succeeded: int = Field(default=0, description='Number of jobs that saved a screenshot')
	failed: int = Field(default=0, description='Number of jobs that failed')
	captured_files: list[str] = Field(
		default_factory=list, description='PNG files present in the output directory after the run'
	)
	execution_time_ms: int | None = Field(default=None, description='Total run time in milliseconds')

	@classmethod
	def from_outcomes(cls, output_dir: str, outcomes: list[CaptureOutcome], **kwargs) -> 'CaptureReport':
		"""Build a report whose tallies are derived from the outcomes."""
		succeeded = sum(1 for outcome in outcomes if outcome.status == CaptureStatus.SUCCESS)
		return cls(
			output_dir=output_dir,
			outcomes=outcomes,
			total_jobs=len(outcomes),
			succeeded=succeeded,
			failed=len(outcomes) - succeeded,
			**kwargs,
		)

"""Screenshots captured for the intake template documentation."""

from collections.abc import Iterable

from intakekit.shared_views import ScreenshotJob, WaitCondition

REPO_URL = 'https://github.com/razorvision/project-intake-template'

DEFAULT_JOBS: list[ScreenshotJob] = [
	ScreenshotJob(
		name='github-labels.png',
		url=f'{REPO_URL}/labels',
		wait_until=WaitCondition.NETWORK_IDLE,
		description='GitHub labels page',
	),
	ScreenshotJob(
		name='github-repo-main.png',
		url=REPO_URL,
		wait_until=WaitCondition.NETWORK_IDLE,
		description='repository main page',
	),
	# Issue template chooser
	ScreenshotJob(
		name='github-issue-templates.png',
		url=f'{REPO_URL}/issues/new/choose',
		wait_until=WaitCondition.NETWORK_IDLE,
		description='issues page',
	),
	ScreenshotJob(
		name='github-pr-template.png',
		url=f'{REPO_URL}/compare',
		wait_until=WaitCondition.NETWORK_IDLE,
		description='PR creation page',
	),
]


def validate_jobs(jobs: Iterable[ScreenshotJob]) -> list[ScreenshotJob]:
	"""Return the jobs as a list, rejecting duplicate output names.

	Raises:
		ValueError: If two jobs would write the same file
	"""
	job_list = list(jobs)
	seen: set[str] = set()

	for job in job_list:
		if job.name in seen:
			raise ValueError(f'Duplicate screenshot name: {job.name}')
		seen.add(job.name)

	return job_list

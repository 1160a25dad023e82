"""Capturer service - walks a list of screenshot jobs in one browser session."""

import asyncio
import logging
import time
from collections.abc import Callable, Iterable

from browser_use.browser import BrowserProfile, BrowserSession
from browser_use.browser.events import NavigateToUrlEvent, NavigationCompleteEvent, ScreenshotEvent
from browser_use.browser.profile import ViewportSize

from intakekit.capture.jobs import DEFAULT_JOBS, validate_jobs
from intakekit.capture.views import CaptureConfig
from intakekit.shared_views import CaptureOutcome, CaptureReport, CaptureStatus, ScreenshotJob
from intakekit.storage.service import ScreenshotStorage

logger = logging.getLogger(__name__)

# Extra time the event bus allows on top of the navigation timeout
EVENT_TIMEOUT_MARGIN_SECONDS = 5.0

SessionFactory = Callable[[BrowserProfile], BrowserSession]


def _default_session_factory(profile: BrowserProfile) -> BrowserSession:
	return BrowserSession(browser_profile=profile)


def truncate_error(error: BaseException, limit: int) -> str:
	"""First line of an error message, cut to at most `limit` characters."""
	message = str(error).strip()
	first_line = message.splitlines()[0].strip() if message else ''
	if not first_line:
		first_line = type(error).__name__

	if len(first_line) <= limit:
		return first_line
	if limit <= 3:
		return first_line[:limit]
	return first_line[: limit - 3] + '...'


class Capturer:
	"""Captures a fixed list of pages as PNG files.

	Jobs run strictly in order on a single BrowserSession. A failing job is
	logged and counted, and the run moves on to the next one. There is no
	retry.
	"""

	def __init__(
		self,
		config: CaptureConfig | None = None,
		storage: ScreenshotStorage | None = None,
		session_factory: SessionFactory | None = None,
	):
		"""Initialize the Capturer.

		Args:
			config: Optional capture configuration
			storage: Optional storage; created from config.screenshots_dir on each run when omitted
			session_factory: Builds the browser session from a profile
		"""
		self.config = config or CaptureConfig()
		self.storage = storage
		self.session_factory = session_factory or _default_session_factory
		logger.info('Capturer initialized')

	def _build_profile(self) -> BrowserProfile:
		return BrowserProfile(
			headless=self.config.headless,
			viewport=ViewportSize(width=self.config.viewport_width, height=self.config.viewport_height),
			disable_security=False,
		)

	async def capture_all(self, jobs: Iterable[ScreenshotJob] = DEFAULT_JOBS) -> CaptureReport:
		"""Capture every job and report the tally.

		Args:
			jobs: Ordered screenshot jobs

		Returns:
			Capture report with one outcome per job

		Raises:
			ValueError: If two jobs share an output name
		"""
		job_list = validate_jobs(jobs)
		start_time = time.time()

		storage = self.storage or ScreenshotStorage(self.config.screenshots_dir)
		logger.info(f'📸 Starting screenshot capture of {len(job_list)} pages...')

		browser = self.session_factory(self._build_profile())
		outcomes: list[CaptureOutcome] = []

		try:
			try:
				await browser.start()
				logger.info('Browser started successfully')
			except Exception as e:
				logger.error(f'Browser failed to start: {str(e)}', exc_info=True)
				message = truncate_error(e, self.config.error_message_limit)
				outcomes = [
					CaptureOutcome(
						job_name=job.name,
						url=job.url,
						status=CaptureStatus.FAILURE,
						error_message=f'Browser failed to start: {message}',
					)
					for job in job_list
				]
			else:
				for index, job in enumerate(job_list, start=1):
					logger.info(f'{index}. Capturing {job.label}...')
					outcomes.append(await self._capture_job(browser, job, storage))

		finally:
			# Always stop browser
			try:
				await browser.stop()
				logger.info('Browser stopped')
			except Exception as e:
				logger.error(f'Error stopping browser: {e}')

		report = CaptureReport.from_outcomes(
			str(storage.output_dir),
			outcomes,
			captured_files=storage.list_screenshots(),
			execution_time_ms=int((time.time() - start_time) * 1000),
		)
		self._log_summary(report)
		return report

	async def _navigate(self, browser: BrowserSession, job: ScreenshotJob) -> None:
		"""Navigate to the job's page and wait until it reports ready.

		The navigation handler does not raise when the load condition is not
		reached in time; it reports that on the NavigationCompleteEvent instead.

		Raises:
			TimeoutError: If the page did not reach the job's load condition in time
			RuntimeError: If the navigation completed with an error
		"""
		event_timeout = self.config.navigation_timeout_ms / 1000 + EVENT_TIMEOUT_MARGIN_SECONDS
		navigate_event = NavigateToUrlEvent(
			url=job.url,
			wait_until=job.wait_until.value,
			timeout_ms=self.config.navigation_timeout_ms,
			new_tab=False,
			event_timeout=event_timeout,
		)

		# Register for the completion before dispatching so it cannot be missed
		completion = asyncio.create_task(
			browser.event_bus.expect(
				NavigationCompleteEvent,
				predicate=lambda e: e.event_parent_id == navigate_event.event_id or e.url == job.url,
				timeout=event_timeout,
			)
		)
		await asyncio.sleep(0)

		try:
			event = browser.event_bus.dispatch(navigate_event)
			await event
			await event.event_result(raise_if_any=True, raise_if_none=False)

			complete = await completion
		finally:
			if not completion.done():
				completion.cancel()

		if complete.error_message:
			raise RuntimeError(complete.error_message)
		if complete.loading_status:
			raise TimeoutError(complete.loading_status)

	async def _capture_job(self, browser: BrowserSession, job: ScreenshotJob, storage: ScreenshotStorage) -> CaptureOutcome:
		"""Navigate to one page, screenshot it and write the file.

		Errors never escape; they become a failed outcome.
		"""
		job_start = time.time()

		try:
			await self._navigate(browser, job)

			event = browser.event_bus.dispatch(ScreenshotEvent(full_page=job.full_page))
			await event
			screenshot_base64 = await event.event_result(raise_if_any=True, raise_if_none=False)

			if not screenshot_base64:
				raise RuntimeError('Browser returned an empty screenshot')

			path = storage.save_screenshot(job.name, screenshot_base64)
			logger.info(f'   ✅ Saved: {job.name}')

			return CaptureOutcome(
				job_name=job.name,
				url=job.url,
				status=CaptureStatus.SUCCESS,
				file_path=str(path),
				duration_ms=int((time.time() - job_start) * 1000),
			)

		except Exception as e:
			message = truncate_error(e, self.config.error_message_limit)
			logger.warning(f'   ⚠️ Could not capture {job.label}: {message}')

			return CaptureOutcome(
				job_name=job.name,
				url=job.url,
				status=CaptureStatus.FAILURE,
				error_message=message,
				duration_ms=int((time.time() - job_start) * 1000),
			)

	def _log_summary(self, report: CaptureReport) -> None:
		logger.info('✨ Screenshot capture complete!')
		logger.info(f'   Location: {report.output_dir}')
		logger.info(f'   Succeeded: {report.succeeded}/{report.total_jobs}, failed: {report.failed}')

		if report.captured_files:
			logger.info('📁 Captured screenshots:')
			for name in report.captured_files:
				logger.info(f'   - {name}')

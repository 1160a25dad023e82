"""Command line entry points.

Both commands take no arguments: the capture job list is embedded in
intakekit.capture.jobs, and settings come from defaults, the environment or
a .env file.
"""

import asyncio
import logging

from dotenv import load_dotenv

from intakekit.capture.service import Capturer
from intakekit.capture.views import CaptureConfig
from intakekit.report.service import StatusReportGenerator

logger = logging.getLogger(__name__)


def _setup() -> None:
	load_dotenv()
	logging.basicConfig(
		level=logging.INFO,
		format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
	)


async def run_capture() -> int:
	"""Capture the documentation screenshots.

	Returns:
		Process exit code; individual job failures still exit 0
	"""
	capturer = Capturer(CaptureConfig.from_env())
	report = await capturer.capture_all()

	if report.failed:
		logger.warning(f'{report.failed} of {report.total_jobs} screenshots could not be captured')
	return 0


def capture_main() -> int:
	_setup()
	try:
		return asyncio.run(run_capture())
	except Exception as e:
		logger.error(f'Screenshot capture failed: {str(e)}', exc_info=True)
		return 1


def report_main() -> int:
	_setup()
	try:
		StatusReportGenerator().generate()
	except Exception as e:
		logger.error(f'Error generating report: {str(e)}')
		return 1
	return 0


if __name__ == '__main__':
	raise SystemExit(capture_main())

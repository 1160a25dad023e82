"""Storage service - manages the screenshot output directory."""

import base64
import binascii
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class ScreenshotStorage:
	"""Handles writing and listing captured screenshots.

	Screenshots are stored as plain PNG files in a single directory, named
	exactly as their job descriptors say.
	"""

	def __init__(self, output_dir: Path | str = 'docs/assets/screenshots'):
		"""Initialize the ScreenshotStorage.

		Args:
			output_dir: Directory to store screenshots in
		"""
		self.output_dir = Path(output_dir)

		# Create directory if it doesn't exist
		self.output_dir.mkdir(parents=True, exist_ok=True)

		logger.info(f'Screenshot storage initialized at {self.output_dir}')

	def screenshot_path(self, name: str) -> Path:
		return self.output_dir / name

	def save_screenshot(self, name: str, screenshot_base64: str) -> Path:
		"""Decode a base64 PNG and write it to storage.

		Args:
			name: Output file name
			screenshot_base64: Base64 encoded image data as returned by the browser

		Returns:
			Path of the written file

		Raises:
			ValueError: If the image data is empty or not valid base64
			IOError: If the write fails
		"""
		if not screenshot_base64:
			raise ValueError(f'No image data for screenshot: {name}')

		try:
			image_bytes = base64.b64decode(screenshot_base64, validate=True)
		except (binascii.Error, ValueError) as e:
			raise ValueError(f'Invalid image data for screenshot {name}: {str(e)}') from e

		path = self.screenshot_path(name)

		try:
			path.write_bytes(image_bytes)
		except OSError as e:
			logger.error(f'Failed to save screenshot {name}: {str(e)}')
			raise IOError(f'Failed to save screenshot: {str(e)}') from e

		logger.debug(f'Screenshot saved: {path} ({len(image_bytes)} bytes)')
		return path

	def list_screenshots(self) -> list[str]:
		"""List PNG files currently in the output directory.

		Returns:
			Sorted file names
		"""
		return sorted(path.name for path in self.output_dir.glob('*.png') if path.is_file())

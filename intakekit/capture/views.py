"""Data models for the Capturer component."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CaptureConfig(BaseSettings):
	"""Configuration for the Capturer.

	Every field can be overridden with an INTAKEKIT_-prefixed environment
	variable, e.g. INTAKEKIT_SCREENSHOTS_DIR or INTAKEKIT_HEADLESS.
	"""

	model_config = SettingsConfigDict(env_prefix='INTAKEKIT_', extra='forbid')

	screenshots_dir: str = Field(default='docs/assets/screenshots', description='Directory screenshots are written to')
	headless: bool = Field(default=True, description='Run browser in headless mode')
	viewport_width: int = Field(default=1280, gt=0, description='Browser viewport width in pixels')
	viewport_height: int = Field(default=800, gt=0, description='Browser viewport height in pixels')
	navigation_timeout_ms: int = Field(default=30000, gt=0, description='Timeout per navigation in milliseconds')
	error_message_limit: int = Field(default=200, ge=4, description='Max characters kept from an error message')

	@classmethod
	def from_env(cls) -> 'CaptureConfig':
		"""Build a config from INTAKEKIT_* environment variables, falling back to defaults.

		Raises:
			pydantic.ValidationError: If a variable does not parse, e.g. INTAKEKIT_HEADLESS=ture
		"""
		return cls()

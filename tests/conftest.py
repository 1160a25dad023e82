import asyncio
import base64
from dataclasses import dataclass

import pytest
from browser_use.browser.events import NavigateToUrlEvent, NavigationCompleteEvent, ScreenshotEvent

PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'fake-image-data'
PNG_BASE64 = base64.b64encode(PNG_BYTES).decode('ascii')


class FakeEvent:
	"""Stands in for a dispatched bubus event."""

	def __init__(self, result=None, error: Exception | None = None):
		self.result = result
		self.error = error

	def __await__(self):
		async def _completed():
			return self

		return _completed().__await__()

	async def event_result(self, raise_if_any=True, raise_if_none=False):
		if self.error is not None and raise_if_any:
			raise self.error
		return self.result


@dataclass
class FakeNavigationComplete:
	"""Fields of NavigationCompleteEvent the capturer reads."""

	url: str
	event_parent_id: str | None = None
	loading_status: str | None = None
	error_message: str | None = None


class FakeEventBus:
	def __init__(self, session: 'FakeBrowserSession'):
		self.session = session
		self.waiters = []

	async def expect(self, event_type, predicate=None, timeout=None):
		assert event_type is NavigationCompleteEvent
		future = asyncio.get_running_loop().create_future()
		self.waiters.append((predicate, future))
		return await asyncio.wait_for(future, timeout)

	def _complete_navigation(self, event: NavigateToUrlEvent):
		complete = FakeNavigationComplete(
			url=event.url,
			event_parent_id=event.event_id,
			loading_status=self.session.loading_statuses.get(event.url),
		)
		for predicate, future in list(self.waiters):
			if not future.done() and (predicate is None or predicate(complete)):
				future.set_result(complete)
				self.waiters.remove((predicate, future))

	def dispatch(self, event):
		self.session.dispatched.append(event)

		if isinstance(event, NavigateToUrlEvent):
			error = self.session.failing_urls.get(event.url)
			if error is None:
				self._complete_navigation(event)
			return FakeEvent(error=error)

		if isinstance(event, ScreenshotEvent):
			return FakeEvent(result=self.session.screenshot_data)

		raise AssertionError(f'Unexpected event: {event!r}')


class FakeBrowserSession:
	"""In-memory BrowserSession: records events, never launches a browser."""

	def __init__(
		self, profile, failing_urls=None, loading_statuses=None, start_error=None, screenshot_data=PNG_BASE64
	):
		self.profile = profile
		self.failing_urls = failing_urls or {}
		self.loading_statuses = loading_statuses or {}
		self.start_error = start_error
		self.screenshot_data = screenshot_data
		self.dispatched = []
		self.start_calls = 0
		self.stop_calls = 0
		self.event_bus = FakeEventBus(self)

	async def start(self):
		self.start_calls += 1
		if self.start_error is not None:
			raise self.start_error

	async def stop(self):
		self.stop_calls += 1

	@property
	def navigated_urls(self) -> list[str]:
		return [event.url for event in self.dispatched if isinstance(event, NavigateToUrlEvent)]


@pytest.fixture
def fake_sessions():
	"""Sessions created by `session_factory`, in creation order."""
	return []


@pytest.fixture
def session_factory(fake_sessions):
	"""Build a session factory; keyword arguments configure the fake."""

	def make(**kwargs):
		def factory(profile):
			session = FakeBrowserSession(profile, **kwargs)
			fake_sessions.append(session)
			return session

		return factory

	return make

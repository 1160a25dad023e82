import json

from conftest import PNG_BYTES
from intakekit import cli
from intakekit.capture.jobs import DEFAULT_JOBS
from intakekit.capture.service import Capturer


def test_capture_main_writes_default_jobs(tmp_path, monkeypatch, session_factory, fake_sessions):
	output_dir = tmp_path / 'screenshots'
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv('INTAKEKIT_SCREENSHOTS_DIR', str(output_dir))

	failing = {DEFAULT_JOBS[0].url: RuntimeError('requires auth')}
	factory = session_factory(failing_urls=failing)
	monkeypatch.setattr(cli, 'Capturer', lambda config: Capturer(config, session_factory=factory))

	assert cli.capture_main() == 0

	assert fake_sessions[0].navigated_urls == [job.url for job in DEFAULT_JOBS]
	assert not (output_dir / DEFAULT_JOBS[0].name).exists()
	for job in DEFAULT_JOBS[1:]:
		assert (output_dir / job.name).read_bytes() == PNG_BYTES


def test_capture_main_returns_1_when_run_raises(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)

	class BrokenCapturer:
		def __init__(self, config):
			pass

		async def capture_all(self):
			raise RuntimeError('boom')

	monkeypatch.setattr(cli, 'Capturer', BrokenCapturer)

	assert cli.capture_main() == 1


def test_capture_main_rejects_invalid_env_value(tmp_path, monkeypatch, session_factory, fake_sessions):
	monkeypatch.chdir(tmp_path)
	monkeypatch.setenv('INTAKEKIT_HEADLESS', 'ture')
	monkeypatch.setattr(cli, 'Capturer', lambda config: Capturer(config, session_factory=session_factory()))

	assert cli.capture_main() == 1
	assert fake_sessions == []


def test_report_main_fails_without_data(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)

	assert cli.report_main() == 1


def test_report_main_uses_default_paths(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	(tmp_path / 'data').mkdir()
	(tmp_path / 'data' / 'notion-raw.json').write_text(
		json.dumps({'itemCount': 1, 'items': [{'name': 'Ship it', 'client': 'DLC', 'status': 'Todo', 'priority': '2 - HIGH'}]}),
		encoding='utf-8',
	)
	(tmp_path / 'NOTION_PROJECT_STATUS.html').write_text(
		'<p>December 1, 2025</p><div class="content"></div>\n<footer></footer>', encoding='utf-8'
	)

	assert cli.report_main() == 0

	html = (tmp_path / 'NOTION_PROJECT_STATUS.html').read_text(encoding='utf-8')
	assert 'Ship it' in html
	assert '<strong>1 active items</strong>' in html

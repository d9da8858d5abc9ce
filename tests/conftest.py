import os
import sys
import time
import subprocess
import signal
import contextlib
from pathlib import Path

import pytest

from fixture_site import create_app

SITE_ENTRY = Path(__file__).with_name("fixture_site.py")
SITE_PORT = os.environ.get("FIXTURE_SITE_PORT", "5055")


@pytest.fixture(scope="session")
def app():
    app = create_app()
    app.config.update(TESTING=True)
    return app


@pytest.fixture(scope="session")
def client(app):
    return app.test_client()


@pytest.fixture(scope="session")
def live_server():
    """
    Launch the fixture site on 127.0.0.1:$FIXTURE_SITE_PORT for E2E tests.
    """
    import requests

    env = os.environ.copy()
    env["FIXTURE_SITE_PORT"] = SITE_PORT
    proc = subprocess.Popen(
        [sys.executable, str(SITE_ENTRY)],
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        env=env,
    )

    base = f"http://127.0.0.1:{SITE_PORT}"
    for _ in range(60):
        try:
            r = requests.get(base, timeout=1.5)
            if r.status_code < 500:
                break
        except requests.RequestException:
            pass
        time.sleep(0.5)
    else:
        with contextlib.suppress(Exception):
            proc.kill()
            out = proc.stdout.read().decode("utf-8", errors="ignore")
            print("Server boot log:\n", out)
        raise RuntimeError(f"Fixture site did not start on :{SITE_PORT}")

    yield {"base_url": base, "proc": proc}

    with contextlib.suppress(Exception):
        proc.send_signal(signal.SIGINT)
        proc.terminate()
        proc.wait(timeout=5)


@pytest.fixture
def load_html(page):
    """Return a loader that replaces the page with a synthetic document."""
    def _load(body):
        page.set_content(f"<!doctype html><html><head><title>fixture</title></head><body>{body}</body></html>")
        return page
    return _load

import os
import threading
from threading import Thread
from time import sleep

import pytest


def pytest_sessionstart(session):
    """Ensure the test suite always exits, even if a future never settles."""
    timeout = float(session.config.getini("timeout")) + 5
    Thread(target=lambda: sleep(timeout) or os._exit(1), daemon=True).start()


@pytest.fixture(autouse=True)
def check_thread_cleanup():
    """Ensure that settling threads are not left running."""
    initial_threads = set(threading.enumerate())
    yield
    final_threads = {t for t in threading.enumerate() if t.is_alive()}
    new_threads = final_threads - initial_threads

    if new_threads:
        pytest.fail(
            f"Test left {len(new_threads)} thread(s) running:\n"
            + "\n".join(
                f"  - {t.name} ({'daemon' if t.daemon else 'non-daemon'})"
                for t in new_threads
            )
        )

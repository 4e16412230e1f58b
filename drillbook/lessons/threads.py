"""A worker thread completing jobs while the caller waits for it."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass


@dataclass
class JobStatus:
    """How many jobs the worker has finished."""

    jobs_completed: int = 0


def run_jobs(total: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> JobStatus:
    """Complete ``total`` jobs on a worker thread, printing while waiting for them."""
    status = JobStatus()
    lock = threading.Lock()

    def worker() -> None:
        for _ in range(total):
            time.sleep(job_delay)
            with lock:
                status.jobs_completed += 1

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    while True:
        with lock:
            if status.jobs_completed >= total:
                break
        print("waiting... ")
        time.sleep(poll_delay)
    thread.join()
    return status
"""Client for the Spansh route plotter and system name lookup."""

from __future__ import annotations

import json
import threading
import time
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Protocol

import requests

API_BASE = "https://spansh.co.uk/api"
RESULTS_URL = f"{API_BASE}/results"

FIRST_REQUEST_TIMEOUT = 10.0
RESULT_REQUEST_TIMEOUT = 5.0
RESULT_ATTEMPTS = 50
QUEUED_FIRST_DELAY = 0.5
QUEUED_POLL_DELAY = 1.0

REQUEST_HEADERS = {
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
    "Origin": "https://www.spansh.co.uk",
    "Referer": "https://www.spansh.co.uk/plotter/",
    "XRequestedWith": "XMLHttpRequest",
    "User=Agent": "Mozilla/5.0 (X11; Linux x86_64; rv:139.0) Gecko/20100101 Firefox/139.0",
}

Callback = Callable[[str, Any], None]
"""Receives an error message (empty on success) and the parsed result."""


class SpanshRequest(Protocol):
    api: str
    has_job: bool

    @property
    def params(self) -> Mapping[str, str]: ...


class SpanshError(Exception):
    """The web site answered, but not with what was expected."""


def _is_queued(body: str) -> bool:
    return ':"queued"' in body


class SpanshApi:
    """Runs Spansh requests on a thread pool and reports through callbacks."""

    def __init__(self, threads_count: int = 3, session: requests.Session | None = None):
        if threads_count < 1:
            raise ValueError("threads_count must be at least 1")
        self._pool = ThreadPoolExecutor(max_workers=threads_count)
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()
        self._working = 0
        self._lock = threading.Lock()

    def execute_request(
        self,
        api: str,
        params: Mapping[str, str],
        has_job: bool,
        callback: Callback,
    ) -> Future:
        """Queue a request; ``callback`` is called from a worker thread."""
        url = f"{API_BASE}/{api}"
        data = dict(params)
        with self._lock:
            self._working += 1
        try:
            return self._pool.submit(self._run, url, data, has_job, callback)
        except RuntimeError:
            self._finish()
            raise

    def submit(self, request: SpanshRequest, callback: Callback) -> Future:
        """Queue a request described by an object with api, params and has_job."""
        return self.execute_request(request.api, request.params, request.has_job, callback)

    def is_working(self) -> bool:
        with self._lock:
            return self._working > 0

    def close(self) -> None:
        """Drop queued requests, wait for running ones and release resources."""
        self._pool.shutdown(wait=True, cancel_futures=True)
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> SpanshApi:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _finish(self) -> None:
        with self._lock:
            self._working -= 1

    def _run(self, url: str, data: dict[str, str], has_job: bool, callback: Callback) -> None:
        try:
            try:
                result = self._fetch(url, data, has_job)
            except Exception as exc:  # reported to the caller through the callback
                callback(str(exc), None)
            else:
                callback("", result)
        finally:
            self._finish()

    def _fetch(self, url: str, data: dict[str, str], has_job: bool) -> Any:
        response = self._session.post(
            url, data=data, headers=REQUEST_HEADERS, timeout=FIRST_REQUEST_TIMEOUT
        )
        body = response.text
        if not body:
            raise SpanshError("Job ID request returned empty body.")
        root = json.loads(body)
        if not has_job:
            return root

        if not isinstance(root, Mapping) or "job" not in root:
            raise SpanshError("Job ID request does not return job id.")
        job_id = root["job"]
        if not isinstance(job_id, str):
            raise SpanshError("Job ID is not a string.")
        if not job_id:
            raise SpanshError("JOBID is empty")

        if _is_queued(body):
            time.sleep(QUEUED_FIRST_DELAY)

        results_url = f"{RESULTS_URL}/{job_id}"
        for _ in range(RESULT_ATTEMPTS):
            reply = self._session.get(results_url, timeout=RESULT_REQUEST_TIMEOUT)
            if _is_queued(reply.text):
                time.sleep(QUEUED_POLL_DELAY)
                continue
            answer = json.loads(reply.text)
            if not isinstance(answer, Mapping):
                raise SpanshError("Could not detect result field in web-site's response.")
            if "error" in answer:
                error = answer["error"]
                raise SpanshError(error if isinstance(error, str) else json.dumps(error))
            if "result" not in answer:
                raise SpanshError("Could not detect result field in web-site's response.")
            return answer["result"]
        raise SpanshError("Result from the web-site didn't come in time.")


def suggestion_names(result: Any) -> list[str]:
    """System names from a name lookup result; empty when there is none."""
    if result is None:
        return []
    items = result.values() if isinstance(result, Mapping) else result
    names = []
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"system name is not a string: {item!r}")
        names.append(item)
    return names
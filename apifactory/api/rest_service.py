# apifactory/api/rest_service.py
import asyncio
import logging
import threading
from typing import Any, Dict, Optional

import requests

from .api_service import APIError, APIResponse, APIResult

logger = logging.getLogger(__name__)


class RESTAPIService:
    """
    APIService backed by a requests.Session.

    Each call runs in a worker thread so that several requests can be in
    flight at once from a single event loop. Sessions are not shared between
    threads: every worker thread gets its own. 2xx responses are returned as
    APIResponse, anything else as an APIError value.
    """

    def __init__(self, base_url: str, config: Dict = None):
        self.base_url = base_url.rstrip("/")
        self.config = {
            "timeout": 30,
            "headers": {},
            **(config or {})
        }

        self._local = threading.local()
        self._sessions = []
        self._sessions_lock = threading.Lock()

    @property
    def session(self) -> requests.Session:
        """Session owned by the calling thread"""
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers.update({
                "Content-Type": "application/json",
                "Accept": "application/json",
                **self.config["headers"]
            })
            self._local.session = session
            with self._sessions_lock:
                self._sessions.append(session)
        return session

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def _request(self, method: str, endpoint: str, **kwargs) -> APIResult:
        url = self._url(endpoint)
        logger.debug("%s %s", method, url)

        resp = self.session.request(method, url, timeout=self.config["timeout"], **kwargs)

        data = self._decode(resp)
        headers = dict(resp.headers)
        if 200 <= resp.status_code < 300:
            return APIResponse(resp.status_code, headers, data)

        logger.warning("%s %s returned %s", method, url, resp.status_code)
        return APIError(resp.status_code, headers, data)

    @staticmethod
    def _decode(resp: requests.Response) -> Any:
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return resp.text

    async def get(self, endpoint: str, params: Optional[Dict] = None) -> APIResult:
        return await asyncio.to_thread(self._request, "GET", endpoint, params=params)

    async def post(self, endpoint: str, data: Any = None) -> APIResult:
        return await asyncio.to_thread(self._request, "POST", endpoint, json=data)

    async def put(self, endpoint: str, data: Any = None) -> APIResult:
        return await asyncio.to_thread(self._request, "PUT", endpoint, json=data)

    async def patch(self, endpoint: str, data: Any = None) -> APIResult:
        return await asyncio.to_thread(self._request, "PATCH", endpoint, json=data)

    async def delete(self, endpoint: str, params: Optional[Dict] = None) -> APIResult:
        return await asyncio.to_thread(self._request, "DELETE", endpoint, params=params)

    def close(self):
        """Close the HTTP sessions of every thread"""
        with self._sessions_lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()
        self._local = threading.local()

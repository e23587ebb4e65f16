# apifactory/api/api_service.py
from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

from ..exceptions import APIFactoryError


class APIResponse:
    """A successful response from the API"""

    def __init__(self, status_code: int, headers: Dict[str, str], data: Any):
        self.status_code = status_code
        self.headers = headers
        self.data = data

    def __repr__(self):
        return f"APIResponse(status_code={self.status_code}, data={self.data!r})"


class APIError(APIFactoryError):
    """
    An error response from the API.

    Services return it as a value; callers that cannot continue raise it as-is.
    """

    def __init__(self, status_code: int, headers: Dict[str, str], data: Any):
        super().__init__(f"API request failed with status {status_code}: {data!r}")
        self.status_code = status_code
        self.headers = headers
        self.data = data


APIResult = Union[APIResponse, APIError]


@runtime_checkable
class APIService(Protocol):
    """HTTP-verb shaped client used to talk to the API"""

    async def get(self, endpoint: str, params: Optional[Dict] = None) -> APIResult: ...

    async def post(self, endpoint: str, data: Any = None) -> APIResult: ...

    async def put(self, endpoint: str, data: Any = None) -> APIResult: ...

    async def patch(self, endpoint: str, data: Any = None) -> APIResult: ...

    async def delete(self, endpoint: str, params: Optional[Dict] = None) -> APIResult: ...

from .api_service import APIService, APIResponse, APIError, APIResult
from .rest_service import RESTAPIService

__all__ = ["APIService", "APIResponse", "APIError", "APIResult", "RESTAPIService"]

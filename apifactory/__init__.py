# apifactory/__init__.py
from .models import APIModel
from .adapters import APIAdapter, APIModelCreator
from .api import APIService, APIResponse, APIError, RESTAPIService
from .exceptions import (
    APIFactoryError,
    RegistrationError,
    DuplicateRegistrationError,
    RegistryFrozenError,
    UnregisteredModelError,
    BatchError,
    EmptyBatchError,
    MixedBatchError,
    ModelAlreadyCreatedError,
)

__version__ = "0.1.0"
__all__ = [
    "APIModel",
    "APIAdapter",
    "APIModelCreator",
    "APIService",
    "APIResponse",
    "APIError",
    "RESTAPIService",
    "APIFactoryError",
    "RegistrationError",
    "DuplicateRegistrationError",
    "RegistryFrozenError",
    "UnregisteredModelError",
    "BatchError",
    "EmptyBatchError",
    "MixedBatchError",
    "ModelAlreadyCreatedError",
]

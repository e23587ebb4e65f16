from .api_model_creator import APIModelCreator
from .api_adapter import APIAdapter, CreatorStrategy, CallbackStrategy

__all__ = ["APIModelCreator", "APIAdapter", "CreatorStrategy", "CallbackStrategy"]

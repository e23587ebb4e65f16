# apifactory/adapters/api_adapter.py
import logging
from typing import Any, Awaitable, Callable, Dict, List, Type, Union

from ..api.api_service import APIService
from ..exceptions import (
    DuplicateRegistrationError,
    EmptyBatchError,
    MixedBatchError,
    RegistryFrozenError,
    UnregisteredModelError,
)
from ..models.api_model import APIModel
from .api_model_creator import APIModelCreator, TransformerFn

logger = logging.getLogger(__name__)

ModelOrList = Union[APIModel, List[APIModel]]
CreatorFn = Callable[[APIService, ModelOrList], Awaitable[ModelOrList]]
ModelKey = Union[str, Type[APIModel]]


class CreatorStrategy:
    """Strategy that creates models with a default APIModelCreator"""

    def __init__(self, creator: APIModelCreator):
        self.creator = creator

    async def __call__(self, api_service: APIService, model: ModelOrList) -> ModelOrList:
        return await self.creator.create(api_service, model)


class CallbackStrategy:
    """Strategy that hands creation over to a custom coroutine function"""

    def __init__(self, callback: CreatorFn):
        self.callback = callback

    async def __call__(self, api_service: APIService, model: ModelOrList) -> ModelOrList:
        return await self.callback(api_service, model)


Strategy = Union[CreatorStrategy, CallbackStrategy]


def model_tag(model_type: ModelKey) -> str:
    """Dispatch tag for a model class or an explicit tag string"""
    if isinstance(model_type, str):
        return model_type
    if isinstance(model_type, type) and issubclass(model_type, APIModel):
        return model_type.model_type
    raise TypeError(f"Expected an APIModel subclass or a tag string, got {model_type!r}")


def _type_tag(model: Any) -> str:
    # the tag comes from the class, never from instance attributes
    if not isinstance(model, APIModel):
        raise TypeError(f"Expected an APIModel or a list of APIModel, got {type(model).__name__}")
    return type(model).model_type


class APIAdapter:
    """
    Registry of creation strategies keyed by model type.
    Register every model at setup, optionally freeze(), then call create().
    """

    def __init__(self, api_service: APIService):
        self.api_service = api_service
        self._entries: Dict[str, Strategy] = {}
        self._frozen = False

    def register_model(self, model_type: ModelKey, endpoint: str, transformer: TransformerFn):
        """Register a model to be created by POSTing transformer(model) to endpoint"""
        creator = APIModelCreator(endpoint, transformer)
        self._register(model_tag(model_type), CreatorStrategy(creator))

    def register_model_callback(self, model_type: ModelKey, callback: CreatorFn):
        """Register a model to be created by a custom coroutine function"""
        self._register(model_tag(model_type), CallbackStrategy(callback))

    def _register(self, tag: str, strategy: Strategy):
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{tag}': the adapter has been frozen")
        if tag in self._entries:
            raise DuplicateRegistrationError(f"An adapter has already been registered for '{tag}'")

        self._entries[tag] = strategy
        logger.debug("Registered %s for '%s'", type(strategy).__name__, tag)

    def freeze(self):
        """Stop accepting registrations"""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def is_registered(self, model_type: ModelKey) -> bool:
        return model_tag(model_type) in self._entries

    async def create(self, model: ModelOrList) -> ModelOrList:
        """Create a model or list of models, returning the same (now created) instances"""
        tag = self._resolve_tag(model)
        strategy = self._entries.get(tag)
        if strategy is None:
            raise UnregisteredModelError(f"An adapter has not been defined for '{tag}'")

        logger.debug("Creating %s '%s' via %s",
                     len(model) if isinstance(model, list) else 1, tag, type(strategy).__name__)
        return await strategy(self.api_service, model)

    @staticmethod
    def _resolve_tag(model: Any) -> str:
        if not isinstance(model, list):
            return _type_tag(model)

        if not model:
            raise EmptyBatchError("Cannot determine the model type of an empty list")

        tags = {_type_tag(m) for m in model}
        if len(tags) > 1:
            raise MixedBatchError(f"Cannot create a list of mixed model types: {sorted(tags)}")
        return tags.pop()

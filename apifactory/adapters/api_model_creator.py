# apifactory/adapters/api_model_creator.py
import asyncio
from typing import Any, Callable, Generic, List, TypeVar, Union

from ..api.api_service import APIError, APIService
from ..models.api_model import APIModel

T = TypeVar("T", bound=APIModel)

TransformerFn = Callable[[Any], Any]


class APIModelCreator(Generic[T]):
    """Creates models by POSTing their transformed body to a fixed endpoint"""

    def __init__(self, endpoint: str, transformer: TransformerFn):
        self._endpoint = endpoint
        self._transformer = transformer

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def transformer(self) -> TransformerFn:
        return self._transformer

    async def create(self, api_service: APIService, model: Union[T, List[T]]) -> Union[T, List[T]]:
        """
        Create a model or list of models using the API service.
        The given instances are updated in place and returned.
        """
        if isinstance(model, list):
            return await self._create_list(api_service, model)
        return await self._create_single(api_service, model)

    async def _create_single(self, api_service: APIService, model: T) -> T:
        response = await api_service.post(self._endpoint, self._transformer(model))
        if isinstance(response, APIError):
            raise response

        model.on_created(response.data)
        return model

    async def _create_list(self, api_service: APIService, models: List[T]) -> List[T]:
        # gather keeps input order whatever order the requests finish in
        results = await asyncio.gather(
            *(self._create_single(api_service, model) for model in models)
        )
        return list(results)

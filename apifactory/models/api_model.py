# apifactory/models/api_model.py
from typing import Any, ClassVar, Dict, Mapping, Optional

from ..exceptions import ModelAlreadyCreatedError

UNCREATED_ID = 0


class APIModel:
    """
    Base class for all models created through the API.

    Field defaults are declared as class attributes on subclasses and can be
    overridden per instance with keyword arguments:

        class Product(APIModel):
            model_type = "product"
            name = ""

        Product(name="Widget")

    The id is issued by the server and assigned once by on_created().
    """

    # Dispatch tag used by APIAdapter; defaults to the class name
    model_type: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "model_type" not in cls.__dict__:
            cls.model_type = cls.__name__

    def __init__(self, **fields: Any):
        if "id" in fields or "_id" in fields:
            raise TypeError("The id of a model is assigned by the server on creation")
        for name in fields:
            if name == "model_type" or self._is_member(name):
                raise TypeError(f"'{name}' is not a field of {type(self).__name__}")

        self._id = UNCREATED_ID
        for name, value in fields.items():
            setattr(self, name, value)

    @classmethod
    def _is_member(cls, name: str) -> bool:
        # methods and properties can not be shadowed by instance fields
        attr = getattr(cls, name, None)
        return isinstance(attr, property) or callable(attr)

    @property
    def id(self) -> int:
        return self._id

    @property
    def is_created(self) -> bool:
        return self._id != UNCREATED_ID

    def on_created(self, created: Mapping[str, Any]):
        """Handler called with the server's response body once the model has been created"""
        if self.is_created:
            raise ModelAlreadyCreatedError(
                f"{type(self).__name__} has been created already with id {self._id}"
            )

        self._id = created["id"]

    def fields(self) -> Dict[str, Any]:
        """Instance field values, excluding the id"""
        return {k: v for k, v in vars(self).items() if k != "_id"}

    def __repr__(self):
        values = ", ".join(f"{k}={v!r}" for k, v in self.fields().items())
        return f"{type(self).__name__}(id={self._id}{', ' if values else ''}{values})"

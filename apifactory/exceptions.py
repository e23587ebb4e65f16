# apifactory/exceptions.py

class APIFactoryError(Exception):
    """Base exception for apifactory operations"""
    pass

class RegistrationError(APIFactoryError):
    """Raised when a model strategy cannot be registered"""
    pass

class DuplicateRegistrationError(RegistrationError):
    """Raised when a model type already has a strategy"""
    pass

class RegistryFrozenError(RegistrationError):
    """Raised when registering on an adapter that has been frozen"""
    pass

class UnregisteredModelError(APIFactoryError):
    """Raised when no strategy has been registered for a model type"""
    pass

class BatchError(APIFactoryError):
    """Raised when the model type of a batch cannot be determined"""
    pass

class EmptyBatchError(BatchError):
    """Raised when an empty list is passed for creation"""
    pass

class MixedBatchError(BatchError):
    """Raised when a batch holds more than one model type"""
    pass

class ModelAlreadyCreatedError(APIFactoryError):
    """Raised when a model that already has an id is marked created again"""
    pass

from .api_model import APIModel, UNCREATED_ID

__all__ = ["APIModel", "UNCREATED_ID"]

from .bancaditalia import BancaDItalia
from .base import BaseAPIProvider

__all__ = ['BaseAPIProvider', 'BancaDItalia']

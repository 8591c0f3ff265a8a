from .currency import (
    ApiError,
    BancaDItaliaError,
    ConversionFailed,
    DeserializeFailed,
    ErrorKind,
    NoResult,
    RequestFailed,
)

__all__ = [
    'BancaDItaliaError',
    'ErrorKind',
    'RequestFailed',
    'DeserializeFailed',
    'ApiError',
    'NoResult',
    'ConversionFailed',
]

from .errors import (
    LexError,
    NotFoundError,
    ParseError,
    QueryError,
    UciError,
)
from .model import UciConfig, is_bool_value
from .parser import parse
from .registry import UciRegistry
from .serializer import serialize
from .storage import load_config, save_config
from .tree import ConfigDocument, ListValues, Scalar, Section


__all__ = [
    "ConfigDocument",
    "LexError",
    "ListValues",
    "NotFoundError",
    "ParseError",
    "QueryError",
    "Scalar",
    "Section",
    "UciConfig",
    "UciError",
    "UciRegistry",
    "is_bool_value",
    "load_config",
    "parse",
    "save_config",
    "serialize",
]

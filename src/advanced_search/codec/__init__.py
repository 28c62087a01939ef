"""Codec – bracket-grammar encoding of SearchConfig to query parameters and back."""
from advanced_search.codec.decoder import DecodedConfig, decode, decode_sort
from advanced_search.codec.encoder import encode, encode_sort
from advanced_search.codec.query_string import parse_query_string, stringify, to_query_string
from advanced_search.codec.wire import (
    OPERATOR_KEY,
    RESERVED_KEYS,
    SEARCH_KEY,
    SORT_KEY,
    QueryParams,
    field_key,
)

__all__ = [
    "OPERATOR_KEY",
    "RESERVED_KEYS",
    "SEARCH_KEY",
    "SORT_KEY",
    "DecodedConfig",
    "QueryParams",
    "decode",
    "decode_sort",
    "encode",
    "encode_sort",
    "field_key",
    "parse_query_string",
    "stringify",
    "to_query_string",
]

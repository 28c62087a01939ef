"""
advanced_search – schema-driven query-condition builder.

Import path convention::

    from advanced_search.schema import FieldSchema, SearchField, FieldType
    from advanced_search.builder import SearchBuilder
    from advanced_search.codec import encode, decode
    from advanced_search.validation import validate_config
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

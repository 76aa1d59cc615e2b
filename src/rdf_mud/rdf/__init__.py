"""RDF datastore wrapper: terms, namespaces and the statement store."""

from rdf_mud.rdf.exceptions import ParseError, RDFStoreError, SerializationError
from rdf_mud.rdf.namespaces import NAMESPACES, ns, vocab
from rdf_mud.rdf.store import FORMATS, RDFDatastore
from rdf_mud.rdf.terms import (
    create_blank_node,
    create_boolean_literal,
    create_date_literal,
    create_datetime_literal,
    create_decimal_literal,
    create_integer_literal,
    create_literal,
    create_named_node,
    create_typed_literal,
)

__all__ = [
    "FORMATS",
    "NAMESPACES",
    "ParseError",
    "RDFDatastore",
    "RDFStoreError",
    "SerializationError",
    "create_blank_node",
    "create_boolean_literal",
    "create_date_literal",
    "create_datetime_literal",
    "create_decimal_literal",
    "create_integer_literal",
    "create_literal",
    "create_named_node",
    "create_typed_literal",
    "ns",
    "vocab",
]

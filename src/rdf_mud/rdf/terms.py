"""Factory functions for RDF terms.

Thin helpers over rdflib's term classes so callers never have to remember
which keyword carries a language tag and which carries a datatype.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD


def create_named_node(uri: str) -> URIRef:
    """Create a named node (URI)."""
    return URIRef(uri)


def create_blank_node(id: str | None = None) -> BNode:
    """Create a blank node, generating a fresh identifier when none is given."""
    return BNode(id) if id is not None else BNode()


def create_literal(value: str, language_or_datatype: str | URIRef | None = None) -> Literal:
    """Create a literal value.

    Args:
        value: The lexical value
        language_or_datatype: A language tag (plain string) or a datatype URI

    Returns:
        An untyped, language-tagged or datatype-tagged literal
    """
    if isinstance(language_or_datatype, URIRef):
        return Literal(value, datatype=language_or_datatype)
    if language_or_datatype:
        return Literal(value, lang=language_or_datatype)
    return Literal(value)


def create_typed_literal(value: str, datatype: str) -> Literal:
    """Create a literal tagged with the given datatype URI, keeping the lexical form as given."""
    return Literal(value, datatype=URIRef(datatype), normalize=False)


def create_integer_literal(value: int) -> Literal:
    return create_typed_literal(str(value), str(XSD.integer))


def create_decimal_literal(value: float | Decimal) -> Literal:
    """Create an xsd:decimal literal in positional notation, never exponent form."""
    number = value if isinstance(value, Decimal) else Decimal(repr(value))
    return create_typed_literal(format(number, "f"), str(XSD.decimal))


def create_boolean_literal(value: bool) -> Literal:
    return create_typed_literal("true" if value else "false", str(XSD.boolean))


def create_date_literal(value: date) -> Literal:
    """Create an xsd:date literal (YYYY-MM-DD)."""
    if isinstance(value, datetime):
        value = _to_utc(value).date()
    return create_typed_literal(value.isoformat(), str(XSD.date))


def create_datetime_literal(value: datetime) -> Literal:
    """Create an xsd:dateTime literal from the UTC instant, e.g. 2024-01-15T10:30:00.000Z."""
    instant = _to_utc(value).replace(tzinfo=None)
    return create_typed_literal(instant.isoformat(timespec="milliseconds") + "Z", str(XSD.dateTime))


def _to_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC already
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

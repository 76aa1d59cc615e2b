"""Data models for statements, store metadata and command results."""

from rdf_mud.models.commands import CommandResult
from rdf_mud.models.rdf import DatastoreStats, QueryPattern, RDFFormat, SerializationOptions, Statement

__all__ = [
    "CommandResult",
    "DatastoreStats",
    "QueryPattern",
    "RDFFormat",
    "SerializationOptions",
    "Statement",
]

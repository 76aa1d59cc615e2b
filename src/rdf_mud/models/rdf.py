"""Models for statements, query patterns and datastore metadata."""

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field
from rdflib import BNode, URIRef
from rdflib.term import Node

RDFFormat = Literal["turtle", "n-triples", "n-quads", "trig"]


@dataclass(frozen=True)
class Statement:
    """A subject-predicate-object assertion, optionally scoped to a named graph."""

    subject: URIRef | BNode
    predicate: URIRef
    object: Node
    graph: URIRef | BNode | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.subject, (URIRef, BNode)):
            raise ValueError(f"Subject must be a named or blank node, got {self.subject!r}")
        if not isinstance(self.predicate, URIRef):
            raise ValueError(f"Predicate must be a named node, got {self.predicate!r}")
        if self.graph is not None and not isinstance(self.graph, (URIRef, BNode)):
            raise ValueError(f"Graph must be a named or blank node, got {self.graph!r}")

    def to_triple(self) -> tuple[Node, Node, Node]:
        """Return the (subject, predicate, object) part."""
        return (self.subject, self.predicate, self.object)


@dataclass(frozen=True)
class QueryPattern:
    """A statement template; None leaves a position unconstrained."""

    subject: URIRef | BNode | None = None
    predicate: URIRef | None = None
    object: Node | None = None
    graph: URIRef | BNode | None = None


class DatastoreStats(BaseModel):
    """Statistics about the datastore."""

    triple_count: int = 0
    subject_count: int = 0
    predicate_count: int = 0
    graph_count: int = 0


class SerializationOptions(BaseModel):
    """Options for serialization."""

    format: RDFFormat = "turtle"
    prefixes: dict[str, str] | None = Field(default=None, description="Overrides the store's prefixes")

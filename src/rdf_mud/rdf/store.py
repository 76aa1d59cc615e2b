"""In-memory RDF datastore backed by an rdflib Dataset."""

import asyncio
import logging
from collections.abc import Iterable

from rdflib import BNode, Dataset, Graph, URIRef
from rdflib.graph import DATASET_DEFAULT_GRAPH_ID
from rdflib.namespace import NamespaceManager
from rdflib.term import Node

from ..models.rdf import DatastoreStats, QueryPattern, SerializationOptions, Statement
from .exceptions import ParseError, SerializationError
from .namespaces import NAMESPACES

logger = logging.getLogger(__name__)

# Public format names -> rdflib plugin names
FORMATS = {
    "turtle": "turtle",
    "n-triples": "nt",
    "n-quads": "nquads",
    "trig": "trig",
}
QUAD_FORMATS = {"n-quads", "trig"}

DEFAULT_PREFIXES = {name: NAMESPACES[name] for name in ("rdf", "rdfs", "xsd")}


class RDFDatastore:
    """A set of RDF statements with pattern queries and text (de)serialization.

    Usage:
        store = RDFDatastore()
        store.add_triple(alice, vocab.foaf("name"), create_literal("Alice"))
        names = store.objects_for(alice, vocab.foaf("name"))

        await store.parse(turtle_text)
        text = await store.serialize(SerializationOptions(format="n-triples"))
    """

    def __init__(self, statements: Iterable[Statement] | None = None):
        """Initialize the datastore.

        Args:
            statements: Optional statements to load up front
        """
        self._dataset = Dataset()
        self._prefixes: dict[str, str] = dict(DEFAULT_PREFIXES)
        if statements:
            self.add_statements(statements)

    def __len__(self) -> int:
        return self.size()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add(self, statement: Statement) -> None:
        """Add a statement; adding one that is already present is a no-op."""
        self._dataset.add((*statement.to_triple(), self._context(statement.graph)))

    def add_triple(
        self,
        subject: URIRef | BNode,
        predicate: URIRef,
        object: Node,
        graph: URIRef | BNode | None = None,
    ) -> None:
        self.add(Statement(subject, predicate, object, graph))

    def add_statements(self, statements: Iterable[Statement]) -> None:
        for statement in statements:
            self.add(statement)

    def remove(self, statement: Statement) -> None:
        """Remove a statement; removing one that is absent is a no-op."""
        self._dataset.remove((*statement.to_triple(), self._context(statement.graph)))

    def remove_triple(
        self,
        subject: URIRef | BNode,
        predicate: URIRef,
        object: Node,
        graph: URIRef | BNode | None = None,
    ) -> None:
        self.remove(Statement(subject, predicate, object, graph))

    def remove_matching(self, pattern: QueryPattern) -> int:
        """Remove every statement matching the pattern.

        Returns:
            Number of statements removed
        """
        matches = self.match(pattern)
        for statement in matches:
            self.remove(statement)
        return len(matches)

    def clear(self) -> None:
        """Remove all statements. Registered prefixes are kept."""
        removed = self.remove_matching(QueryPattern())
        logger.debug("Cleared %d statements", removed)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def match(self, pattern: QueryPattern | None = None) -> list[Statement]:
        """Return all statements matching the pattern, in store order."""
        pattern = pattern or QueryPattern()
        quads = self._dataset.quads((pattern.subject, pattern.predicate, pattern.object, pattern.graph))
        return [Statement(s, p, o, _graph_name(c)) for s, p, o, c in quads]

    def has(self, statement: Statement) -> bool:
        """Check whether this exact statement is in the store."""
        quads = self._dataset.quads((*statement.to_triple(), self._context(statement.graph)))
        return next(iter(quads), None) is not None

    def size(self) -> int:
        return len(self.match())

    def subjects(self) -> set[URIRef | BNode]:
        return {statement.subject for statement in self.match()}

    def predicates(self) -> set[URIRef]:
        return {statement.predicate for statement in self.match()}

    def objects_for(
        self,
        subject: URIRef | BNode,
        predicate: URIRef,
        graph: URIRef | BNode | None = None,
    ) -> list[Node]:
        """Get all objects for a given subject and predicate (and graph, if given)."""
        return [statement.object for statement in self.match(QueryPattern(subject, predicate, None, graph))]

    def stats(self) -> DatastoreStats:
        """Get statistics about the datastore."""
        statements = self.match()
        return DatastoreStats(
            triple_count=len(statements),
            subject_count=len({s.subject for s in statements}),
            predicate_count=len({s.predicate for s in statements}),
            graph_count=len({s.graph for s in statements if s.graph is not None}),
        )

    def export_statements(self) -> list[Statement]:
        return self.match()

    # ------------------------------------------------------------------
    # Prefixes
    # ------------------------------------------------------------------

    def set_prefix(self, prefix: str, uri: str) -> None:
        """Register a prefix for use in serialization."""
        self._prefixes[prefix] = uri

    def get_prefixes(self) -> dict[str, str]:
        return dict(self._prefixes)

    # ------------------------------------------------------------------
    # Text formats
    # ------------------------------------------------------------------

    async def parse(self, text: str, format: str = "turtle") -> None:
        """Parse RDF text and merge its statements and prefixes into the store.

        Decoding happens off the event loop into a scratch graph. Nothing is
        merged unless the whole document decodes.

        Args:
            text: The document to parse
            format: turtle, n-triples, n-quads or trig

        Raises:
            ParseError: If the text is malformed
        """
        _rdflib_format(format)
        statements, prefixes = await asyncio.to_thread(_decode, text, format)

        self.add_statements(statements)
        for prefix, uri in prefixes.items():
            self.set_prefix(prefix, uri)

        logger.debug("Merged %d statements and %d prefixes from %s", len(statements), len(prefixes), format)

    async def serialize(self, options: SerializationOptions | None = None) -> str:
        """Serialize every statement in the store.

        Args:
            options: Output format and prefixes (defaults to Turtle with the
                store's own prefixes)

        Raises:
            SerializationError: If the encoder fails
        """
        options = options or SerializationOptions()
        prefixes = options.prefixes if options.prefixes is not None else self.get_prefixes()
        statements = self.export_statements()

        text = await asyncio.to_thread(_encode, statements, options.format, prefixes)
        logger.debug("Serialized %d statements as %s", len(statements), options.format)
        return text

    def _context(self, graph: URIRef | BNode | None):
        """Map a statement's graph to the dataset context holding it."""
        return _default_graph(self._dataset) if graph is None else graph


def _rdflib_format(format: str) -> str:
    try:
        return FORMATS[format]
    except KeyError:
        raise ValueError(f"Unsupported RDF format: {format}. Use one of: {', '.join(FORMATS)}") from None


def _graph_name(context) -> URIRef | BNode | None:
    """Decode the graph position of a dataset quad; the default graph becomes None."""
    identifier = getattr(context, "identifier", context)
    if identifier is None or identifier == DATASET_DEFAULT_GRAPH_ID:
        return None
    return identifier


def _default_graph(dataset: Dataset) -> Graph:
    # Newer rdflib renamed default_context to default_graph and deprecated the old name
    graph = getattr(dataset, "default_graph", None)
    return graph if graph is not None else dataset.default_context


def _scratch_graph(format: str) -> Graph:
    """An empty graph with no prefixes bound, so its bindings are exactly what a parse declares."""
    if format not in QUAD_FORMATS:
        return Graph(bind_namespaces="none")
    dataset = Dataset()
    # Quad parsers bind through the default graph, which shares the dataset's store
    manager = NamespaceManager(dataset, bind_namespaces="none")
    dataset.namespace_manager = manager
    _default_graph(dataset).namespace_manager = manager
    return dataset


def _decode(text: str, format: str) -> tuple[list[Statement], dict[str, str]]:
    """Decode a document into statements and the prefixes it declared."""
    graph = _scratch_graph(format)

    try:
        graph.parse(data=text, format=_rdflib_format(format))
    except Exception as exc:
        line = getattr(exc, "lines", None)
        line = line + 1 if isinstance(line, int) else None
        location = f" at line {line}" if line is not None else ""
        raise ParseError(f"Invalid {format} input{location}: {exc}", line=line) from exc

    if format in QUAD_FORMATS:
        statements = [Statement(s, p, o, _graph_name(c)) for s, p, o, c in graph.quads((None, None, None, None))]
    else:
        statements = [Statement(s, p, o) for s, p, o in graph]

    prefixes = {prefix: str(uri) for prefix, uri in graph.namespaces()}
    return statements, prefixes


def _encode(statements: list[Statement], format: str, prefixes: dict[str, str]) -> str:
    graph = _scratch_graph(format)

    try:
        for prefix, uri in prefixes.items():
            graph.bind(prefix, uri, override=True, replace=True)

        if format in QUAD_FORMATS:
            for statement in statements:
                context = statement.graph if statement.graph is not None else _default_graph(graph)
                graph.add((*statement.to_triple(), context))
        else:
            # Turtle and N-Triples have no graph names
            for statement in statements:
                graph.add(statement.to_triple())

        return graph.serialize(format=_rdflib_format(format))
    except Exception as exc:
        raise SerializationError(f"Could not serialize as {format}: {exc}") from exc

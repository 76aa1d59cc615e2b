"""Common RDF namespaces and helpers for building URIs from them."""

from types import SimpleNamespace

from rdflib import URIRef

NAMESPACES: dict[str, str] = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "owl": "http://www.w3.org/2002/07/owl#",
    "skos": "http://www.w3.org/2004/02/skos/core#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "foaf": "http://xmlns.com/foaf/0.1/",
    "schema": "http://schema.org/",
}


def ns(namespace: str, local_name: str) -> URIRef:
    """Join a namespace URI and a local name.

    No separator is inserted, so the namespace must already end in '#' or '/'.
    """
    return URIRef(namespace + local_name)


def _curry(namespace: str):
    def build(local_name: str) -> URIRef:
        return ns(namespace, local_name)

    return build


# vocab.foaf("name") -> <http://xmlns.com/foaf/0.1/name>
vocab = SimpleNamespace(**{prefix: _curry(uri) for prefix, uri in NAMESPACES.items()})

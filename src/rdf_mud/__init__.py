"""RDF MUD - an RDF datastore wrapper and a text adventure engine built on it."""

__version__ = "0.1.0"

"""MUD engine - a small text adventure whose world lives in an RDF datastore."""

from rdf_mud.mud.commands import Command, CommandProcessor
from rdf_mud.mud.ontology import DIRECTION_ALIASES, MUD_PREFIX, RDF_TYPE, Direction, EntityKind, MudVocabulary
from rdf_mud.mud.world import MudWorld
from rdf_mud.mud.worlds import create_simple_world

__all__ = [
    "Command",
    "CommandProcessor",
    "DIRECTION_ALIASES",
    "Direction",
    "EntityKind",
    "MUD_PREFIX",
    "MudVocabulary",
    "MudWorld",
    "RDF_TYPE",
    "create_simple_world",
]

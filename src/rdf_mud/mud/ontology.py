"""MUD ontology - the RDF vocabulary for rooms, items and players."""

from enum import Enum

from rdflib import Namespace, URIRef

from ..config import get_settings
from ..rdf.namespaces import vocab

MUD_PREFIX = "mud"

RDF_TYPE = vocab.rdf("type")


class EntityKind(str, Enum):
    """Kinds of game entity; the value is the ID prefix."""

    ROOM = "room"
    ITEM = "item"
    PLAYER = "player"


class Direction(str, Enum):
    """Exit directions."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"
    UP = "up"
    DOWN = "down"

    @classmethod
    def parse(cls, text: str) -> "Direction | None":
        """Resolve a full direction name or single-letter alias (case-insensitive)."""
        text = text.lower()
        if text in DIRECTION_ALIASES:
            return DIRECTION_ALIASES[text]
        try:
            return cls(text)
        except ValueError:
            return None


DIRECTION_ALIASES: dict[str, Direction] = {d.value[0]: d for d in Direction}


class MudVocabulary:
    """RDF terms for game entity classes and properties."""

    def __init__(self, namespace: str | None = None):
        """Initialize the vocabulary.

        Args:
            namespace: Namespace URI for MUD terms (default from config)
        """
        self.namespace = Namespace(namespace or get_settings().mud_namespace)
        term = self.namespace.term

        # Classes
        self.Room = term("Room")
        self.Item = term("Item")
        self.Player = term("Player")

        # Properties
        self.name = term("name")
        self.description = term("description")
        self.location = term("location")
        self.contains = term("contains")
        self.portable = term("portable")
        self.inventory = term("inventory")

    def direction(self, direction: Direction) -> URIRef:
        """Predicate for an exit in the given direction."""
        return self.namespace.term(direction.value)

    def entity_class(self, kind: EntityKind) -> URIRef:
        return {
            EntityKind.ROOM: self.Room,
            EntityKind.ITEM: self.Item,
            EntityKind.PLAYER: self.Player,
        }[kind]

"""Game world state stored as RDF triples."""

import logging

from rdflib import URIRef
from rdflib.term import Node

from ..config import get_settings
from ..models.rdf import QueryPattern
from ..rdf.store import RDFDatastore
from ..rdf.terms import create_boolean_literal, create_literal, create_named_node
from .ontology import MUD_PREFIX, RDF_TYPE, Direction, EntityKind, MudVocabulary

logger = logging.getLogger(__name__)


class MudWorld:
    """Rooms, items and players mapped onto an RDF datastore.

    Every entity gets a URI of the form <base>/<kind>-<n>. Relationships are
    plain triples:

        item   mud:location  room|player
        room   mud:contains  item
        player mud:inventory item
        room   mud:north     room   (and the other directions)

    An item's location triple and its holder's reverse triple always change
    together; every item move goes through _relocate_item.
    """

    def __init__(
        self,
        store: RDFDatastore | None = None,
        base_uri: str | None = None,
        namespace: str | None = None,
    ):
        """Initialize the world.

        Args:
            store: Datastore to write into (a fresh one if not provided)
            base_uri: Base URI for entity identifiers (default from config)
            namespace: MUD vocabulary namespace (default from config)
        """
        self._store = store if store is not None else RDFDatastore()
        self._entity_counter = 0
        # Entity IDs are decoded from the last path segment, so the base must end in a separator
        self.base_uri = (base_uri or get_settings().entity_base_uri).rstrip("/") + "/"
        self.vocab = MudVocabulary(namespace)

        self._store.set_prefix(MUD_PREFIX, str(self.vocab.namespace))

    @property
    def store(self) -> RDFDatastore:
        """The underlying datastore (for advanced queries)."""
        return self._store

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def allocate_id(self, kind: EntityKind) -> str:
        """Allocate the next entity ID. The counter is shared by all kinds."""
        self._entity_counter += 1
        return f"{kind.value}-{self._entity_counter}"

    def entity_uri(self, entity_id: str) -> URIRef:
        return create_named_node(f"{self.base_uri}{entity_id}")

    @staticmethod
    def entity_id(uri: Node) -> str:
        """Decode an entity ID from the last path segment of its URI."""
        return str(uri).rsplit("/", 1)[-1]

    def list_entities(self, kind: EntityKind) -> list[str]:
        """IDs of every entity of the given kind."""
        pattern = QueryPattern(predicate=RDF_TYPE, object=self.vocab.entity_class(kind))
        return [self.entity_id(s.subject) for s in self._store.match(pattern)]

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def create_room(self, name: str, description: str) -> str:
        room_id = self._create_entity(EntityKind.ROOM, name, description)
        logger.debug("Created room %s (%s)", room_id, name)
        return room_id

    def connect_rooms(self, from_room_id: str, direction: Direction | str, to_room_id: str) -> None:
        """Add a one-way exit. Reciprocal exits need a second call."""
        predicate = self.vocab.direction(Direction(direction))
        self._store.add_triple(self.entity_uri(from_room_id), predicate, self.entity_uri(to_room_id))

    def get_room_name(self, room_id: str) -> str | None:
        return self._first_value(room_id, self.vocab.name)

    def get_room_description(self, room_id: str) -> str | None:
        return self._first_value(room_id, self.vocab.description)

    def get_room_exits(self, room_id: str) -> dict[str, str]:
        """Map each direction with an exit to the target room ID."""
        room = self.entity_uri(room_id)
        exits: dict[str, str] = {}

        for direction in Direction:
            targets = self._store.objects_for(room, self.vocab.direction(direction))
            if targets:
                exits[direction.value] = self.entity_id(targets[0])

        return exits

    def get_room_items(self, room_id: str) -> list[str]:
        items = self._store.objects_for(self.entity_uri(room_id), self.vocab.contains)
        return [self.entity_id(item) for item in items]

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def create_item(self, name: str, description: str, portable: bool = True) -> str:
        item_id = self._create_entity(EntityKind.ITEM, name, description)
        self._store.add_triple(self.entity_uri(item_id), self.vocab.portable, create_boolean_literal(portable))
        logger.debug("Created item %s (%s, portable=%s)", item_id, name, portable)
        return item_id

    def place_item(self, item_id: str, room_id: str) -> None:
        """Put an item in a room, taking it away from wherever it was."""
        self._relocate_item(item_id, room_id, self.vocab.contains)

    def get_item_name(self, item_id: str) -> str | None:
        return self._first_value(item_id, self.vocab.name)

    def get_item_description(self, item_id: str) -> str | None:
        return self._first_value(item_id, self.vocab.description)

    def is_item_portable(self, item_id: str) -> bool:
        return self._first_value(item_id, self.vocab.portable) == "true"

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    def create_player(self, name: str, starting_room_id: str) -> str:
        player_id = self.allocate_id(EntityKind.PLAYER)
        player = self.entity_uri(player_id)

        self._store.add_triple(player, RDF_TYPE, self.vocab.Player)
        self._store.add_triple(player, self.vocab.name, create_literal(name))
        self._store.add_triple(player, self.vocab.location, self.entity_uri(starting_room_id))

        logger.debug("Created player %s (%s) in %s", player_id, name, starting_room_id)
        return player_id

    def get_player_name(self, player_id: str) -> str | None:
        return self._first_value(player_id, self.vocab.name)

    def get_player_location(self, player_id: str) -> str | None:
        locations = self._store.objects_for(self.entity_uri(player_id), self.vocab.location)
        return self.entity_id(locations[0]) if locations else None

    def move_player(self, player_id: str, room_id: str) -> None:
        """Move a player, dropping every previous location triple."""
        player = self.entity_uri(player_id)
        self._store.remove_matching(QueryPattern(subject=player, predicate=self.vocab.location))
        self._store.add_triple(player, self.vocab.location, self.entity_uri(room_id))

    def add_to_inventory(self, player_id: str, item_id: str) -> None:
        self._relocate_item(item_id, player_id, self.vocab.inventory)

    def remove_from_inventory(self, player_id: str, item_id: str) -> None:
        player = self.entity_uri(player_id)
        item = self.entity_uri(item_id)

        self._store.remove_triple(player, self.vocab.inventory, item)
        self._store.remove_triple(item, self.vocab.location, player)

    def get_player_inventory(self, player_id: str) -> list[str]:
        items = self._store.objects_for(self.entity_uri(player_id), self.vocab.inventory)
        return [self.entity_id(item) for item in items]

    def drop_item(self, player_id: str, item_id: str) -> None:
        """Drop an item from a player's inventory into the room they are in now."""
        room_id = self.get_player_location(player_id)
        if room_id is None:
            return

        self.remove_from_inventory(player_id, item_id)
        self.place_item(item_id, room_id)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    async def export_world(self) -> str:
        """Export the whole world as Turtle."""
        return await self._store.serialize()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _create_entity(self, kind: EntityKind, name: str, description: str) -> str:
        entity_id = self.allocate_id(kind)
        entity = self.entity_uri(entity_id)

        self._store.add_triple(entity, RDF_TYPE, self.vocab.entity_class(kind))
        self._store.add_triple(entity, self.vocab.name, create_literal(name))
        self._store.add_triple(entity, self.vocab.description, create_literal(description))

        return entity_id

    def _first_value(self, entity_id: str, predicate: URIRef) -> str | None:
        values = self._store.objects_for(self.entity_uri(entity_id), predicate)
        return str(values[0]) if values else None

    def _relocate_item(self, item_id: str, holder_id: str, reverse_predicate: URIRef) -> None:
        """Detach an item from every holder, then attach it to a new one.

        Args:
            item_id: The item to move
            holder_id: The room or player receiving it
            reverse_predicate: mud:contains for rooms, mud:inventory for players
        """
        item = self.entity_uri(item_id)
        holder = self.entity_uri(holder_id)

        self._store.remove_matching(QueryPattern(subject=item, predicate=self.vocab.location))
        self._store.remove_matching(QueryPattern(predicate=self.vocab.contains, object=item))
        self._store.remove_matching(QueryPattern(predicate=self.vocab.inventory, object=item))

        self._store.add_triple(item, self.vocab.location, holder)
        self._store.add_triple(holder, reverse_predicate, item)
        logger.debug("Moved %s to %s", item_id, holder_id)

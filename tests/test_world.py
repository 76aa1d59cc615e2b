"""Tests for the RDF-backed game world."""

import pytest
from rdflib import URIRef

from rdf_mud.models import QueryPattern
from rdf_mud.mud.ontology import RDF_TYPE, Direction, EntityKind
from rdf_mud.mud.world import MudWorld
from rdf_mud.mud.worlds import create_simple_world


@pytest.fixture
def world():
    return MudWorld()


class TestIdentity:
    """Entity ID allocation and URIs."""

    def test_ids_share_one_counter(self, world):
        room_id = world.create_room("Hall", "A hall.")
        item_id = world.create_item("Lamp", "A lamp.")
        player_id = world.create_player("Alice", room_id)

        assert room_id == "room-1"
        assert item_id == "item-2"
        assert player_id == "player-3"

    def test_counter_is_per_world(self):
        assert MudWorld().create_room("A", "a") == MudWorld().create_room("B", "b")

    def test_entity_uri_round_trip(self, world):
        uri = world.entity_uri("room-7")
        assert uri == URIRef("http://example.org/game/room-7")
        assert world.entity_id(uri) == "room-7"

    def test_custom_base_uri(self):
        world = MudWorld(base_uri="http://example.com/castle/")
        room_id = world.create_room("Keep", "Stone walls.")
        assert world.entity_uri(room_id) == URIRef("http://example.com/castle/room-1")
        assert world.get_room_name(room_id) == "Keep"

    def test_base_uri_without_trailing_slash(self):
        world = MudWorld(base_uri="http://example.com/castle")
        a = world.create_room("Gate", "An iron gate.")
        b = world.create_room("Yard", "A muddy yard.")
        world.connect_rooms(a, Direction.NORTH, b)
        player_id = world.create_player("Alice", a)

        assert world.entity_uri(a) == URIRef("http://example.com/castle/room-1")
        assert world.get_room_exits(a) == {"north": b}
        assert world.get_player_location(player_id) == a

    def test_list_entities(self, world):
        hall = world.create_room("Hall", "A hall.")
        kitchen = world.create_room("Kitchen", "A kitchen.")
        world.create_item("Lamp", "A lamp.")

        assert sorted(world.list_entities(EntityKind.ROOM)) == sorted([hall, kitchen])
        assert len(world.list_entities(EntityKind.ITEM)) == 1
        assert world.list_entities(EntityKind.PLAYER) == []


class TestRooms:
    """Room creation, lookup and exits."""

    def test_name_and_description(self, world):
        room_id = world.create_room("Library", "X")
        assert world.get_room_name(room_id) == "Library"
        assert world.get_room_description(room_id) == "X"

    def test_room_is_typed(self, world):
        room_id = world.create_room("Library", "X")
        room = world.entity_uri(room_id)
        assert world.store.match(QueryPattern(subject=room, predicate=RDF_TYPE))[0].object == world.vocab.Room

    def test_missing_room(self, world):
        assert world.get_room_name("room-99") is None
        assert world.get_room_description("room-99") is None
        assert world.get_room_exits("room-99") == {}
        assert world.get_room_items("room-99") == []

    def test_exits_are_one_directional(self, world):
        a = world.create_room("A", "Room A")
        b = world.create_room("B", "Room B")
        world.connect_rooms(a, Direction.NORTH, b)

        assert world.get_room_exits(a) == {"north": b}
        assert world.get_room_exits(b) == {}

    def test_exits_accept_direction_names(self, world):
        a = world.create_room("A", "Room A")
        b = world.create_room("B", "Room B")
        world.connect_rooms(a, "up", b)
        world.connect_rooms(b, "down", a)

        assert world.get_room_exits(a) == {"up": b}
        assert world.get_room_exits(b) == {"down": a}

    def test_exits_in_direction_order(self, world):
        hub = world.create_room("Hub", "Center")
        west = world.create_room("West", "w")
        north = world.create_room("North", "n")
        world.connect_rooms(hub, Direction.WEST, west)
        world.connect_rooms(hub, Direction.NORTH, north)

        assert list(world.get_room_exits(hub)) == ["north", "west"]


class TestItems:
    """Item creation and placement."""

    def test_item_properties(self, world):
        item_id = world.create_item("Sword", "A sharp blade.", True)
        assert world.get_item_name(item_id) == "Sword"
        assert world.get_item_description(item_id) == "A sharp blade."
        assert world.is_item_portable(item_id)

    def test_non_portable(self, world):
        item_id = world.create_item("Boulder", "Huge.", False)
        assert not world.is_item_portable(item_id)

    def test_portable_by_default(self, world):
        assert world.is_item_portable(world.create_item("Coin", "Shiny."))

    def test_missing_item(self, world):
        assert world.get_item_name("item-99") is None
        assert not world.is_item_portable("item-99")

    def test_place_item(self, world):
        room_id = world.create_room("Hall", "A hall.")
        item_id = world.create_item("Lamp", "A lamp.")
        world.place_item(item_id, room_id)

        assert world.get_room_items(room_id) == [item_id]

    def test_placing_again_relocates(self, world):
        first = world.create_room("First", "1")
        second = world.create_room("Second", "2")
        item_id = world.create_item("Lamp", "A lamp.")

        world.place_item(item_id, first)
        world.place_item(item_id, second)

        item = world.entity_uri(item_id)
        assert world.store.objects_for(item, world.vocab.location) == [world.entity_uri(second)]
        assert world.get_room_items(first) == []
        assert world.get_room_items(second) == [item_id]

    def test_placing_carried_item_empties_inventory(self, world):
        room_id = world.create_room("Hall", "A hall.")
        player_id = world.create_player("Alice", room_id)
        item_id = world.create_item("Lamp", "A lamp.")
        world.add_to_inventory(player_id, item_id)

        world.place_item(item_id, room_id)

        assert world.get_player_inventory(player_id) == []
        assert world.get_room_items(room_id) == [item_id]


class TestPlayers:
    """Player location and inventory."""

    @pytest.fixture
    def setup(self, world):
        hall = world.create_room("Hall", "A hall.")
        kitchen = world.create_room("Kitchen", "A kitchen.")
        world.connect_rooms(hall, Direction.EAST, kitchen)
        player_id = world.create_player("Alice", hall)
        return hall, kitchen, player_id

    def test_create_player(self, world, setup):
        hall, _, player_id = setup
        assert world.get_player_name(player_id) == "Alice"
        assert world.get_player_location(player_id) == hall

    def test_missing_player(self, world):
        assert world.get_player_location("player-99") is None
        assert world.get_player_inventory("player-99") == []

    def test_move_player(self, world, setup):
        _, kitchen, player_id = setup
        world.move_player(player_id, kitchen)
        assert world.get_player_location(player_id) == kitchen

    def test_move_player_clears_stale_locations(self, world, setup):
        hall, kitchen, player_id = setup
        player = world.entity_uri(player_id)
        world.store.add_triple(player, world.vocab.location, world.entity_uri(kitchen))

        world.move_player(player_id, hall)

        assert world.store.objects_for(player, world.vocab.location) == [world.entity_uri(hall)]

    def test_take_moves_item_from_room(self, world, setup):
        hall, _, player_id = setup
        item_id = world.create_item("Lamp", "A lamp.")
        world.place_item(item_id, hall)

        world.add_to_inventory(player_id, item_id)

        assert world.get_room_items(hall) == []
        assert world.get_player_inventory(player_id) == [item_id]
        item = world.entity_uri(item_id)
        assert world.store.objects_for(item, world.vocab.location) == [world.entity_uri(player_id)]

    def test_remove_from_inventory(self, world, setup):
        _, _, player_id = setup
        item_id = world.create_item("Lamp", "A lamp.")
        world.add_to_inventory(player_id, item_id)

        world.remove_from_inventory(player_id, item_id)

        assert world.get_player_inventory(player_id) == []
        assert world.store.objects_for(world.entity_uri(item_id), world.vocab.location) == []

    def test_drop_goes_to_current_room(self, world, setup):
        hall, kitchen, player_id = setup
        item_id = world.create_item("Lamp", "A lamp.")
        world.place_item(item_id, hall)
        world.add_to_inventory(player_id, item_id)

        world.move_player(player_id, kitchen)
        world.drop_item(player_id, item_id)

        assert world.get_player_inventory(player_id) == []
        assert world.get_room_items(kitchen) == [item_id]
        assert world.get_room_items(hall) == []


class TestExport:
    """Exporting the world as Turtle."""

    @pytest.mark.asyncio
    async def test_export_world(self, world):
        world.create_room("Library", "Full of books.")
        turtle = await world.export_world()

        assert "mud:Room" in turtle
        assert "Library" in turtle

    @pytest.mark.asyncio
    async def test_sample_world_exports(self):
        world, player_id = create_simple_world()
        turtle = await world.export_world()

        assert "Entrance Hall" in turtle
        assert world.get_player_name(player_id) == "Adventurer"

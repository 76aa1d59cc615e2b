"""A small sample world for demos and the CLI."""

from .ontology import Direction
from .world import MudWorld


def create_simple_world() -> tuple[MudWorld, str]:
    """Create a four-room house with a few items and one player.

    Returns:
        The world and the ID of the player standing in the entrance hall
    """
    world = MudWorld()

    entrance = world.create_room(
        "Entrance Hall",
        "You stand in a grand entrance hall with marble floors and high ceilings. "
        "Dust motes dance in the sunlight streaming through tall windows. "
        "A large wooden door stands to the north, and a narrow corridor leads east.",
    )
    library = world.create_room(
        "Ancient Library",
        "Towering bookshelves line the walls of this musty library. The air smells of old paper "
        "and leather. A reading desk sits in the center of the room.",
    )
    garden = world.create_room(
        "Overgrown Garden",
        "What was once a manicured garden is now a wild tangle of plants and flowers. "
        "A stone fountain stands silent in the center, its basin dry and cracked. "
        "The path leads back west, and a set of stairs leads down into darkness.",
    )
    cellar = world.create_room(
        "Dark Cellar",
        "The damp cellar is dark and cold. You can hear water dripping somewhere in the darkness. "
        "Wooden stairs lead back up to the garden.",
    )

    corridors = [
        (entrance, Direction.NORTH, library, Direction.SOUTH),
        (entrance, Direction.EAST, garden, Direction.WEST),
        (garden, Direction.DOWN, cellar, Direction.UP),
    ]
    for here, way, there, way_back in corridors:
        world.connect_rooms(here, way, there)
        world.connect_rooms(there, way_back, here)

    items = [
        ("rusty key", "A small, rusty key with an ornate handle. It looks quite old.", True, cellar),
        ("ancient tome", 'A heavy leather-bound book titled "Mysteries of the Old World".', True, library),
        ("oil lamp", "A brass oil lamp with a glass chimney. It still has some oil in it.", True, entrance),
        ("stone fountain", "A large stone fountain carved with mythical creatures. Far too heavy to move.", False, garden),
        ("reading desk", "A sturdy oak desk with a leather writing surface.", False, library),
    ]
    for name, description, portable, room in items:
        world.place_item(world.create_item(name, description, portable), room)

    player_id = world.create_player("Adventurer", entrance)
    return world, player_id

"""Player command parsing and dispatch."""

import logging
from abc import ABC, abstractmethod

from ..models.commands import CommandResult
from .ontology import DIRECTION_ALIASES, Direction
from .world import MudWorld

logger = logging.getLogger(__name__)

NOWHERE = CommandResult(success=False, message="You are nowhere!")


class Command(ABC):
    """A player command. Handlers report every outcome through CommandResult."""

    name: str
    aliases: tuple[str, ...] = ()
    description: str = ""

    @abstractmethod
    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        """Run the command for a player."""


class CommandProcessor:
    """Processes and executes player commands.

    Usage:
        processor = CommandProcessor()
        result = processor.process_command(world, player_id, "take lamp")
        print(result.message)
    """

    def __init__(self):
        self._commands: dict[str, Command] = {}
        self._register_default_commands()

    def _register_default_commands(self) -> None:
        self.register_command(LookCommand())

        go = GoCommand()
        self.register_command(go)

        # Bare directions: "n" and "north" both act as "go north"
        for direction in Direction:
            self.register_command(DirectionCommand(direction.value, direction, go))
        for alias, direction in DIRECTION_ALIASES.items():
            self.register_command(DirectionCommand(alias, direction, go))

        self.register_command(TakeCommand())
        self.register_command(DropCommand())
        self.register_command(InventoryCommand())
        self.register_command(HelpCommand(self))

    def register_command(self, command: Command) -> None:
        """Register a command under its name and all of its aliases."""
        self._commands[command.name.lower()] = command
        for alias in command.aliases:
            self._commands[alias.lower()] = command

    def get_commands(self) -> list[Command]:
        """Distinct registered commands, in registration order."""
        unique: dict[int, Command] = {}
        for command in self._commands.values():
            unique.setdefault(id(command), command)
        return list(unique.values())

    def process_command(self, world: MudWorld, player_id: str, text: str) -> CommandResult:
        """Parse a line of input and run the matching command."""
        parts = text.split()
        if not parts:
            return CommandResult(success=False, message="Please enter a command.")

        command_name = parts[0].lower()
        args = parts[1:]

        command = self._commands.get(command_name)
        if command is None:
            logger.info("Unknown command from %s: %s", player_id, command_name)
            return CommandResult(
                success=False,
                message=f"Unknown command: {command_name}. Type 'help' for a list of commands.",
            )

        logger.debug("Dispatching %s %s for %s", command.name, args, player_id)
        return command.execute(world, player_id, args)


def _find_item_by_name(world: MudWorld, item_ids: list[str], search: str) -> str | None:
    """First item whose name contains the search text (case-insensitive)."""
    search = search.lower()
    for item_id in item_ids:
        name = world.get_item_name(item_id)
        if name and search in name.lower():
            return item_id
    return None


class LookCommand(Command):
    """Describe the current room."""

    name = "look"
    aliases = ("l",)
    description = "Look around the current room"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        room_id = world.get_player_location(player_id)
        if room_id is None:
            return NOWHERE

        room_name = world.get_room_name(room_id) or ""
        lines = ["", room_name, "=" * len(room_name), world.get_room_description(room_id) or "", ""]

        exits = world.get_room_exits(room_id)
        if exits:
            lines.append(f"Exits: {', '.join(exits)}")
        else:
            lines.append("There are no obvious exits.")

        items = world.get_room_items(room_id)
        if items:
            lines.append("")
            lines.append("You see:")
            lines.extend(f"  - {world.get_item_name(item_id)}" for item_id in items)

        return CommandResult(success=True, message="\n".join(lines))


class GoCommand(Command):
    """Move in a direction."""

    name = "go"
    description = "Move in a direction (go <direction>)"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        if world.get_player_location(player_id) is None:
            return NOWHERE

        if not args:
            return CommandResult(
                success=False,
                message="Go where? Please specify a direction (north, south, east, west, up, down).",
            )

        direction = Direction.parse(args[0])
        if direction is None:
            return CommandResult(
                success=False,
                message=f"Invalid direction: {args[0].lower()}. Use north, south, east, west, up, or down.",
            )

        return self.move(world, player_id, direction)

    def move(self, world: MudWorld, player_id: str, direction: Direction) -> CommandResult:
        """Move the player through an exit and describe the new room."""
        room_id = world.get_player_location(player_id)
        if room_id is None:
            return NOWHERE

        target_id = world.get_room_exits(room_id).get(direction.value)
        if target_id is None:
            return CommandResult(success=False, message=f"You can't go {direction.value} from here.")

        world.move_player(player_id, target_id)
        look = LookCommand().execute(world, player_id, [])

        return CommandResult(success=True, message=f"You go {direction.value}.\n{look.message}")


class DirectionCommand(Command):
    """Shortcut that delegates to GoCommand for a fixed direction."""

    def __init__(self, name: str, direction: Direction, go: GoCommand):
        self.name = name
        self.direction = direction
        self._go = go

    @property
    def description(self) -> str:
        return f"Move {self.direction.value}"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        return self._go.move(world, player_id, self.direction)


class TakeCommand(Command):
    """Pick up an item from the current room."""

    name = "take"
    aliases = ("get", "pickup")
    description = "Pick up an item (take <item>)"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult(success=False, message="Take what? Please specify an item.")

        room_id = world.get_player_location(player_id)
        if room_id is None:
            return NOWHERE

        search = " ".join(args)
        item_id = _find_item_by_name(world, world.get_room_items(room_id), search)
        if item_id is None:
            return CommandResult(success=False, message=f'There is no "{search}" here.')

        if not world.is_item_portable(item_id):
            return CommandResult(success=False, message="You can't take that.")

        world.add_to_inventory(player_id, item_id)
        return CommandResult(success=True, message=f"You take the {world.get_item_name(item_id)}.")


class DropCommand(Command):
    """Drop an item into the current room."""

    name = "drop"
    description = "Drop an item from your inventory (drop <item>)"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult(success=False, message="Drop what? Please specify an item.")

        search = " ".join(args)
        item_id = _find_item_by_name(world, world.get_player_inventory(player_id), search)
        if item_id is None:
            return CommandResult(success=False, message=f'You don\'t have "{search}" in your inventory.')

        if world.get_player_location(player_id) is None:
            return NOWHERE

        world.drop_item(player_id, item_id)
        return CommandResult(success=True, message=f"You drop the {world.get_item_name(item_id)}.")


class InventoryCommand(Command):
    """List carried items."""

    name = "inventory"
    aliases = ("inv", "i")
    description = "Show your inventory"

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        inventory = world.get_player_inventory(player_id)
        if not inventory:
            return CommandResult(success=True, message="Your inventory is empty.")

        lines = ["You are carrying:"]
        lines.extend(f"  - {world.get_item_name(item_id)}" for item_id in inventory)
        return CommandResult(success=True, message="\n".join(lines))


class HelpCommand(Command):
    """List every registered command."""

    name = "help"
    aliases = ("?", "commands")
    description = "Show this help message"

    def __init__(self, processor: CommandProcessor):
        self._processor = processor

    def execute(self, world: MudWorld, player_id: str, args: list[str]) -> CommandResult:
        lines = ["Available commands:"]
        for command in self._processor.get_commands():
            line = f"  {command.name}"
            if command.aliases:
                line += f" ({', '.join(command.aliases)})"
            lines.append(f"{line} - {command.description}")
        return CommandResult(success=True, message="\n".join(lines))

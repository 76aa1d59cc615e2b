"""Command result model."""

from pydantic import BaseModel


class CommandResult(BaseModel):
    """Result of executing a player command."""

    success: bool
    message: str

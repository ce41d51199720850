"""
Base schemas for the API.
"""

from ninja import Schema


class MessageSchema(Schema):
    """Toast message returned after a successful action."""

    success: bool = True
    message: str | None = None


class ChoiceSchema(Schema):
    """A value/label pair for select inputs."""

    value: str
    label: str

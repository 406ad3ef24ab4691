# gadgetbox/core/gadgets/schemas.py
"""Pydantic models validating the persisted gadget file.

The file is a JSON object keyed by gadget name. Files written by older
versions may carry ``"variables": null``; that is accepted as empty.
"""

from pydantic import BaseModel, Field, RootModel, field_validator


class GadgetRecord(BaseModel):
    """One stored gadget.

    Attributes:
        description: Gadget description.
        command: Command template.
        variables: Placeholder name to description.
    """

    description: str = Field("", description="Gadget description")
    command: str = Field(..., description="Command template with {{placeholders}}")
    variables: dict[str, str] = Field(
        default_factory=dict, description="Placeholder descriptions"
    )

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("variables", mode="before")
    @classmethod
    def _none_variables(cls, value: object) -> object:
        return {} if value is None else value


class GadgetFile(RootModel[dict[str, GadgetRecord]]):
    """The whole persisted collection."""

"""Schemas for the admin settings endpoint (/v1/admin/settings)."""

from pydantic import BaseModel, Field


class SettingsOut(BaseModel):
    """Current tasting settings."""

    show_beer_names: bool = Field(alias="showBeerNames")

    model_config = {"populate_by_name": True}


class SettingsUpdate(BaseModel):
    """Request body for changing the reveal flag."""

    show_beer_names: bool | None = Field(alias="showBeerNames", default=None)

    model_config = {"populate_by_name": True}

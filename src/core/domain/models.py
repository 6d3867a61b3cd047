"""Domain models (Pydantic v2).

Note:
- These models describe *what* the tracker works with, not *how* it is
  fetched or drawn. The domain knows nothing about curses or HTTP.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.flow import FlowKind


class ScreenPosition(BaseModel):
    """Cursor position on the terminal surface.

    Upper bounds (terminal height/width) are the surface's responsibility.
    """

    model_config = ConfigDict(frozen=True)

    row: int = Field(..., ge=0)
    col: int = Field(..., ge=0)


class MenuOption(BaseModel):
    """One entry of the main menu."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        max_length=1,
        description="Single character the user presses.",
    )
    label: str = Field(..., min_length=1, description="Text shown next to the key.")
    kind: FlowKind = Field(..., description="Flow started by this option.")


MENU_OPTIONS: tuple[MenuOption, ...] = (
    MenuOption(
        key="f",
        label="Retrieve NEO data feed (will provide start and end date options)",
        kind=FlowKind.FEED,
    ),
    MenuOption(key="l", label="Lookup NEO by ID", kind=FlowKind.LOOKUP),
)


class DateRange(BaseModel):
    """Optional bounds of a feed query. Unset bounds are left to the server."""

    model_config = ConfigDict(frozen=True)

    start: date | None = Field(default=None, description="First day of the feed.")
    end: date | None = Field(default=None, description="Last day of the feed.")

    def as_params(self) -> dict[str, str]:
        """Query parameters for the set bounds only."""

        params: dict[str, str] = {}
        if self.start is not None:
            params["start_date"] = self.start.isoformat()
        if self.end is not None:
            params["end_date"] = self.end.isoformat()
        return params


class ObjectQuery(BaseModel):
    """Lookup of a single NEO by its identifier (may be empty)."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", description="NeoWs object id (SPK-ID).")


class FetchSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    payload: dict[str, Any] = Field(
        default_factory=dict,
        description="Parsed JSON object returned by the service.",
    )

    def field_names(self) -> list[str]:
        """Top-level keys of the payload, in response order."""

        return list(self.payload.keys())


class FetchNotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["not_found"] = "not_found"


class FetchTransportError(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["transport_error"] = "transport_error"
    message: str = Field(default="request failed")


FetchResult = Annotated[
    Union[FetchSuccess, FetchNotFound, FetchTransportError],
    Field(discriminator="status"),
]

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class WhoIsRequest(BaseModel):
    """Incoming /WhoIs body posted by the Slack app; a null name counts as empty."""

    name: Optional[str] = None


class WhoIsResponse(BaseModel):
    name: str = ""
    error: str = ""


__all__ = ["WhoIsRequest", "WhoIsResponse"]

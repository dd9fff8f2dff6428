"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    service: str

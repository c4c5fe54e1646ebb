# This file defines the response schema for the profile endpoint.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class ProfileUserV1(BaseModel):
    email: str
    name: str
    stack: str


class ProfileResponseV1(BaseModel):
    status: str
    user: ProfileUserV1
    timestamp: datetime
    fact: str

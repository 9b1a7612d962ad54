from __future__ import annotations

from pydantic import BaseModel


class PoolTagResponse(BaseModel):
    contractAddress: str
    nameTag: str
    projectName: str
    websiteLink: str
    note: str

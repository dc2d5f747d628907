from typing import List
from pydantic import BaseModel, ConfigDict, Field


class VoteIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId", min_length=1, examples=["u1"])
    vote: str = Field(..., examples=["あつい"])


class VoteAck(BaseModel):
    ok: bool = True
    message: str = "Vote recorded successfully"


class Health(BaseModel):
    ok: bool = True
    categories: List[str]
    voters: int

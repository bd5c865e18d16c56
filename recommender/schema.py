from typing import Union
from pydantic import BaseModel, ConfigDict


class RankedResult(BaseModel):
    """One candidate from a similarity query. Holds the id, not the Item itself."""

    model_config = ConfigDict(frozen=True)

    item_id: Union[int, str]
    title: str
    similarity: float

    @property
    def percent(self) -> float:
        return self.similarity * 100

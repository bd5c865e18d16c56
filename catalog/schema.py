from typing import Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """A catalog entry described by one rating per attribute key."""

    model_config = ConfigDict(frozen=True)

    id: Union[int, str]
    title: str
    description: str = ""
    rating: Tuple[float, ...] = Field(..., description="One value per attribute key, in key order")


class AttributeKey(BaseModel):
    """Names what a rating position measures. Weight is kept as metadata only."""

    model_config = ConfigDict(frozen=True)

    title: str
    weight: float = 1.0

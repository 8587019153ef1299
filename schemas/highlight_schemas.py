from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional


class HighlightCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    verse_id: str = Field(..., alias='verseId', min_length=1)  # format: "book:chapter:verse"
    color: Literal['yellow', 'blue', 'red', 'green']
    user_id: Optional[str] = Field(None, alias='userId')

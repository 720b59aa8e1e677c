from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Literal, Optional

from .config import SEARCH_LIMIT, MAX_SEARCH_LIMIT

LoadStatus = Literal['idle', 'loading', 'loaded']

class IndexEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    word: str
    # byte range of the definition payload inside the data buffer
    offset: int = Field(ge=0)
    size: int = Field(ge=0)

class SearchQuery(BaseModel):
    query: str = ''
    limit: int = Field(default=SEARCH_LIMIT, ge=0, le=MAX_SEARCH_LIMIT)

class DefinitionQuery(BaseModel):
    word: str

class ExistingWordsQuery(BaseModel):
    words: List[str] = []

class DefinitionResult(BaseModel):
    word: str
    found: bool
    definition: Optional[str] = None

class IndexStatus(BaseModel):
    status: LoadStatus
    entries: int = 0
    lastError: Optional[str] = None

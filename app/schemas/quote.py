from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

# Presence and blankness are checked by the service so it can report which field is missing
class QuoteCreate(BaseModel):
    author: Optional[str] = None
    content: Optional[str] = None

class QuoteUpdate(BaseModel):
    author: Optional[str] = None
    content: Optional[str] = None

class Quote(BaseModel):
    id: int
    author: str
    content: str
    created_at: datetime

    class Config:
        from_attributes = True

class QuoteListOut(BaseModel):
    quotes: List[Quote]

class QuoteDetailOut(BaseModel):
    quote: List[Quote]

class QuoteMutationOut(BaseModel):
    data: List[Quote]
    message: str

class ErrorDetail(BaseModel):
    status: int
    message: str
    operation: Optional[str] = None

class ErrorOut(BaseModel):
    error: ErrorDetail

from __future__ import annotations
from pydantic import BaseModel, Field
from typing import List, Optional

from .game_logic import RejectionKind


class UsedWord(BaseModel):
    word: str
    # shown next to the word in the list
    letters: int


class GameSessionState(BaseModel):
    id: str
    rootWord: str
    usedWords: List[UsedWord] = []
    score: int = 0


class SubmitWord(BaseModel):
    word: str = Field(..., max_length=64)


class Rejection(BaseModel):
    kind: RejectionKind
    title: str
    message: str


class SubmitResult(BaseModel):
    accepted: bool
    word: str
    points: int = 0
    rejection: Optional[Rejection] = None
    state: GameSessionState


class WordCheck(BaseModel):
    word: str
    language: str
    valid: bool


class ErrorMessage(BaseModel):
    detail: str

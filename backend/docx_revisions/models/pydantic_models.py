from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ChangeKind(str, Enum):
    INSERTION = "insertion"
    DELETION = "deletion"
    MOVE_FROM = "moveFrom"
    MOVE_TO = "moveTo"


class TrackChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ChangeKind
    author: str = "Unknown"
    date: str = ""
    text: str
    id: Optional[str] = None


class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    author: str = "Unknown"
    date: str = ""
    text: str = ""
    # Preenchido pelo resolvedor de âncoras (cópia enriquecida)
    anchored_text: Optional[str] = None


class ExtractionSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_insertions: int
    total_deletions: int
    total_moves: int
    total_comments: int


class ExtractionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    insertions: List[TrackChange] = []
    deletions: List[TrackChange] = []
    move_from: List[TrackChange] = []
    move_to: List[TrackChange] = []
    comments: List[Comment] = []

    def summary(self) -> ExtractionSummary:
        return ExtractionSummary(
            total_insertions=len(self.insertions),
            total_deletions=len(self.deletions),
            total_moves=len(self.move_from) + len(self.move_to),
            total_comments=len(self.comments),
        )


class ExtractionResponse(BaseModel):
    success: bool = True
    filename: Optional[str] = None
    summary: ExtractionSummary
    changes: ExtractionResult

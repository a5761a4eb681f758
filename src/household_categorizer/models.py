from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

MatchType = Literal["contains", "regex", "startsWith", "equals"]
ResultSource = Literal["cache", "rule"]


class Transaction(BaseModel):
    id: str
    description: str
    # Carried for callers; classification reads the description only.
    amount: Optional[float] = None
    date: Optional[datetime] = None


class CategoryRule(BaseModel):
    id: str
    family_id: Optional[str] = None # None for global rules
    category_id: str
    name: str = ""
    # Kept open so that unknown values reach the matcher and are skipped there.
    match_type: str = "contains"
    pattern: str
    flags: Optional[str] = None
    priority: int = 50
    confidence: float = Field(default=0.85, ge=0.0, le=1.0)
    is_active: bool = True


class ClassificationResult(BaseModel):
    category_id: str
    source: ResultSource
    rule_id: Optional[str] = None
    confidence: Optional[float] = None # rule results only
    match_type: Optional[str] = None


class BatchItem(BaseModel):
    transaction_id: str
    category_id: str
    source: ResultSource
    confidence: Optional[float] = None
    rule_id: Optional[str] = None


class BatchStats(BaseModel):
    by_cache: int = 0
    by_rules: int = 0
    suggested: int = 0
    skipped: int = 0


class BatchOutcome(BaseModel):
    applied: list[BatchItem] = Field(default_factory=list)
    suggested: list[BatchItem] = Field(default_factory=list)
    skipped: list[Transaction] = Field(default_factory=list)
    stats: BatchStats = Field(default_factory=BatchStats)

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class DataKind(str, Enum):
    """
    The closed set of resource categories.

    The value doubles as the on-disk subdirectory name.
    """

    CORPUS = "corpora"
    KEYBOARD = "metrics"
    LAYOUT = "layouts"

    @property
    def subdir(self) -> str:
        return self.value

    @property
    def format(self) -> str:
        """Wire format of the files in this category."""
        if self is DataKind.LAYOUT:
            return "json"
        return "messagepack"

    def __str__(self) -> str:
        return self.name.capitalize()


# Fixed processing order for scanning and bootstrap.
ALL_KINDS = (DataKind.CORPUS, DataKind.KEYBOARD, DataKind.LAYOUT)


class Corpus(BaseModel):
    """N-gram frequency tables for a text corpus."""
    name: str
    chars: Dict[str, int] = Field(default_factory=dict)
    bigrams: Dict[str, int] = Field(default_factory=dict)
    skipgrams: Dict[str, int] = Field(default_factory=dict)
    trigrams: Dict[str, int] = Field(default_factory=dict)

    @property
    def char_total(self) -> int:
        return sum(self.chars.values())

    @property
    def bigram_total(self) -> int:
        return sum(self.bigrams.values())

    @property
    def trigram_total(self) -> int:
        return sum(self.trigrams.values())


class KeyPosition(BaseModel):
    x: float
    y: float
    finger: int = Field(ge=0, le=9, description="Finger index, 0 = left pinky, 9 = right pinky")


class Metric(BaseModel):
    name: str
    short: str
    enabled: bool = True


class MetricAmount(BaseModel):
    metric: int = Field(description="Index into MetricData.metrics")
    amount: float


class NstrokeData(BaseModel):
    """Metric amounts applying to one sequence of key positions."""
    nstroke: List[int]
    amounts: List[MetricAmount] = Field(default_factory=list)


class MetricData(BaseModel):
    """Keyboard geometry plus the metric table computed for it."""
    keyboard: str
    keys: List[KeyPosition] = Field(default_factory=list)
    metrics: List[Metric] = Field(default_factory=list)
    strokes: List[NstrokeData] = Field(default_factory=list)


class LayoutData(BaseModel):
    """A key layout definition, stored as JSON text."""
    name: str
    authors: List[str] = Field(default_factory=list)
    source: Optional[str] = None
    description: Optional[str] = None
    keyboard: Optional[str] = None
    matrix: List[List[str]] = Field(default_factory=list, description="Rows of characters, top to bottom")


class RemoteFile(BaseModel):
    """One entry of a remote directory listing."""
    name: str
    # Subdirectories in a listing carry no download URL.
    download_url: Optional[str] = None


class SkippedEntry(BaseModel):
    """Diagnostic record for an entry skipped during a best-effort pass."""
    path_or_name: str
    reason: str

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from keymeow_data.domain.models import ALL_KINDS, DataKind


PACKAGE_NAME = "keymeow-data"
VERSION = "0.1.0"

GITHUB_CONTENTS_URL = "https://api.github.com/repos/semilin/{repo}/contents/"


def _default_sources() -> Dict[DataKind, str]:
    return {
        DataKind.CORPUS: GITHUB_CONTENTS_URL.format(repo="km_corpora"),
        DataKind.KEYBOARD: GITHUB_CONTENTS_URL.format(repo="km_metric_data"),
        DataKind.LAYOUT: GITHUB_CONTENTS_URL.format(repo="km_layouts"),
    }


class StoreConfig(BaseModel):
    """
    Construction-time options for a ResourceStore.

    The category flags and `download` replace compile-time feature
    selection: a disabled capability is simply never invoked.
    """

    data_dir: Optional[Path] = Field(
        default=None,
        description="Data root. None means the OS per-user data directory + 'keymeow'.",
    )
    corpora: bool = Field(default=True, description="Scan the corpora category.")
    keyboards: bool = Field(default=True, description="Scan the keyboard metrics category.")
    layouts: bool = Field(default=True, description="Scan the layouts category.")
    download: bool = Field(
        default=False,
        description="Populate the data directory from the remote sources when it does not exist yet.",
    )
    timeout: float = Field(default=8.0, gt=0, description="Per-request HTTP timeout in seconds.")
    user_agent: str = Field(default=f"{PACKAGE_NAME}/{VERSION}")
    sources: Dict[DataKind, str] = Field(
        default_factory=_default_sources,
        description="Remote listing URL for each category.",
    )
    legacy_layout_lookup: bool = Field(
        default=False,
        description=(
            "Resolve layouts through the keyboard metrics catalog, as older "
            "releases did. Only for callers relying on that behaviour."
        ),
    )

    @field_validator("sources", mode="after")
    @classmethod
    def _fill_missing_sources(cls, value: Dict[DataKind, str]) -> Dict[DataKind, str]:
        # Partial overrides keep the default URL for the other categories.
        return {**_default_sources(), **value}

    def is_enabled(self, kind: DataKind) -> bool:
        if kind is DataKind.CORPUS:
            return self.corpora
        if kind is DataKind.KEYBOARD:
            return self.keyboards
        return self.layouts

    def enabled_kinds(self) -> List[DataKind]:
        return [kind for kind in ALL_KINDS if self.is_enabled(kind)]

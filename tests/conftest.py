import os
import sys

import pytest

# Add project root to sys.path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from keymeow_data.core.config import StoreConfig
from keymeow_data.domain.models import (
    Corpus,
    KeyPosition,
    LayoutData,
    Metric,
    MetricAmount,
    MetricData,
    NstrokeData,
)
from keymeow_data.storage.codecs import serialize


@pytest.fixture
def data_dir(tmp_path):
    # Deliberately not created: the store (or bootstrap) must create it.
    return tmp_path / "keymeow"


@pytest.fixture
def config(data_dir):
    return StoreConfig(data_dir=data_dir)


@pytest.fixture
def sample_corpus():
    return Corpus(
        name="english",
        chars={"e": 120, "t": 90, "a": 80},
        bigrams={"th": 40, "he": 35},
        skipgrams={"te": 12},
        trigrams={"the": 30},
    )


@pytest.fixture
def sample_metrics():
    return MetricData(
        keyboard="ansi",
        keys=[KeyPosition(x=0.0, y=0.0, finger=0), KeyPosition(x=1.0, y=0.0, finger=1)],
        metrics=[Metric(name="Same Finger Bigram", short="SFB")],
        strokes=[NstrokeData(nstroke=[0, 1], amounts=[MetricAmount(metric=0, amount=1.5)])],
    )


@pytest.fixture
def sample_layout():
    return LayoutData(
        name="qwerty",
        authors=["Christopher Latham Sholes"],
        keyboard="ansi",
        matrix=[list("qwertyuiop"), list("asdfghjkl;"), list("zxcvbnm,./")],
    )


@pytest.fixture
def write_resource(data_dir):
    """Write a resource file into its category folder and return the path."""

    def _write(kind, file_name, value=None, raw=None):
        folder = data_dir / kind.subdir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / file_name
        path.write_bytes(raw if raw is not None else serialize(kind, value))
        return path

    return _write

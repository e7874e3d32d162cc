"""
Wire formats for resource files.

Corpora and keyboard metrics are MessagePack maps; layouts are JSON text.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Type, Union

import msgpack
from pydantic import BaseModel, ValidationError

from keymeow_data.domain.errors import DeserializationError
from keymeow_data.domain.models import Corpus, DataKind, LayoutData, MetricData

Resource = Union[Corpus, MetricData, LayoutData]

MODELS: Dict[DataKind, Type[BaseModel]] = {
    DataKind.CORPUS: Corpus,
    DataKind.KEYBOARD: MetricData,
    DataKind.LAYOUT: LayoutData,
}


def deserialize(kind: DataKind, data: bytes, path: Optional[Path] = None) -> Resource:
    """
    Decode the raw bytes of a resource file.

    Raises:
        DeserializationError: the bytes are not a valid document of this kind.
    """
    model = MODELS[kind]
    if kind.format == "json":
        try:
            return model.model_validate_json(data)
        except ValidationError as e:
            raise DeserializationError(kind.format, path, e) from e

    try:
        raw = msgpack.unpackb(data, raw=False)
    except (msgpack.UnpackException, ValueError, TypeError) as e:
        # Truncated input, trailing bytes, invalid UTF-8 and unhashable
        # map keys all surface here.
        raise DeserializationError(kind.format, path, e) from e
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise DeserializationError(kind.format, path, e) from e


def serialize(kind: DataKind, value: Resource) -> bytes:
    """Encode a resource in the on-disk format for its kind."""
    if kind.format == "json":
        return value.model_dump_json(indent=2).encode("utf-8")
    return msgpack.packb(value.model_dump(mode="json"), use_bin_type=True)

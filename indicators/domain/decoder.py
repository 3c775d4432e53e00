"""Decode indicator documents from YAML.

The decoder turns raw bytes into a validated-shape ``Document``. Structural
problems (malformed YAML, wrong value types, thresholds without a single
resolvable operator) surface as one ``DecodeError``; no partial document is
ever returned. Semantic rules such as required fields and cross references
are left to ``indicators.domain.validator``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pydantic
import yaml

from .errors import DecodeError
from .models import Document

logger = logging.getLogger(__name__)

# Implicit tags kept when loading: everything else (bool, int, float,
# timestamp) stays as the scalar's text and is converted by the models.
_KEPT_IMPLICIT_TAGS = ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")


class TextScalarLoader(yaml.SafeLoader):
    """Safe YAML loader that keeps plain scalars as strings.

    ``source_id: 0123`` stays ``"0123"`` and ``title: yes`` stays ``"yes"``
    instead of going through YAML 1.1 int/bool/date resolution. Empty values
    and ``~`` still load as ``None``.
    """


TextScalarLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _describe(exc: pydantic.ValidationError) -> str:
    """Summarize a Pydantic validation error as ``location: message`` lines."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def read_indicator_document(data: bytes) -> Document:
    """Decode an indicator document.

    Parameters
    ----------
    data: bytes
        Raw YAML document. Missing top-level sections default to empty
        collections; unknown fields are ignored.

    Returns
    -------
    Document
        The decoded document with every threshold resolved to an
        ``(operator, value)`` pair.

    Raises
    ------
    DecodeError
        If the input is not well-formed YAML, is not a mapping at the top
        level, or does not fit the document shape.
    """
    try:
        raw = yaml.load(data, Loader=TextScalarLoader)
    except yaml.YAMLError as exc:
        raise DecodeError(f"could not parse indicator document: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DecodeError(
            "could not parse indicator document: expected a mapping at the top "
            f"level, got {type(raw).__name__}"
        )

    try:
        document = Document.model_validate(raw)
    except pydantic.ValidationError as exc:
        raise DecodeError(
            f"could not decode indicator document: {_describe(exc)}"
        ) from exc

    logger.debug(
        "indicator_document.decoded",
        extra={
            "metrics": len(document.metrics),
            "indicators": len(document.indicators),
            "sections": len(document.documentation.sections),
        },
    )
    return document


def read_indicator_file(path: Union[str, Path]) -> Document:
    """Read and decode an indicator document from ``path``.

    ``OSError`` from reading the file propagates unchanged.
    """
    return read_indicator_document(Path(path).read_bytes())

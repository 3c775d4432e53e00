"""Indicator document model, decoder and validator."""

from .decoder import read_indicator_document, read_indicator_file
from .errors import DecodeError, IndicatorDocumentError, ValidationError
from .models import (
    Document,
    Documentation,
    Indicator,
    IndicatorRef,
    Metric,
    MetricRef,
    Operator,
    Section,
    Threshold,
)
from .validator import validate

__all__ = [
    "DecodeError",
    "Document",
    "Documentation",
    "Indicator",
    "IndicatorDocumentError",
    "IndicatorRef",
    "Metric",
    "MetricRef",
    "Operator",
    "Section",
    "Threshold",
    "ValidationError",
    "read_indicator_document",
    "read_indicator_file",
    "validate",
]

"""Indicator document data model.

These Pydantic models describe the contents of an indicator document: the raw
metrics a product emits, the indicators derived from them (with alerting
thresholds), and the documentation sections that narrate both. The decoder
produces them from YAML and the validator consumes them; neither component
knows about the other beyond this shared shape.

All models are frozen value types. Field names follow the document's
snake_case keys; collections whose YAML key differs from the attribute name
carry an alias (``metrics`` -> ``metric_refs``, ``indicators`` ->
``indicator_refs``); build them in code through the same keys, e.g.
``Indicator(metrics=[...])``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Operator(str, Enum):
    """Threshold comparison operator.

    The member value is the document key that selects it. Declaration order is
    the order in which threshold keys are scanned during decoding.
    """

    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL_TO = "lte"
    EQUAL_TO = "eq"
    NOT_EQUAL_TO = "neq"
    GREATER_THAN_OR_EQUAL_TO = "gte"
    GREATER_THAN = "gt"


OPERATOR_KEYS = tuple(op.value for op in Operator)


class _DocumentModel(BaseModel):
    """Shared configuration for every document entity."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # `key:` with no value means "absent", so the field keeps its default
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class MetricRef(_DocumentModel):
    """Reference to a metric by identity.

    Attributes
    ----------
    name: str
        Metric name.
    source_id: str
        Identifier of the component that emits the metric.
    """

    name: str = ""
    source_id: str = ""


class Metric(_DocumentModel):
    """Raw metric emitted by a product.

    Attributes
    ----------
    name: str
        Metric name; together with ``source_id`` forms the metric identity.
    source_id: str
        Identifier of the emitting component.
    origin: str
        Where the metric originates (e.g., a job or process name).
    title: str
        Human-readable title.
    description: str
        Human-readable description.
    """

    name: str = ""
    source_id: str = ""
    origin: str = ""
    title: str = ""
    description: str = ""

    def ref(self) -> MetricRef:
        """Return the identity of this metric as a ``MetricRef``."""
        return MetricRef(name=self.name, source_id=self.source_id)


def _parse_threshold_value(key: str, raw: Any) -> float:
    if isinstance(raw, bool):
        raise ValueError(f"threshold {key} value {raw!r} is not a number")
    if isinstance(raw, (int, float)):
        return float(raw)
    if isinstance(raw, str):
        try:
            return float(raw.strip())
        except ValueError:
            raise ValueError(
                f"threshold {key} value {raw!r} is not a number"
            ) from None
    raise ValueError(f"threshold {key} value {raw!r} is not a number")


class Threshold(_DocumentModel):
    """Alerting rule attached to an indicator.

    In a document a threshold is written with exactly one of the keys
    ``lt``, ``lte``, ``eq``, ``neq``, ``gte`` or ``gt``; decoding resolves that
    key into ``operator`` and its number into ``value``.

    Attributes
    ----------
    level: str
        Severity level (e.g., "warning", "critical").
    operator: Operator
        Comparison operator selected by the document key.
    value: float
        Threshold value.
    dynamic: bool
        Whether the threshold may be adjusted by the source. Defaults to False.
    """

    level: str = ""
    operator: Operator
    value: float
    dynamic: bool = False

    @model_validator(mode="before")
    @classmethod
    def resolve_operator(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        present = [key for key in OPERATOR_KEYS if data.get(key) is not None]
        if not present:
            # Already canonical, e.g. built in code rather than decoded
            if isinstance(data.get("operator"), Operator):
                return data
            raise ValueError(
                "threshold must specify one of " + ", ".join(OPERATOR_KEYS)
            )
        if len(present) > 1:
            raise ValueError(
                "threshold specifies more than one operator: " + ", ".join(present)
            )

        key = present[0]
        resolved = {k: v for k, v in data.items() if k not in OPERATOR_KEYS}
        resolved["operator"] = Operator(key)
        resolved["value"] = _parse_threshold_value(key, data[key])
        return resolved


class Indicator(_DocumentModel):
    """Derived metric with thresholds and operator-facing documentation.

    Attributes
    ----------
    name: str
        Unique indicator name.
    title: str
        Human-readable title.
    description: str
        What the indicator shows.
    promql: str
        Query expression computing the indicator. Never evaluated here.
    response: str
        Recommended operator response when a threshold is crossed.
    measurement: str
        Description of what is measured.
    thresholds: List[Threshold]
        Alerting rules, in document order.
    metric_refs: List[MetricRef]
        Metrics the indicator is derived from (document key ``metrics``).
    """

    name: str = ""
    title: str = ""
    description: str = ""
    promql: str = ""
    response: str = ""
    measurement: str = ""
    thresholds: List[Threshold] = Field(default_factory=list)
    metric_refs: List[MetricRef] = Field(default_factory=list, alias="metrics")


class IndicatorRef(_DocumentModel):
    """Reference to an indicator by name."""

    name: str = ""


class Section(_DocumentModel):
    """Documentation grouping of related indicators and metrics."""

    title: str = ""
    description: str = ""
    indicator_refs: List[IndicatorRef] = Field(
        default_factory=list, alias="indicators"
    )
    metric_refs: List[MetricRef] = Field(default_factory=list, alias="metrics")


class Documentation(_DocumentModel):
    """Human-facing documentation header and sections."""

    title: str = ""
    owner: str = ""
    description: str = ""
    sections: List[Section] = Field(default_factory=list)


class Document(_DocumentModel):
    """Root aggregate: the unit of decoding and of validation.

    Attributes
    ----------
    metrics: List[Metric]
        Raw metrics, in document order.
    indicators: List[Indicator]
        Indicators, in document order.
    documentation: Documentation
        Documentation header and sections.
    """

    metrics: List[Metric] = Field(default_factory=list)
    indicators: List[Indicator] = Field(default_factory=list)
    documentation: Documentation = Field(default_factory=Documentation)

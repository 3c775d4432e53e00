"""Semantic validation of decoded indicator documents.

``validate`` runs every check to completion and returns one
``ValidationError`` per violation, so a document author sees all problems at
once. Checks fall into two independent groups:

- field completeness: required string fields must not be blank, and every
  indicator must reference at least one metric;
- referential integrity: documentation sections may only reference
  indicators and metrics defined in the same document.

Indicator-level metric references are only checked for presence, not
resolved against the document's metrics.
"""

from __future__ import annotations

import logging
from typing import List, Set, Tuple

from .errors import ValidationError
from .models import Document, Documentation, MetricRef

logger = logging.getLogger(__name__)

METRIC_REQUIRED_FIELDS = ("title", "description", "name", "source_id", "origin")
INDICATOR_REQUIRED_FIELDS = (
    "name",
    "title",
    "description",
    "promql",
    "response",
    "measurement",
)
DOCUMENTATION_REQUIRED_FIELDS = ("title", "description")


def _is_blank(value: str) -> bool:
    return not value.strip()


def _check_required(
    obj: object,
    fields: Tuple[str, ...],
    scope: str,
    errors: List[ValidationError],
) -> None:
    for field in fields:
        if _is_blank(getattr(obj, field)):
            errors.append(ValidationError(f"{scope} {field} is required"))


def _header_in_use(documentation: Documentation) -> bool:
    return any(
        not _is_blank(v)
        for v in (documentation.title, documentation.owner, documentation.description)
    )


def validate(document: Document) -> List[ValidationError]:
    """Validate a decoded document.

    Parameters
    ----------
    document: Document
        Document produced by the decoder (or built in code).

    Returns
    -------
    List[ValidationError]
        Every detected violation. An empty list means the document is valid.
        Callers should not depend on the order of the errors.
    """
    errors: List[ValidationError] = []

    for i, metric in enumerate(document.metrics):
        _check_required(metric, METRIC_REQUIRED_FIELDS, f"metrics[{i}]", errors)

    for i, indicator in enumerate(document.indicators):
        _check_required(
            indicator, INDICATOR_REQUIRED_FIELDS, f"indicators[{i}]", errors
        )
        if not indicator.metric_refs:
            errors.append(
                ValidationError(f"indicators[{i}] must reference at least 1 metric")
            )

    documentation = document.documentation
    # Only a partially written header is reported; an absent one is fine
    if _header_in_use(documentation):
        _check_required(
            documentation, DOCUMENTATION_REQUIRED_FIELDS, "documentation", errors
        )

    indicator_names: Set[str] = {ind.name for ind in document.indicators}
    metric_ids: Set[MetricRef] = {metric.ref() for metric in document.metrics}

    for j, section in enumerate(documentation.sections):
        scope = f"documentation.sections[{j}]"
        for indicator_ref in section.indicator_refs:
            if indicator_ref.name not in indicator_names:
                errors.append(
                    ValidationError(
                        f"{scope} references non-existent indicator "
                        f"({indicator_ref.name})"
                    )
                )
        for metric_ref in section.metric_refs:
            if metric_ref not in metric_ids:
                errors.append(
                    ValidationError(
                        f"{scope} references non-existent metric "
                        f"({metric_ref.name}, {metric_ref.source_id})"
                    )
                )

    logger.debug("indicator_document.validated", extra={"errors": len(errors)})
    return errors

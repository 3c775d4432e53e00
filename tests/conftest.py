"""Pytest configuration for test suite.

Ensures the project root is on ``sys.path`` so ``import indicators`` resolves
to the local sources regardless of the working directory pytest chooses, and
provides a complete, valid indicator document shared by several tests.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_syspath() -> None:
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)


_ensure_project_root_on_syspath()


VALID_DOCUMENT_YAML = b"""---
metrics:
- name: latency
  source_id: demo
  origin: demo
  title: Demo Latency
  description: A test metric for testing

indicators:
- name: test_performance_indicator
  title: Test Performance Indicator
  metrics:
  - name: latency
    source_id: demo
  measurement: Measurement Text
  promql: prom
  thresholds:
  - level: warning
    gte: 50
    dynamic: true
  description: This is a valid markdown description.
  response: Panic!

documentation:
  title: Monitoring Test Product
  owner: Test Owner Team
  description: Test description
  sections:
  - title: Test Section
    description: This section includes indicators and metrics
    indicators:
    - name: test_performance_indicator
    metrics:
    - name: latency
      source_id: demo
"""


@pytest.fixture
def valid_document_yaml() -> bytes:
    """Raw YAML for a document that decodes and validates cleanly."""
    return VALID_DOCUMENT_YAML


@pytest.fixture(autouse=True)
def reset_package_log_level():
    """Undo logger levels set by ``setup_logging`` so tests do not leak state."""
    yield
    logging.getLogger("indicators").setLevel(logging.NOTSET)

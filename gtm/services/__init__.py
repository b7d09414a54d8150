"""
Services — Work done against a project directory

- Git: repository root and working tree status
- Metric: pending time computation from recorded events
"""

from .git import GitIntegration
from .metric import MetricProcessor

__all__ = ["GitIntegration", "MetricProcessor"]

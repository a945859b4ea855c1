"""Reusable API dependencies shared across v1 routes."""

from blogwise.api.v1.dependencies.rate_limit import rate_limited
from blogwise.api.v1.dependencies.services import JobTracker, Pipeline, Ranker, Store

__all__ = ["JobTracker", "Pipeline", "Ranker", "Store", "rate_limited"]

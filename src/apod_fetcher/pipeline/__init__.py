"""Fetch pipeline for the Astronomy Picture of the Day."""

from .orchestrator import Orchestrator, Stage

__all__ = ["Orchestrator", "Stage"]

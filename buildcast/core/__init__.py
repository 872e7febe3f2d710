"""Core orchestration"""

from .processor import StudyProcessor

__all__ = ["StudyProcessor"]

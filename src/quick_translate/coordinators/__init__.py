"""Coordinators - Orchestration layer connecting UI with translation logic."""

from .presentation_sync import PresentationSync
from .translation_session_controller import TranslationSessionController

__all__ = [
    "PresentationSync",
    "TranslationSessionController",
]

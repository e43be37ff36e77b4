"""Core components for the fret-theory audio stack."""

# Import interfaces for easier access
from .interfaces import (
    IAudioInput,
    IPitchDetector,
    ITunerSession,
)

__all__ = ["IAudioInput", "IPitchDetector", "ITunerSession"]

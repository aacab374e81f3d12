"""ReviewGate: moderated review intake and display ordering service."""

__version__ = "1.0.0"

"""gitglance: compact status of many git working copies."""

__version__ = "0.1.0"

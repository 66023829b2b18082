"""Client-side ABN search orchestration."""

__version__ = "0.1.0"

"""Job Tracker AI: job application tracker with URL auto-fill."""

__version__ = "0.1.0"

"""Post a summary of today's absences from Bob to a Slack webhook."""

__version__ = "1.0.0"

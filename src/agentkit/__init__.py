"""agentkit - structured prompt workflows for AI coding assistants."""

__version__ = "0.1.0"

"""Course Forge: staged LLM course generation with on-demand diagrams."""

__version__ = "0.1.0"

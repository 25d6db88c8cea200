"""Boundary adapters: LLM provider, diagram service and result stores."""

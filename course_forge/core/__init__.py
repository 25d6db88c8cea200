"""Core domain: exceptions, generation pipeline and diagram nodes."""

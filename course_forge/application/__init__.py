"""Application layer: services coordinating API, core and boundaries."""

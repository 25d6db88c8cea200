"""Request/response models and persisted entities."""

"""Repository implementations (adapters)."""

"""Application layer: use cases orchestrating identity + domain + repositories."""

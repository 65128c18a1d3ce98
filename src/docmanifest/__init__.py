"""docmanifest: build a validated, indexed manifest from a tree of content documents."""

__version__ = "0.1.0"

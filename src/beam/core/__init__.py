"""Core: error hierarchy shared by events, emitter and config."""

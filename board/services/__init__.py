"""Services - settings, registry and session lifecycle."""

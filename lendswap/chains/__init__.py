"""Chain bindings."""

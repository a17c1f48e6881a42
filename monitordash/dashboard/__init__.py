"""Dashboard middleware modules."""

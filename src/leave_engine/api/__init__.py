"""HTTP API for the leave engine."""

"""HTTP API for the NinjaScript checker."""

"""Train-hop Station: revision readiness checks for Firefox New Tab train-hops."""

__version__ = "0.1.0"

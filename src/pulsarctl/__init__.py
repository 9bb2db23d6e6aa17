"""pulsarctl — namespace policy administration for Pulsar clusters."""

__version__ = "0.4.0"

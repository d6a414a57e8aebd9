"""Non-custodial DEX swap transaction builder backed by the Velora aggregator."""

__version__ = "0.1.0"

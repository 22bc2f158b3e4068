"""fx-bands: exchange-rate distribution, trend and band analysis."""

__version__ = "0.1.0"

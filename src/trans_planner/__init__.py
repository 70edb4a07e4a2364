"""Trans: station search and journey planning against transport.rest."""

__version__ = "0.1.0"

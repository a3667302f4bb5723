"""MD2Resume - publish rendered résumés to IPFS through the PinMe CLI."""

__version__ = "0.1.0"

"""Message types, JSON encoding, responses and validation rules for fungible-token contracts and proxy/group interfaces."""

__version__ = "0.1.0"
"""Response envelope, error formatting and hypermedia helpers for REST APIs."""

__version__ = "0.1.0"

"""cpgview - read-only explorer API for a precomputed code property graph."""

__version__ = "0.1.0"

"""
peercert: certificate introspection, payload digests and signature
verification for a proxy's transport-security layer.
"""

__version__ = "0.1.0"

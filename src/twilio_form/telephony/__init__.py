"""
Telephony package.

Keep package import side-effects to a minimum to avoid circular imports.
Do not import the client here.
"""

__all__ = [
    "models",
    "urls",
    "client",
]

"""
Form-urlencoded request building.

Keep package import side-effects to a minimum; import from submodules.
"""

__all__ = [
    "encoder",
    "adapters",
    "request",
    "views",
]

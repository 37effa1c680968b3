# API Routes Module
from scholarmatch.api.routes import matching

__all__ = [
    "matching",
]

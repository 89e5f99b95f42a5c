# API module
from .bridge import API

__all__ = ['API']

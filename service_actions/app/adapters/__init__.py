"""
Adapters package for the Actions Gateway.

Contains HTTP client wrappers for the third-party APIs behind each tool.
These adapters encapsulate:

- Base URLs and request shapes
- Decoding of the documented response fields
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .base_client import UpstreamClient
from .chuck_norris_client import ChuckNorrisClient
from .dad_joke_client import DadJokeClient
from .lingva_client import LingvaClient
from .mymemory_client import MyMemoryClient

__all__ = [
    "UpstreamClient",
    "ChuckNorrisClient",
    "DadJokeClient",
    "LingvaClient",
    "MyMemoryClient",
]

from __future__ import annotations

from .decoder import JSONDecodable
from .encoder import JSONEncodable


class JSONCodable(JSONEncodable, JSONDecodable):
    """Both capabilities.  ``from_json`` is still written by hand per type."""

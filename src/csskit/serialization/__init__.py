from csskit.serialization.errors import ParseError
from csskit.serialization.json_codec import from_json, to_json

__all__ = ["ParseError", "from_json", "to_json"]

"""
Serializers for the two response formats.

Each module exposes the same render_* functions over the same structured values.
"""
from enum import Enum


class ResponseFormat(str, Enum):
    MARKDOWN = "markdown"
    JSON = "json"

"""
Content-type matching policy.

One rule decides both directions of the adapter:
- request: base64 multipart/form-data bodies stay raw bytes, everything else becomes text
- response: textual bodies are passed verbatim, everything else is base64 encoded
"""

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_TEXT_PREFIXES: Tuple[str, ...] = ("text/",)
DEFAULT_TEXT_MARKERS: Tuple[str, ...] = ("application/json", "application/xml")
DEFAULT_FORM_DATA_PREFIX = "multipart/form-data"


@dataclass(frozen=True)
class BodyEncodingPolicy:
    """
    Content types are matched lower-cased, parameters included.

    text:      starts with one of text_prefixes, or contains one of text_markers
    form data: starts with form_data_prefix
    A missing or empty content type is neither (binary).
    """

    text_prefixes: Tuple[str, ...] = DEFAULT_TEXT_PREFIXES
    text_markers: Tuple[str, ...] = DEFAULT_TEXT_MARKERS
    form_data_prefix: str = DEFAULT_FORM_DATA_PREFIX

    def is_text(self, content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        value = content_type.strip().lower()
        return value.startswith(tuple(p.lower() for p in self.text_prefixes)) or any(
            marker.lower() in value for marker in self.text_markers
        )

    def is_binary(self, content_type: Optional[str]) -> bool:
        return not self.is_text(content_type)

    def is_form_data(self, content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        return content_type.strip().lower().startswith(self.form_data_prefix.lower())


DEFAULT_POLICY = BodyEncodingPolicy()

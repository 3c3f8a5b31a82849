"""
Shared JSON Codec
=================
One process-wide JSON configuration, compatible with the standard
library defaults. Import ``JSON`` and use it directly; it is immutable
and safe to share between threads.
"""

import json
from dataclasses import dataclass, field
from typing import IO, Any, Union


@dataclass(frozen=True)
class JSONCodec:
    """Pre-built encoder/decoder pair."""
    encoder: json.JSONEncoder = field(default_factory=json.JSONEncoder)
    decoder: json.JSONDecoder = field(default_factory=json.JSONDecoder)

    def dumps(self, obj: Any) -> str:
        return self.encoder.encode(obj)

    def loads(self, text: Union[str, bytes, bytearray]) -> Any:
        if isinstance(text, (bytes, bytearray)):
            text = text.decode(json.detect_encoding(text))
        return self.decoder.decode(text)

    def dump(self, obj: Any, fp: IO[str]) -> None:
        for chunk in self.encoder.iterencode(obj):
            fp.write(chunk)

    def load(self, fp: IO[str]) -> Any:
        return self.loads(fp.read())


JSON = JSONCodec()

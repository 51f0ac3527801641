"""Response Class: pretty-printed JSON with an explicit charset.

Invariants:
    - Content-Type is always "application/json; charset=utf-8"
    - Body is indented by 4 spaces; key order is the order the content was built in
    - Non-finite floats raise at render time (handled as an internal error)
"""

import json
from typing import Any

from fastapi.responses import JSONResponse


class PrettyJSONResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content, ensure_ascii=False, allow_nan=False, indent=4,
        ).encode("utf-8")

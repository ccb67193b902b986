"""JSON-LD serialization for inline <script type="application/ld+json"> blocks.

Invariants:
    - Output is valid JSON that parses back to the input
    - Output never contains "<", ">" or "&" literally, so it cannot close
      the surrounding script element
"""

import json

_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def serialize_json_ld(schema: dict) -> str:
    text = json.dumps(schema, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return text

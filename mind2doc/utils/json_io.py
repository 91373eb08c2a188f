"""
JSON text <-> plain Python data without recursion.

``json.dumps``/``json.loads`` recurse once per nested container and give up
near the interpreter's recursion limit. A mind map nests two containers per
level (node object + children array), so both helpers here keep their own
stack. ``dumps`` output is byte-identical to
``json.dumps(obj, indent=indent, ensure_ascii=False)``; scalars are still
encoded and decoded by the stdlib ``json`` module.
"""
from __future__ import annotations

import json
import re
from json.decoder import scanstring
from typing import Any, List, Tuple

_TEXT, _VALUE = 0, 1

_WS_RE = re.compile(r"[ \t\n\r]*")
_NUMBER_RE = re.compile(r"(-?(?:0|[1-9]\d*))(\.\d+)?([eE][-+]?\d+)?")
_LITERALS = (("true", True), ("false", False), ("null", None))


def dumps(obj: Any, indent: int = 2) -> str:
    out: List[str] = []
    work: List[Tuple[int, Any, int]] = [(_VALUE, obj, 0)]
    while work:
        kind, value, level = work.pop()
        if kind == _TEXT:
            out.append(value)
            continue

        if isinstance(value, dict) and value:
            items = list(value.items())
            out.append("{")
            work.append((_TEXT, "\n" + " " * (indent * level) + "}", level))
            pad = "\n" + " " * (indent * (level + 1))
            for i in reversed(range(len(items))):
                key, item = items[i]
                work.append((_VALUE, item, level + 1))
                prefix = ("," if i else "") + pad + json.dumps(str(key), ensure_ascii=False) + ": "
                work.append((_TEXT, prefix, level))
        elif isinstance(value, (list, tuple)) and value:
            out.append("[")
            work.append((_TEXT, "\n" + " " * (indent * level) + "]", level))
            pad = "\n" + " " * (indent * (level + 1))
            for i in reversed(range(len(value))):
                work.append((_VALUE, value[i], level + 1))
                work.append((_TEXT, ("," if i else "") + pad, level))
        elif isinstance(value, dict):
            out.append("{}")
        elif isinstance(value, (list, tuple)):
            out.append("[]")
        else:
            out.append(json.dumps(value, ensure_ascii=False))
    return "".join(out)


def _skip(text: str, pos: int) -> int:
    return _WS_RE.match(text, pos).end()


def _scalar(text: str, pos: int) -> Tuple[Any, int]:
    if text.startswith('"', pos):
        return scanstring(text, pos + 1)
    for word, value in _LITERALS:
        if text.startswith(word, pos):
            return value, pos + len(word)
    m = _NUMBER_RE.match(text, pos)
    if m is None:
        raise json.JSONDecodeError("Expecting value", text, pos)
    integer, frac, exp = m.groups()
    if frac or exp:
        return float(integer + (frac or "") + (exp or "")), m.end()
    return int(integer), m.end()


def _key(text: str, pos: int) -> Tuple[str, int]:
    if not text.startswith('"', pos):
        raise json.JSONDecodeError("Expecting property name enclosed in double quotes", text, pos)
    key, pos = scanstring(text, pos + 1)
    pos = _skip(text, pos)
    if not text.startswith(":", pos):
        raise json.JSONDecodeError("Expecting ':' delimiter", text, pos)
    return key, _skip(text, pos + 1)


def loads(text: str) -> Any:
    """Parse a JSON document; errors are ``json.JSONDecodeError`` like ``json.loads``."""
    containers: List[Any] = []   # open objects/arrays, innermost last
    keys: List[Any] = []         # pending key per open object (None for arrays)
    pos = _skip(text, 0)
    while True:
        if text.startswith("{", pos):
            pos = _skip(text, pos + 1)
            if text.startswith("}", pos):
                value, pos = {}, pos + 1
            else:
                key, pos = _key(text, pos)
                containers.append({})
                keys.append(key)
                continue
        elif text.startswith("[", pos):
            pos = _skip(text, pos + 1)
            if text.startswith("]", pos):
                value, pos = [], pos + 1
            else:
                containers.append([])
                keys.append(None)
                continue
        else:
            value, pos = _scalar(text, pos)

        # attach the finished value, closing every container it completes
        while True:
            pos = _skip(text, pos)
            if not containers:
                if pos != len(text):
                    raise json.JSONDecodeError("Extra data", text, pos)
                return value
            container = containers[-1]
            if isinstance(container, dict):
                container[keys[-1]] = value
            else:
                container.append(value)

            if text.startswith(",", pos):
                pos = _skip(text, pos + 1)
                if isinstance(container, dict):
                    keys[-1], pos = _key(text, pos)
                break
            closer = "}" if isinstance(container, dict) else "]"
            if not text.startswith(closer, pos):
                raise json.JSONDecodeError(f"Expecting ',' delimiter or '{closer}'", text, pos)
            pos += 1
            value = containers.pop()
            keys.pop()

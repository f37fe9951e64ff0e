# moe_app/gemini_text.py
"""
Fail-soft text extraction from Gemini response-like values.

Responses come from several SDK versions and from raw REST payloads, so no
shape is trusted. Every step accepts either attribute access (SDK objects)
or key access (dicts), and every extractor resolves to "" instead of raising.
"""

from collections.abc import AsyncIterable, Iterable, Mapping, Sequence
from typing import Any, AsyncIterator, Iterator

_MISSING = object()


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    return getattr(obj, key, _MISSING)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _parts_text(response: Any) -> str:
    candidates = _field(response, "candidates")
    if not _is_sequence(candidates) or not candidates:
        return ""

    content = _field(candidates[0], "content")
    if content is _MISSING or content is None:
        return ""

    parts = _field(content, "parts")
    if not _is_sequence(parts):
        return ""

    chunks = []
    for part in parts:
        text = _field(part, "text")
        chunks.append(text if isinstance(text, str) else "")
    return "".join(chunks)


def extract_parts_text(response: Any) -> str:
    """
    Concatenate the text of ``candidates[0].content.parts``.

    Parts whose ``text`` is missing or not a string contribute nothing.
    Returns "" when any step of the path is absent or has the wrong type.

    Example:
        >>> extract_parts_text(
        ...     {"candidates": [{"content": {"parts": [{"text": "a"}, {"text": "b"}]}}]}
        ... )
        'ab'
    """
    try:
        return _parts_text(response)
    except Exception:
        # Raising property getters and broken __getitem__ land here
        return ""


def extract_direct_text(response: Any) -> str:
    """
    Read the top-level ``text`` field of a response.

    Older SDKs expose ``text`` as a property, newer ones as a method, so a
    zero-argument callable is invoked. Anything that is not a string, or a
    callable returning one, resolves to "".
    """
    try:
        text = _field(response, "text")
        if callable(text):
            text = text()
        return text if isinstance(text, str) else ""
    except Exception:
        return ""


def iter_stream_text(chunks: Iterable[Any]) -> Iterator[str]:
    """Yield the non-empty text of each streamed response chunk, in order."""
    for chunk in chunks:
        text = extract_direct_text(chunk)
        if text:
            yield text


async def aiter_stream_text(chunks: AsyncIterable[Any]) -> AsyncIterator[str]:
    """Async counterpart of iter_stream_text()."""
    async for chunk in chunks:
        text = extract_direct_text(chunk)
        if text:
            yield text


__all__ = [
    "extract_parts_text",
    "extract_direct_text",
    "iter_stream_text",
    "aiter_stream_text",
]

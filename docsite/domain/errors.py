from __future__ import annotations

from typing import Optional

_FRAGMENT_PREVIEW = 80


class TranslationError(RuntimeError):
    """Raised when a demo cannot be translated into a CodePen payload.

    ``step`` names the sub-step that failed (``validate``, ``aggregate``,
    ``rewrite`` or ``augment``) and ``fragment`` holds the input it was
    working on, so demo authoring mistakes can be traced back to the source.
    """

    def __init__(
        self,
        step: str,
        reason: str,
        *,
        fragment: object = None,
        demo_id: Optional[str] = None,
    ) -> None:
        self.step = step
        self.reason = reason
        self.fragment = fragment
        self.demo_id = demo_id
        demo_part = f" for demo '{demo_id}'" if demo_id else ""
        message = f"Codepen translation failed at step '{step}'{demo_part}: {reason}"
        if fragment is not None:
            message += f" (input: {_preview(fragment)!r})"
        super().__init__(message)


def _preview(fragment: object) -> str:
    text = fragment if isinstance(fragment, str) else repr(fragment)
    if len(text) > _FRAGMENT_PREVIEW:
        return text[: _FRAGMENT_PREVIEW - 3] + "..."
    return text


__all__ = ["TranslationError"]

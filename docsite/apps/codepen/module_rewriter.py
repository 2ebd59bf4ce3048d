"""Rewrite a demo's module declaration so it runs inside the CodePen sandbox.

Demo scripts declare their own module, e.g.::

    angular.module('inputBasicDemo', ['ngMaterial', 'ngMessages']);

On CodePen the page is bootstrapped with the sandbox module instead, so the
declaration is turned into ``angular.module('MyApp')``. Only the call itself is
replaced: whatever precedes it (including an ``angular`` identifier left on its
own line) and whatever follows it (the ``;`` or a chained ``.controller(...)``)
is left untouched.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Demo sources sometimes arrive HTML-escaped from the docs build.
_QUOTE = r"(?:'|\"|&apos;|&quot;|&#39;|&#34;)"

_MODULE_DECLARATION = re.compile(
    r"\.module\(\s*"
    rf"(?P<quote>{_QUOTE})(?P<name>[^'\"&()\n]*)(?P=quote)"
    r"\s*,\s*\[(?P<deps>[^\]]*)\]\s*"
    r"\)"
)


def find_module_declaration(script: str) -> re.Match[str] | None:
    """Return the first module registration call in ``script``, if any."""
    return _MODULE_DECLARATION.search(script)


def rewrite_module(script: str, *, module_name: str) -> str:
    """Replace the first module registration with a sandbox module lookup.

    Scripts without a registration call are considered CodePen-ready and are
    returned unchanged.
    """
    match = find_module_declaration(script)
    if match is None:
        logger.debug("No module declaration found, script left as is")
        return script

    logger.debug(
        "Rewriting module declaration %r -> %r",
        match.group("name"),
        module_name,
    )
    return f"{script[:match.start()]}.module('{module_name}'){script[match.end():]}"


__all__ = ["find_module_declaration", "rewrite_module"]

"""Prepare a demo's index markup for the CodePen HTML panel.

CodePen decodes entities once when a pen is created, so text content is
escaped one extra level: ``&gt;`` in a ``<code>`` sample is sent as
``&amp;gt;`` and ends up displayed as ``&gt;`` instead of being turned into
markup. Attribute values and ``<script>``/``<style>`` bodies keep their normal
serialization.
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from docsite.domain.models import Template

logger = logging.getLogger(__name__)

BOOTSTRAP_ATTRIBUTE = "ng-app"
TEMPLATE_SCRIPT_TYPE = "text/ng-template"


def _escape_text(text: str) -> str:
    # Same characters a browser escapes when serializing a text node.
    return EntitySubstitution.substitute_xml(text).replace("\xa0", "&nbsp;")


def _escape_text_for_codepen(text: str) -> str:
    return _escape_text(text).replace("&", "&amp;")


class CodepenFormatter(HTMLFormatter):
    """Double-escape text nodes, leave attribute values singly escaped."""

    def __init__(self) -> None:
        super().__init__(
            entity_substitution=_escape_text_for_codepen,
            void_element_close_prefix=None,
        )

    def attribute_value(self, value: str) -> str:
        return _escape_text(value)

    def attributes(self, tag: Tag):
        # Source order, not bs4's alphabetical default.
        if not tag.attrs:
            return []
        return list(tag.attrs.items())


def _root_elements(soup: BeautifulSoup) -> List[Tag]:
    return [node for node in soup.contents if isinstance(node, Tag)]


def _add_class(element: Tag, class_name: str) -> None:
    classes = [name for name in element.get_attribute_list("class") if name]
    if class_name not in classes:
        classes.append(class_name)
    element["class"] = classes


def augment_html(
    index_html: str,
    demo_id: str,
    templates: Iterable[Template],
    *,
    module_name: str,
) -> str:
    """Bootstrap ``index_html`` with ``module_name`` and embed ``templates``.

    Args:
        index_html: Demo markup with a single root element
        demo_id: Demo identifier, added to the root element's classes
        templates: Inline templates, appended to the root as ng-template scripts
        module_name: Sandbox module set as the root's ``ng-app``

    Returns:
        Serialized markup ready for the CodePen HTML panel

    Raises:
        ValueError: If ``index_html`` has no root element
    """
    soup = BeautifulSoup(index_html, "html.parser")
    roots = _root_elements(soup)
    if not roots:
        raise ValueError("index markup has no root element")
    if len(roots) > 1:
        logger.warning(
            "Demo %s index has %d root elements, only the first one is bootstrapped",
            demo_id,
            len(roots),
        )

    root = roots[0]
    root[BOOTSTRAP_ATTRIBUTE] = module_name
    _add_class(root, demo_id)

    for template in templates:
        script = soup.new_tag("script", attrs={"type": TEMPLATE_SCRIPT_TYPE, "id": template.name})
        script.string = template.contents
        root.append(script)

    return soup.decode(formatter=CodepenFormatter())


__all__ = [
    "BOOTSTRAP_ATTRIBUTE",
    "TEMPLATE_SCRIPT_TYPE",
    "CodepenFormatter",
    "augment_html",
]

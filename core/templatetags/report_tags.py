"""Template helpers that turn engine descriptors into HTML."""

from __future__ import annotations

from django import template
from django.template.loader import render_to_string
from django.utils.html import json_script
from django.utils.safestring import SafeString

from reporting.chart import chartjs_config
from reporting.descriptors import ChartDescriptor, Descriptor

register = template.Library()


@register.simple_tag
def render_node(node: Descriptor) -> SafeString:
    """Render any descriptor with its `core/nodes/<kind>.html` template."""

    return render_to_string(f"core/nodes/{node.kind}.html", {"node": node})


@register.filter
def chartjs_payload(node: ChartDescriptor) -> SafeString:
    """Embed a chart's Chart.js configuration as a JSON script element."""

    return json_script(chartjs_config(node))

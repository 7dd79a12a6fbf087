"""
Template tag that shows the source of the current page.

    {% load source_code %}
    {% show_source_code "users/user_list.html" %}
    {% show_source_code "users:user_list.html" controller="demo.users.views.user_list" %}

The view is taken from the request's resolver match unless a dotted path is
passed with controller=...; pages Django renders itself (404, 500) have no
view and only show the template. Template names may use ":" in place of
"/".
"""

from __future__ import annotations

from django import template
from django.conf import settings
from django.utils.module_loading import import_string

from demo.code_explorer.source import build_source_context

register = template.Library()

SOURCE_CODE_TEMPLATE = "code_explorer/source_code.html"


def render_source_code(engine, template_name, controller=None):
    """Render the source snippet for template_name and controller with engine."""
    page_template = engine.get_template(template_name.replace(":", "/"))
    source_context = build_source_context(
        page_template,
        template_name,
        settings.CODE_EXPLORER_TEMPLATES_DIR,
        controller=controller,
    )
    return engine.render_to_string(SOURCE_CODE_TEMPLATE, source_context)


@register.simple_tag(takes_context=True)
def show_source_code(context, template_name, controller=""):
    # Callables in the template context are called before reaching a tag,
    # so an explicit controller is given by dotted path.
    if controller:
        controller = import_string(controller)
    else:
        controller = None
        request = context.get("request")
        resolver_match = getattr(request, "resolver_match", None)
        if resolver_match is not None:
            controller = resolver_match.func

    return render_source_code(context.template.engine, template_name, controller)

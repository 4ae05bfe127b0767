from django.http import HttpResponse
from django.shortcuts import render as django_render
from render_block import render_block_to_string

from mobile_format.resolver import template_names_for


def render(
    request, template_name, context=None, content_type=None, status=None, using=None
):
    return django_render(
        request,
        template_names_for(request, template_name),
        context=context,
        content_type=content_type,
        status=status,
        using=using,
    )


def render_block(request, template_name, block_name, context=None, content_type=None):
    """Render one ``{% block %}`` of the format-appropriate template.

    Handy for ajax fragments once ``skip_xhr_requests`` is turned off.
    """
    html_block = render_block_to_string(
        template_names_for(request, template_name),
        block_name,
        context,
        request=request,
    )
    return HttpResponse(html_block, content_type=content_type)

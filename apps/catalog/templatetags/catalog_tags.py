from django import template

from apps.catalog.services import format_price
from apps.catalog.services.showcase import star_bar

register = template.Library()


@register.filter
def display_price(value):
    return format_price(value)


@register.filter
def stars(value):
    return star_bar(value)

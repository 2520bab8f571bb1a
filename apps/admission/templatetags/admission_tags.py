from django import template
from django.utils.translation import gettext as _

register = template.Library()

BLANK = '-'


@register.filter
def display_value(value):
    """Show a stored value, or a dash when it was left blank."""
    if value is None:
        return BLANK
    if isinstance(value, str) and not value.strip():
        return BLANK
    return value


@register.filter
def yes_no(value):
    return _("Yes") if value else _("No")

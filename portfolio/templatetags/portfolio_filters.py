"""
Custom template filters for the portfolio app.
"""
from django import template

register = template.Library()


@register.filter(name='clamp_percent')
def clamp_percent(value):
    """
    Clamp a skill level into 0-100 for use as a bar width.
    Example: 120 -> 100, "abc" -> 0
    """
    try:
        value = int(value)
    except (ValueError, TypeError):
        return 0
    return min(max(value, 0), 100)


@register.filter(name='comma_join')
def comma_join(value):
    """Render a list back into the comma-separated text it was parsed from."""
    if not value:
        return ''
    return ', '.join(str(item) for item in value)

"""Jinja template filters."""

from datetime import datetime
from decimal import Decimal


def format_decimal(value, decimals=2):
    """Format a price for display."""
    if isinstance(value, Decimal):
        value = float(value)
    try:
        return f"{value:.{decimals}f}"
    except (TypeError, ValueError):
        return f"{0:.{decimals}f}"


def format_date(value, format='%b %d, %Y %H:%M'):
    """Format an ISO date string or datetime object."""
    if not value:
        return ''
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value
    return value.strftime(format)


def register_filters(app):
    app.add_template_filter(format_decimal, 'format_decimal')
    app.add_template_filter(format_date, 'format_date')

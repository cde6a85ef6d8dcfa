"""
Page rendering helper: wraps a template in the area's nav chrome
"""
from flask import current_app, render_template

from .sessions import current_session


def render_page(template, area, **context):
    portal_session = current_session()
    return render_template(
        template,
        area=area,
        nav_items=current_app.config['NAV_ITEMS'].get(area, []),
        session_user=portal_session.to_dict() if portal_session else None,
        **context
    )

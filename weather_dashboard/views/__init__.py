"""View rendering module for HTML templates.

Views prepare context from a dashboard snapshot and render Jinja2 templates;
routers stay free of presentation logic.
"""

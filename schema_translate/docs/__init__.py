"""
Provider documentation.

Modules:
- model: documentation data structures derived from the Property Model
- render: Markdown/HTML rendering with Jinja2 templates
"""

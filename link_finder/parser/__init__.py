# link_finder/parser/__init__.py
"""robots.txt and sitemap discovery."""

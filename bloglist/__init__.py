"""Bloglist API: user registry, token authentication and blog posts."""

"""Crawl a website and save full-page screenshots of every visited page."""

__version__ = "0.1.0"

"""seokit — single-page SEO crawler: fetch a page and extract its SEO signals."""

__version__ = "0.1.0"

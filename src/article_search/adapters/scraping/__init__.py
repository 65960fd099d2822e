"""Scraping adapter – page summaries over HTTP."""
from article_search.adapters.scraping.scraper import HttpUrlScraper, parse_page

__all__ = ["HttpUrlScraper", "parse_page"]

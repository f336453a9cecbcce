"""
Display-board scraping pipeline: fetch, strategy selection, parsing.
"""

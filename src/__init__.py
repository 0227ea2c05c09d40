"""
Wikilinker: link the first mention of each known entity on a page to Wikipedia.
"""

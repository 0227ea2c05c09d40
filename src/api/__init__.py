"""
HTTP surface for Wikilinker
"""

"""Routing — url templates with wildcard parameters and memoized matching.

Templates are registered into two ordered buckets (exact, wildcard) and
tried in that order; successful matches are cached per normalized url.
"""

"""
matching.
========

Does: Nearest-match search over a palette and the matcher factory on top of it.
"""

from .matcher import Matcher, build_matcher, matcher_from_file
from .nearest import euclidean_distance, find_nearest, rank_matches

__all__ = [
    "Matcher",
    "build_matcher",
    "matcher_from_file",
    "euclidean_distance",
    "find_nearest",
    "rank_matches",
]

__docformat__ = "google"

"""A tile-based puzzle game: collect every item, then reach the exit.

Map loading and validation live in ``solong.maps``, game state in
``solong.game`` and the pygame window and ``solong`` command in
``solong.display``; the remaining modules hold text, line-reading and
buffer helpers.
"""

__version__ = "0.1.0"
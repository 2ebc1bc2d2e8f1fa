"""
ghrepo - cria repositórios GitHub de forma interativa usando o GitHub CLI (gh).
"""

import logging

__version__ = "0.3.0"

logging.getLogger("ghrepo").addHandler(logging.NullHandler())

"""
Catalog - Access to the public creature catalog (PokeAPI).

The catalog is an external collaborator:
- The sampler decides which identifier to ask for
- The fetcher performs the HTTP retrievals and normalizes the result

Nothing here is cached. Each session start asks the catalog again.
"""

from .sampler import random_subject_id
from .fetcher import FetchError, SubjectFetcher, parse_subject

__all__ = [
    "random_subject_id",
    "FetchError",
    "SubjectFetcher",
    "parse_subject",
]

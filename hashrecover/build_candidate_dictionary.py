"""Logic for seeding the candidate dictionary before resolution starts."""

import logging
from collections.abc import Iterable
from pathlib import Path

from hashrecover.candidate_dictionary import CandidateDictionary
from hashrecover.load_word_list import load_word_list

logger = logging.getLogger(__name__)


def build_candidate_dictionary(
    word_lists: Iterable[str | Path],
    base_fields: Iterable[str],
    known_names: Iterable[str] = (),
) -> CandidateDictionary:
    """Seed candidates from word lists, base fields and known names, in order."""
    dictionary = CandidateDictionary()
    for path in word_lists:
        added = dictionary.add_all(load_word_list(path))
        logger.info("Loaded %d new names from %s", added, path)

    dictionary.add_all(base_fields)

    added = dictionary.add_all(known_names)
    logger.info("Added %d known names; %d candidates total", added, len(dictionary))
    return dictionary

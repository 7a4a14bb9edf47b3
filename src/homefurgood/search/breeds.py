"""Fuzzy breed matching and the curated breed list served to the UI.

Registry breed strings are inconsistent free text ("Shepherd / Husky Mix",
"Labrador Retriever (short coat)"), so breed filtering is done locally by
comparing normalized keyword tokens instead of exact names.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import TypeVar

from homefurgood.data.schemas import Animal

logger = logging.getLogger(__name__)

BREED_STOPWORDS = frozenset({"mix", "mixed", "dog"})
MIN_TOKEN_LENGTH = 3

_PUNCTUATION_RE = re.compile(r"[/,&()\-]")

AnimalT = TypeVar("AnimalT", bound=Animal)

# Curated names for breed pickers. These do not need to match registry
# spellings exactly; matching is token based.
DOG_BREEDS: list[str] = sorted(
    [
        "All American Mix",
        "Affenpinscher",
        "Afghan Hound",
        "Airedale Terrier",
        "Akita",
        "Alaskan Malamute",
        "American Bulldog",
        "American Eskimo Dog",
        "American Pit Bull Terrier",
        "American Staffordshire Terrier",
        "Anatolian Shepherd",
        "Australian Cattle Dog / Blue Heeler",
        "Australian Shepherd",
        "Basset Hound",
        "Beagle",
        "Belgian Malinois",
        "Bernese Mountain Dog",
        "Bichon Frise",
        "Black Labrador Retriever",
        "Bloodhound",
        "Border Collie",
        "Border Terrier",
        "Boston Terrier",
        "Boxer",
        "Brittany Spaniel",
        "Bull Terrier",
        "Bulldog",
        "Bullmastiff",
        "Cane Corso",
        "Cattle Dog Mix",
        "Cavalier King Charles Spaniel",
        "Chesapeake Bay Retriever",
        "Chihuahua",
        "Chinese Crested",
        "Chow Chow",
        "Cocker Spaniel",
        "Collie",
        "Coonhound",
        "Corgi",
        "Dachshund",
        "Dalmatian",
        "Doberman Pinscher",
        "English Bulldog",
        "English Cocker Spaniel",
        "English Setter",
        "English Springer Spaniel",
        "French Bulldog",
        "German Shepherd Dog",
        "German Shorthaired Pointer",
        "Giant Schnauzer",
        "Golden Retriever",
        "Great Dane",
        "Great Pyrenees",
        "Greyhound",
        "Havanese",
        "Hound Mix",
        "Husky",
        "Irish Setter",
        "Irish Wolfhound",
        "Jack Russell Terrier",
        "Labrador Retriever",
        "Leonberger",
        "Lhasa Apso",
        "Maltese",
        "Mastiff",
        "Miniature Pinscher",
        "Newfoundland",
        "Papillon",
        "Pekingese",
        "Pit Bull Terrier",
        "Pointer",
        "Pomeranian",
        "Poodle",
        "Portuguese Water Dog",
        "Pug",
        "Rat Terrier",
        "Rhodesian Ridgeback",
        "Rottweiler",
        "Saint Bernard",
        "Samoyed",
        "Schipperke",
        "Schnauzer",
        "Scottish Terrier",
        "Shar Pei",
        "Sheltie, Shetland Sheepdog",
        "Shiba Inu",
        "Shih Tzu",
        "Siberian Husky",
        "Spaniel Mix",
        "Staffordshire Bull Terrier",
        "Terrier Mix",
        "Vizsla",
        "Weimaraner",
        "Welsh Corgi",
        "West Highland White Terrier",
        "Wheaten Terrier",
        "Whippet",
        "Yorkshire Terrier",
    ],
    key=str.casefold,
)


def normalize_breed(text: str | None) -> str:
    """Normalize breed text for fuzzy comparison.

    Lowercases, turns ``/ , & ( ) -`` into spaces, drops the words "mix",
    "mixed" and "dog", and collapses whitespace.

    Args:
        text: Raw breed text; ``None`` is treated as empty.

    Returns:
        Space-separated normalized words, possibly empty.
    """
    lowered = _PUNCTUATION_RE.sub(" ", str(text or "").lower())
    words = [w for w in lowered.split() if w not in BREED_STOPWORDS]
    return " ".join(words)


def breed_tokens(selector: str) -> list[str]:
    """Return the token set of a breed selector.

    Tokens shorter than three characters are discarded so that short words
    do not produce over-broad matches.
    """
    return [t for t in normalize_breed(selector).split() if len(t) >= MIN_TOKEN_LENGTH]


def matches_breed(candidate: str | None, selected: Sequence[str]) -> bool:
    """Check a registry breed string against selected breeds.

    Assumes at least one selector; an empty selection ("no breed filter") is
    handled by callers such as :func:`filter_by_breed`.

    Args:
        candidate: Raw breed string of the animal.
        selected: Breed selectors, combined with OR.

    Returns:
        True if the normalized candidate is non-empty and any token of any
        selector occurs in it as a substring.
    """
    normalized = normalize_breed(candidate)
    if not normalized:
        return False
    return any(
        token in normalized
        for selector in selected
        for token in breed_tokens(selector)
    )


def filter_by_breed(animals: Sequence[AnimalT], selected: Sequence[str]) -> list[AnimalT]:
    """Keep only animals matching at least one selected breed.

    An empty selection accepts every animal.
    """
    if not selected:
        return list(animals)

    kept = [a for a in animals if matches_breed(a.breed_string, selected)]
    logger.debug(
        "Breed filter %s kept %d of %d animals", list(selected), len(kept), len(animals)
    )
    return kept

"""Synthetic content used to seed the data store.

All data is fictional and used for development only.
"""

import random

# Pioneers of computing; names must stay pairwise distinct.
NAME_POOL: tuple[str, ...] = (
    "Grace",
    "Ada",
    "Stanley",
    "Howard",
    "Frances",
    "John",
    "Henrietta",
    "Gertrude",
    "Charles",
    "Jean",
    "Kathleen",
    "Marlyn",
    "Ruth",
    "Irma",
    "Evelyn",
    "Margaret",
    "Ida",
    "Mary",
    "Dana",
    "Tim",
    "Corrado",
    "George",
    "Fred",
    "Nikolay",
    "Vannevar",
    "David",
    "Vint",
    "Karen",
)

DEFAULT_ABOUT = "Write about you..."

FILLER_TEXT = (
    "dolorem ipsum, quia dolor sit amet consectetur adipiscing velit, "
    "sed quia non numquam do eius modi tempora incididunt, ut labore et dolore magnam "
    "aliquam quaerat voluptatem. Ut enim ad minima veniam, quis nostrum exercitationem ullam "
    "corporis suscipit laboriosam, nisi ut aliquid ex ea commodi consequatur? Quis autem vel eum "
    "iure reprehenderit, qui in ea voluptate velit esse, quam nihil molestiae consequatur, vel illum, "
    "qui dolorem eum fugiat, quo voluptas nulla pariatur"
)

MIN_WINDOW = 10
MAX_WINDOW = 100


def conversation_title(sequence: int) -> str:
    """Title for the ``sequence``-th seeded conversation (1-based)."""
    return f"Conversation_{sequence}"


def random_message_content(rng: random.Random, corpus: str = FILLER_TEXT) -> str:
    """Cut a random window of ``[MIN_WINDOW, MAX_WINDOW)`` characters out of ``corpus``.

    The window is clamped to the corpus and stripped of surrounding
    whitespace. Never returns an empty string for a non-blank corpus.
    """
    if not corpus.strip():
        msg = "Filler corpus cannot be blank"
        raise ValueError(msg)

    start = rng.randrange(max(len(corpus) - MAX_WINDOW, 1))
    end = min(start + rng.randrange(MIN_WINDOW, MAX_WINDOW), len(corpus))
    content = corpus[start:end].strip()

    if not content:
        # Only reachable for corpora with long whitespace runs
        content = corpus.strip()[: MAX_WINDOW - 1]
    return content

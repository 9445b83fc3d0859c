"""Lexical normalization of recognized utterances."""

import logging

logger = logging.getLogger(__name__)

NUMBER_WORDS = {
    "zero": "0",
    "one": "1",
    "two": "2",
    "three": "3",
    "four": "4",
    "five": "5",
    "six": "6",
    "seven": "7",
    "eight": "8",
    "nine": "9",
    "ten": "10",
}


def words_to_numbers(text: str) -> str:
    """Replace spoken number words (zero..ten) with digits.

    Replacement is token by token; tokens that are not number words are
    kept exactly as spoken, including their casing.

    Args:
        text: Text to convert

    Returns:
        Text with number words replaced, tokens joined by single spaces
    """
    return " ".join(NUMBER_WORDS.get(token.lower(), token) for token in text.split())


def normalize(raw: str) -> str:
    """Normalize an utterance for command comparison.

    Args:
        raw: Finalized utterance as recognized

    Returns:
        Trimmed, lowercased text with number words replaced by digits
    """
    normalized = words_to_numbers(raw.strip().lower())
    logger.debug(f"Normalized '{raw}' -> '{normalized}'")
    return normalized

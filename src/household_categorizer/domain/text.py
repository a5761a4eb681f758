import unicodedata
from typing import Any

import regex

# Bank statement boilerplate: payment rails, document markers, filler words.
NOISE_TOKENS = frozenset({
    "pix", "enviado", "recebido", "debito", "credito", "aut", "pagamento",
    "compra", "doc", "ted", "transferencia", "referencia", "pf", "pj",
    "pag", "valor", "ref", "id", "nr", "num", "nº",
})

FINGERPRINT_MAX_TOKENS = 4
FINGERPRINT_FALLBACK_LENGTH = 50

_MARKS = regex.compile(r"\p{M}")
_NON_WORD = regex.compile(r"[^\p{L}\p{N}\s]")
_SPACES = regex.compile(r"\s+")


def fold_text(raw: Any) -> str:
    """Lower-case, strip accents, turn punctuation into spaces and collapse whitespace."""
    if not raw or not isinstance(raw, str):
        return ""
    text = unicodedata.normalize("NFD", raw.lower())
    text = _MARKS.sub("", text)
    text = _NON_WORD.sub(" ", text)
    return _SPACES.sub(" ", text).strip()


def normalize_text(raw: Any) -> str:
    """
    Canonical form used for matching: ``fold_text`` without banking noise tokens.

    Never raises; anything that is not a non-empty string normalizes to "".
    """
    words = [word for word in fold_text(raw).split(" ") if word and word not in NOISE_TOKENS]
    return " ".join(words)


def merchant_fingerprint(description: Any) -> str:
    """
    Stable per-merchant key for the correction cache.

    Long digit runs (accounts, ids) are dropped anywhere and purely numeric
    tokens are dropped from the end (amounts, dates), so repeated purchases
    from one merchant collapse to the same key.
    """
    norm = normalize_text(description)
    tokens = [token for token in norm.split() if not (token.isdecimal() and len(token) >= 5)]
    while tokens and tokens[-1].isdecimal():
        tokens.pop()
    significant = [token for token in tokens if len(token) >= 2][:FINGERPRINT_MAX_TOKENS]
    return " ".join(significant) or norm[:FINGERPRINT_FALLBACK_LENGTH]

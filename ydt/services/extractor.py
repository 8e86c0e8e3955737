"""Extract phonetics and translations from Youdao result HTML."""

import logging

from bs4 import BeautifulSoup

from ydt.models import ExtractionResult
from ydt.utils import contains_cjk_ideograph, flatten_text

from . import selectors

logger = logging.getLogger(__name__)


def extract_translation(word: str, html: str) -> ExtractionResult:
    """Parse a result page into phonetic and translation entries.

    Words containing a CJK ideograph are read from the Chinese-English
    list items; all other words are read from the translation containers.
    Markup that does not match simply produces fewer entries.

    Args:
        word: The word that was looked up
        html: Raw HTML of the result page

    Returns:
        ExtractionResult with entries in document order

    Raises:
        ParseCssSelectorError: If a built-in selector fails to compile
    """
    document = BeautifulSoup(html, "html.parser")

    if contains_cjk_ideograph(word):
        result = _extract_chinese_entry(document)
    else:
        result = _extract_latin_entry(document)

    logger.debug(
        "Extracted %d phonetic(s) and %d translation(s) for %r",
        len(result.phonetics),
        len(result.translations),
        word,
    )
    return result


def parse_translation_from_html(word: str, html: str) -> str:
    """Parse a result page into display text (no network I/O).

    Example:
        >>> html = '<li class="word-exp-ce mcols-layout"><a class="point">study</a></li>'
        >>> parse_translation_from_html("学习", html)
        'study'
    """
    return extract_translation(word, html).render()


def _extract_chinese_entry(document: BeautifulSoup) -> ExtractionResult:
    """Collect the first anchor text of each Chinese-English list item."""
    word_exp_ce = selectors.WORD_EXP_CE.get()
    point = selectors.POINT.get()

    result = ExtractionResult()
    for exp in word_exp_ce.select(document):
        anchor = point.select_one(exp)
        if anchor is not None:
            result.translations.append(flatten_text(anchor))
    return result


def _extract_latin_entry(document: BeautifulSoup) -> ExtractionResult:
    """Read phonetics from container 0 and translations from container 1."""
    trans_container = selectors.TRANS_CONTAINER.get()
    per_phone = selectors.PER_PHONE.get()
    span = selectors.SPAN.get()
    phonetic = selectors.PHONETIC.get()
    word_exp = selectors.WORD_EXP.get()
    pos = selectors.POS.get()
    trans = selectors.TRANS.get()

    result = ExtractionResult()
    containers = trans_container.select(document)

    if len(containers) > 0:
        for phone in per_phone.select(containers[0]):
            label_el = span.select_one(phone)
            phonetic_el = phonetic.select_one(phone)
            if label_el is None or phonetic_el is None:
                continue
            label_text = flatten_text(label_el, strip=True)
            phonetic_text = flatten_text(phonetic_el, strip=True)
            result.phonetics.append(f"{label_text} {phonetic_text}")

    if len(containers) > 1:
        for exp in word_exp.select(containers[1]):
            pos_el = pos.select_one(exp)
            trans_el = trans.select_one(exp)
            if pos_el is None or trans_el is None:
                continue
            pos_text = flatten_text(pos_el, strip=True)
            trans_text = flatten_text(trans_el, strip=True)
            result.translations.append(f"{pos_text}: {trans_text}")

    return result

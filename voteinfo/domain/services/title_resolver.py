"""Issue title resolution."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from voteinfo.domain.value_objects.issue_title import IssueTitle, Language


DEFAULT_LANGUAGE_ORDER: tuple[Language, ...] = (
    Language.DE,
    Language.FR,
    Language.IT,
    Language.RM,
    Language.EN,
)

# str.isspace() accepts the ASCII information separators; they are not blank
_INFORMATION_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(text: str) -> bool:
    """Return True if ``text`` is empty or consists of whitespace only."""
    return all(
        char.isspace() and char not in _INFORMATION_SEPARATORS for char in text
    )


def get_title(titles: Iterable[IssueTitle], language: Language) -> str | None:
    """Return the first non-blank title in the requested language.

    Blank translations (see ``is_blank``) are treated like missing ones.
    """
    for title in titles:
        if title.language is language and not is_blank(title.text):
            return title.text
    return None


def get_title_with_fallback(
    titles: Sequence[IssueTitle],
    languages: Sequence[Language] = DEFAULT_LANGUAGE_ORDER,
) -> str | None:
    """Return the title in the first language of ``languages`` that has one."""
    for language in languages:
        text = get_title(titles, language)
        if text is not None:
            return text
    return None

"""Locale resolution and localized message lookup."""

from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any

from surveypoc.core.config import Settings
from surveypoc.core.messages import BUNDLES


def _normalize(tag: str) -> str:
    return tag.strip().replace("_", "-").lower()


def _primary_language(tag: str) -> str:
    return _normalize(tag).split("-", 1)[0]


def _quality(params: list[str]) -> float | None:
    for param in params:
        name, _, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        try:
            return float(value.strip())
        except ValueError:
            return None
    return 1.0


def parse_accept_language(header: str | None) -> list[str]:
    """Return language tags from an Accept-Language header, best first.

    Entries with a quality of zero, wildcards and malformed quality values are
    dropped. Entries with equal quality keep their header order.
    """
    if not header:
        return []

    ranked: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, *params = part.split(";")
        tag = _normalize(tag)
        if not tag or tag == "*":
            continue

        quality = _quality(params)
        if quality is None or quality <= 0:
            continue
        ranked.append((-quality, position, tag))

    ranked.sort()
    return [tag for _, _, tag in ranked]


def resolve_locale(accept_language: str | None, supported: Sequence[str], default: str) -> str:
    """Pick the supported locale that best matches an Accept-Language header."""
    by_tag = {_normalize(locale): locale for locale in supported}
    for tag in parse_accept_language(accept_language):
        if tag in by_tag:
            return by_tag[tag]
        primary = _primary_language(tag)
        if primary in by_tag:
            return by_tag[primary]
    return default


class _FormatArguments(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class MessageSource:
    """Resolve message templates by code and locale from in-memory bundles."""

    def __init__(self, bundles: Mapping[str, Mapping[str, str]], *, default_locale: str) -> None:
        if default_locale not in bundles:
            raise ValueError(f"no message bundle for default locale {default_locale!r}")
        self._bundles = {_normalize(locale): messages for locale, messages in bundles.items()}
        self._default_locale = _normalize(default_locale)

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._bundles)

    def _bundle_chain(self, locale: str) -> list[Mapping[str, str]]:
        chain: list[Mapping[str, str]] = []
        for candidate in (_normalize(locale), _primary_language(locale), self._default_locale):
            bundle = self._bundles.get(candidate)
            if bundle is not None and not any(bundle is seen for seen in chain):
                chain.append(bundle)
        return chain

    def get_message(
        self,
        codes: Sequence[str],
        locale: str,
        *,
        arguments: Mapping[str, Any] | None = None,
        default: str | None = None,
    ) -> str:
        """Return the first message found for ``codes``, formatted with ``arguments``.

        Codes are tried in order against the locale, its primary language and
        then the default locale. ``default`` is returned untouched when no
        bundle knows any of the codes, and the last code when there is no
        default either.
        """
        chain = self._bundle_chain(locale)
        for code in codes:
            for bundle in chain:
                template = bundle.get(code)
                if template is not None:
                    return template.format_map(_FormatArguments(arguments or {}))

        if default is not None:
            return default
        return codes[-1] if codes else ""


def build_message_source(settings: Settings) -> MessageSource:
    """Create a message source serving the configured locales."""
    bundles = {locale: BUNDLES[locale] for locale in settings.supported_locales if locale in BUNDLES}
    return MessageSource(bundles, default_locale=settings.default_locale)

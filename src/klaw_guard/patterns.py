"""Pluggable regular expressions behind the email, url and hostname checks."""

from __future__ import annotations

import re

import msgspec

__all__ = [
    'DEFAULT_PATTERNS',
    'EMAIL_PATTERN',
    'HOSTNAME_PATTERN',
    'Patterns',
    'URL_PATTERN',
    'compile_pattern',
]

EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))\Z'
)

URL_PATTERN = re.compile(r'^(ftp|http|https)://[^ "]+\Z')

# RFC 1123: labels of 1-63 alphanumerics/hyphens, no leading or trailing hyphen,
# at most 255 characters overall, optional trailing dot.
HOSTNAME_PATTERN = re.compile(
    r'^(?=.{1,255}\Z)[0-9A-Za-z](?:(?:[0-9A-Za-z]|-){0,61}[0-9A-Za-z])?'
    r'(?:\.[0-9A-Za-z](?:(?:[0-9A-Za-z]|-){0,61}[0-9A-Za-z])?)*\.?\Z'
)


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Return ``pattern`` compiled, leaving compiled patterns untouched."""
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


class Patterns(msgspec.Struct, frozen=True, gc=False):
    """The set of regexes used by the named pattern checks.

    Install a custom set with ``klaw_guard.init(patterns=...)``.

    Examples:
        >>> strict = DEFAULT_PATTERNS.with_overrides(url='^https://')
        >>> bool(strict.url.search('http://example.com'))
        False
    """

    email: re.Pattern[str] = EMAIL_PATTERN
    url: re.Pattern[str] = URL_PATTERN
    hostname: re.Pattern[str] = HOSTNAME_PATTERN

    def with_overrides(
        self,
        *,
        email: str | re.Pattern[str] | None = None,
        url: str | re.Pattern[str] | None = None,
        hostname: str | re.Pattern[str] | None = None,
    ) -> Patterns:
        """Return a copy with the given patterns replaced.

        Args:
            email: Replacement email pattern, as a string or compiled regex.
            url: Replacement URL pattern.
            hostname: Replacement hostname pattern.

        Returns:
            A new Patterns; fields left as None keep their current regex.
        """
        return Patterns(
            email=self.email if email is None else compile_pattern(email),
            url=self.url if url is None else compile_pattern(url),
            hostname=self.hostname if hostname is None else compile_pattern(hostname),
        )


DEFAULT_PATTERNS = Patterns()

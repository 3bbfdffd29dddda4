"""Tests for the email, url and hostname checks and pluggable patterns."""

import re

import pytest

from klaw_guard import DEFAULT_PATTERNS, Patterns, ValidationError, guard, init
from klaw_guard.patterns import compile_pattern


class TestEmail:
    """email."""

    @pytest.mark.parametrize(
        'value',
        ['some.email+alias@domain.com', 'a@b.co', '"quoted name"@example.org', 'x@[127.0.0.1]'],
    )
    def test_accepts(self, value):
        guard(value).email()

    @pytest.mark.parametrize('value', ['', 'a@', 'a@b.', 'plain', 'a b@c.com', 'a@b.c', 'a@b.com\n'])
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            guard(value).email()

    def test_message_includes_value(self):
        with pytest.raises(ValidationError, match='^email must be a valid email. Value was: nope$'):
            guard('nope', 'email').email()


class TestUrl:
    """url."""

    @pytest.mark.parametrize(
        'value',
        ['http://example.com/path?q=1#frag', 'https://example.com', 'ftp://files.example.com/a.txt'],
    )
    def test_accepts(self, value):
        guard(value).url()

    @pytest.mark.parametrize('value', ['www.example.com', 'mailto:a@b.com', 'http://exa mple.com', 'https://'])
    def test_rejects(self, value):
        with pytest.raises(ValidationError, match='^homepage must be a valid URL.$'):
            guard(value, 'homepage').url()


class TestHostname:
    """hostname."""

    @pytest.mark.parametrize('value', ['localhost', 'example.com', 'a-b.example.com.', '1.2.3.4', 'x' * 63])
    def test_accepts(self, value):
        guard(value).hostname()

    @pytest.mark.parametrize('value', ['', '-start.com', 'end-.com', 'a..b', 'x' * 64, 'under_score.com'])
    def test_rejects(self, value):
        with pytest.raises(ValidationError, match=re.escape('host must be a valid hostname (domain name).')):
            guard(value, 'host').hostname()

    def test_rejects_overlong_names(self):
        name = '.'.join(['a' * 63] * 5)
        with pytest.raises(ValidationError):
            guard(name).hostname()


class TestPatternsConfig:
    """Patterns struct and installing custom patterns."""

    def test_defaults(self):
        assert Patterns() == DEFAULT_PATTERNS

    def test_with_overrides_compiles_strings(self):
        custom = DEFAULT_PATTERNS.with_overrides(url='^https://')
        assert custom.url.pattern == '^https://'
        assert custom.email is DEFAULT_PATTERNS.email
        assert custom.hostname is DEFAULT_PATTERNS.hostname

    def test_compile_pattern_passthrough(self):
        compiled = re.compile('x')
        assert compile_pattern(compiled) is compiled

    def test_custom_patterns_used_by_checks(self, clean_config):
        init(patterns=DEFAULT_PATTERNS.with_overrides(url='^https://'))
        guard('https://example.com').url()
        with pytest.raises(ValidationError):
            guard('http://example.com').url()

    def test_custom_email_pattern(self, clean_config):
        init(patterns=DEFAULT_PATTERNS.with_overrides(email=r'@corp\.example\Z'))
        guard('me@corp.example').email()
        with pytest.raises(ValidationError):
            guard('me@gmail.com').email()

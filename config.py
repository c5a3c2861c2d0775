# pylint: disable=C0114,C0115,C0116
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContactLink:
    label: str
    href: str
    icon: str


@dataclass(frozen=True)
class SiteConfig:
    author: str = 'Valentin Yuge'
    default_locale: str = 'es'
    locales: tuple[str, ...] = ('es', 'en')
    output_dir: str = 'docs'
    base_url: str = '/'
    contact_links: tuple[ContactLink, ...] = field(default_factory=lambda: (
        ContactLink('Email', 'mailto:valentinyuge@gmail.com', '📧'),
        ContactLink('LinkedIn', 'https://linkedin.com/in/valentinyuge', '🔗'),
        ContactLink('GitHub', 'https://github.com/valenyuge', '🐙'),
    ))

    def locale_prefix(self, locale: str) -> str:
        """Output subdirectory of a locale ('' for the default one)."""
        if locale.startswith(self.default_locale):
            return ''
        return f'{locale[:2]}/'

    def asset_url(self, src: str) -> str:
        if src.startswith('/'):
            return self.base_url.rstrip('/') + src
        return src

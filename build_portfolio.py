# pylint: disable=C0114,C0116,C0115,C0301
import argparse
import os
import posixpath
import sys
from dataclasses import dataclass, field
from typing import Iterable

from bs4 import BeautifulSoup
from minify_html import minify # pylint: disable=E0611

from catalog import CATALOG, CatalogError, Project, catalog_warnings, validate_catalog
from config import SiteConfig
from elements import a, attrs, div, esc, h1, h2, h3, iframe, img, p, span, tag, tagc, taglist, video
from translations import Translations, default_translations
from page_log import PageLog
from view_model import (ALL_CATEGORIES, CASE_STUDY, CATEGORY_FILTERS, EXTERNAL_LINK, HOSTED_VIDEO, IMAGE,
                        category_label, filter_by_category, format_duration, find_by_id, format_period, localized,
                        resolve_call_to_action, resolve_embed, resolve_media, sort_by_end_date_descending,
                        visible_technologies)


@dataclass
class Site:
    config: SiteConfig
    translations: Translations
    log: PageLog = field(default_factory=PageLog)
    pages: list[str] = field(default_factory=list)

    def t(self, key: str, locale: str) -> str:
        return self.translations.t(key, locale)


# -----
# PATHS
# -----
def path_prefix(path: str) -> str:
    parts = len(path.strip('/').split('/'))
    return '../' * (parts - 1)


def link(from_path: str, to_path: str) -> str:
    """Relative href from one generated page to another."""
    return f'{path_prefix(from_path)}{to_path}.html'


def category_slug(category: str) -> str:
    return category.lower()


def grid_path(site: Site, locale: str, category: str = ALL_CATEGORIES) -> str:
    prefix = site.config.locale_prefix(locale)
    if category == ALL_CATEGORIES:
        return f'{prefix}index'
    return f'{prefix}categoria/{category_slug(category)}'


def detail_path(site: Site, locale: str, project_id: str) -> str:
    return f'{site.config.locale_prefix(locale)}proyecto/{project_id}'


def not_found_path(site: Site, locale: str) -> str:
    return f'{site.config.locale_prefix(locale)}404'


def is_local_href(href: str) -> bool:
    return not (href.startswith(('/', '#', 'mailto:')) or '://' in href)


# ----------
# COMPONENTS
# ----------
def head(page_title: str):
    return f"""
        <head>
            <meta charset="UTF-8">
            <meta name="viewport" content="width=device-width, initial-scale=1.0">
            <title>{esc(page_title)}</title>
        </head>
    """


def language_selector(path: str, locale: str, alternates: dict[str, str]) -> str:
    buttons = []
    for lang, lang_path in alternates.items():
        classes = 'lang-button active' if lang == locale else 'lang-button'
        buttons.append(a(link(path, lang_path), lang.upper(), classes))
    return div('lang-selector unselectable', buttons)


def contact_section(site: Site, locale: str) -> str:
    return tag('footer', [
        h2(esc(site.t('contacto_tit', locale)), 'contact-title'),
        p(esc(site.t('contacto_desc', locale))),
        div('contact-links', [
            a(contact.href, [span('contact-icon', contact.icon), span('bold', esc(contact.label))], 'contact-link', external=True)
            for contact in site.config.contact_links
        ]),
    ])


def category_bar(site: Site, path: str, locale: str, active: str) -> str:
    buttons = []
    for category in CATEGORY_FILTERS:
        classes = 'filter-button active' if category == active else 'filter-button'
        buttons.append(a(link(path, grid_path(site, locale, category)), esc(category_label(category, site.translations, locale)), classes))
    return tag('nav', div('filter-bar', buttons))


def project_card(site: Site, path: str, project: Project, locale: str) -> str:
    shown, hidden = visible_technologies(project)
    return tagc('a', 'card btn', [
        div('card-header', [
            span('card-category', esc(category_label(project.category, site.translations, locale))),
            span('card-date', format_period(project.start_period, project.end_period)),
            span('card-dot', '•'),
            span('card-duration', format_duration(project.start_period, project.end_period, site.translations, locale)),
        ]),
        h2(esc(localized(project, 'title', locale))),
        p(esc(localized(project, 'summary', locale)), 'card-content'),
        taglist(shown, f'+ {hidden}' if hidden > 0 else ''),
        div('card-more', esc(site.t('detalle_mas', locale))),
    ], attrs(href=link(path, detail_path(site, locale, project.id))))


def call_to_action(site: Site, project: Project, locale: str) -> str:
    cta = resolve_call_to_action(project)
    if cta.kind == CASE_STUDY:
        return a(cta.url, esc(site.t('ver_bitacora', locale)), 'cta', external=True)
    if cta.kind == EXTERNAL_LINK:
        return a(cta.url, esc(site.t('ver_demo', locale)), 'cta', external=True)
    return div('cta-note italic', esc(site.t('sin_link', locale)))


def media_block(site: Site, project: Project, locale: str) -> str:
    media = resolve_media(project)
    title = localized(project, 'title', locale)
    if media.kind == HOSTED_VIDEO:
        content = div('aspect-video', iframe('media-frame', media.src, f"{site.t('video_de', locale)} {title}"))
    elif media.kind == IMAGE:
        content = img('media-image', site.config.asset_url(media.src), title)
    else:
        content = video('media-video', site.config.asset_url(media.src))
    return div('media', content)


def embed_section(site: Site, project: Project, locale: str) -> str:
    url = resolve_embed(project)
    if url is None:
        return ''
    title = site.t('memoria', locale)
    return div('embed-section', [
        h3(esc(title)),
        div('embed-frame', iframe('embed', url, title, allow='autoplay; fullscreen; vr', lazy=True)),
    ])


# ---------------
# PAGE GENERATION
# ---------------
def generate(site: Site, path: str, locale: str, title: str, content: str | list[str], alternates: dict[str, str]):
    if isinstance(content, list):
        content = ''.join(content)

    if content == '':
        site.log.note('Empty content')

    html = f"""
        <!DOCTYPE html>
        <html lang="{locale}">
        {head(title)}
        <body>
            {language_selector(path, locale, alternates)}
            <div class='page-content'>
                {content}
                {contact_section(site, locale)}
            </div>
        </body>
        </html>
    """

    html = minify(html)

    file_path = os.path.join(site.config.output_dir, f'{path}.html')
    os.makedirs(os.path.dirname(file_path), exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(html)

    site.pages.append(path)
    site.log.flush(path)


def generate_grid(site: Site, projects: Iterable[Project], locale: str, category: str):
    path = grid_path(site, locale, category)
    visible = filter_by_category(sort_by_end_date_descending(projects), category)
    if len(visible) == 0:
        site.log.note('Empty grid')
        cards = p(esc(site.t('sin_proyectos', locale)), 'empty-note')
    else:
        cards = tagc('main', 'grid', [project_card(site, path, project, locale) for project in visible])

    generate(site, path, locale, f'{site.config.author} | Portfolio', [
        tag('header', [
            h1(esc(site.config.author)),
            p(esc(site.t('header_sub', locale)), 'subtitle'),
        ]),
        category_bar(site, path, locale, category),
        cards,
    ], {lang: grid_path(site, lang, category) for lang in site.config.locales})


def generate_detail(site: Site, project: Project, locale: str):
    path = detail_path(site, locale, project.id)
    title = localized(project, 'title', locale)
    generate(site, path, locale, f'{title} | {site.config.author}', [
        a(link(path, grid_path(site, locale)), esc(site.t('volver', locale)), 'back-link'),
        div('detail-header', [
            span('category-badge', esc(category_label(project.category, site.translations, locale))),
            h1(esc(title)),
            div('detail-date', format_period(project.start_period, project.end_period)),
        ]),
        div('detail-grid', [
            div('detail-text', [
                h3(esc(site.t('sobre', locale))),
                p(esc(localized(project, 'body', locale))),
                h3(esc(site.t('tech', locale)), 'tech-title'),
                taglist(project.technologies),
                div('cta-block', call_to_action(site, project, locale)),
            ]),
            media_block(site, project, locale),
        ]),
        embed_section(site, project, locale),
    ], {lang: detail_path(site, lang, project.id) for lang in site.config.locales})


def generate_not_found(site: Site, locale: str):
    path = not_found_path(site, locale)
    message = site.t('no_encontrado', locale)
    generate(site, path, locale, f'{message} | {site.config.author}', [
        div('not-found', h1(esc(message))),
        a(link(path, grid_path(site, locale)), esc(site.t('volver', locale)), 'back-link'),
    ], {lang: not_found_path(site, lang) for lang in site.config.locales})


# -----------------
# POST-BUILD CHECKS
# -----------------
def check_links(site: Site):
    """Parses every written page and validates its local links."""
    link_counts = {page: 0 for page in site.pages}
    for page in site.pages:
        file_path = os.path.join(site.config.output_dir, f'{page}.html')
        with open(file_path, encoding='utf-8') as f:
            soup = BeautifulSoup(f.read(), 'html.parser')
        for anchor in soup.find_all('a', href=True):
            href = anchor['href']
            if not is_local_href(href):
                continue
            target = posixpath.normpath(posixpath.join(posixpath.dirname(page), href)).removesuffix('.html')
            if target not in link_counts:
                site.log.setdefault(page, []).append(f"Invalid local path '{href}'")
            elif target != page:
                link_counts[target] += 1

    for page, count in link_counts.items():
        if count == 0 and page != grid_path(site, site.config.default_locale) and posixpath.basename(page) != '404':
            site.log.setdefault(page, []).append('Not linked in any other page')


def build_site(config: SiteConfig, translations: Translations, projects: Iterable[Project] | None = None) -> PageLog:
    """Writes every page of the site into config.output_dir.

    Args:
        config (SiteConfig): site settings
        translations (Translations): UI strings
        projects (Iterable[Project] | None): the catalog to render (default: CATALOG)

    Raises:
        CatalogError: if the projects break a catalog invariant (nothing is written)

    Returns:
        PageLog: warnings per page
    """
    projects = validate_catalog(CATALOG if projects is None else projects)
    site = Site(config, translations)

    for locale in config.locales:
        for category in CATEGORY_FILTERS:
            generate_grid(site, projects, locale, category)
        for project in projects:
            generate_detail(site, project, locale)
        generate_not_found(site, locale)

    for project_id, notes in catalog_warnings(projects).items():
        site.log.setdefault(detail_path(site, config.default_locale, project_id), []).extend(notes)

    check_links(site)
    return site.log


def build_project(config: SiteConfig, translations: Translations, project_id: str, projects: Iterable[Project] | None = None) -> PageLog:
    """Writes only the detail pages of one project, or the not-found pages if the id is unknown."""
    projects = validate_catalog(CATALOG if projects is None else projects)
    site = Site(config, translations)

    project = find_by_id(projects, project_id)
    for locale in config.locales:
        if project is None:
            site.log.note(f"Project '{project_id}' not found")
            generate_not_found(site, locale)
        else:
            generate_detail(site, project, locale)
    return site.log


# ----------------
# CONSOLE MESSAGES
# ----------------
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Build the portfolio site into static HTML pages.')
    parser.add_argument('--output', default='docs', help='Output directory (default: docs)')
    parser.add_argument('--base-url', default='/', help='URL prefix for asset paths such as /proyectos/*.mp4 (default: /)')
    parser.add_argument('--project', metavar='ID', help='Only build the detail pages of this project')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = SiteConfig(output_dir=args.output, base_url=args.base_url)
    translations = default_translations()

    try:
        if args.project:
            log = build_project(config, translations, args.project)
        else:
            log = build_site(config, translations)
    except CatalogError as e:
        print('❌ Invalid project data:')
        for problem in e.problems:
            print(f'   - {problem}')
        return 1

    print('Pages successfully built!')
    warning_texts = log.report_lines()
    if len(warning_texts) == 0:
        print('✅ No warnings')
    else:
        for warning_text in warning_texts:
            print(warning_text)
    return 0


if __name__ == '__main__':
    sys.exit(main())

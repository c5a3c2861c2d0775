# pylint: disable=C0114,C0116,C0115
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Literal, Sequence

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from catalog import Project
from translations import Translations, base_language

DEFAULT_LANGUAGE = 'es'
ALL_CATEGORIES = 'Todos'
CATEGORY_FILTERS = (ALL_CATEGORIES, 'Web', 'Videojuegos', 'Multimedia')
VISIBLE_TECHNOLOGIES = 4
PERIOD_SEPARATOR = ' — '


# ------
# LOCALE
# ------
def is_default_locale(locale: str) -> bool:
    return base_language(locale) == DEFAULT_LANGUAGE


def resolve_localized_field(primary: str, alternate: str | None, locale: str) -> str:
    if is_default_locale(locale):
        return primary
    return alternate or primary


def localized(project: Project, attr: Literal['title', 'summary', 'body'], locale: str) -> str:
    return resolve_localized_field(getattr(project, attr), getattr(project, f'{attr}_alt'), locale)


def category_label(category: str, translations: Translations, locale: str) -> str:
    return translations.t(f'cat_{category}', locale)


# -----
# DATES
# -----
def parse_period(period: str) -> datetime:
    """'2025-09' -> datetime(2025, 9, 1)"""
    return isoparse(period)


def reformat_period(period: str) -> str:
    return '/'.join(reversed(period.split('-')))


def format_period(start: str, end: str) -> str:
    if start == end:
        return reformat_period(start)
    return f'{reformat_period(start)}{PERIOD_SEPARATOR}{reformat_period(end)}'


def format_duration(start: str, end: str, translations: Translations, locale: str) -> str:
    d = relativedelta(parse_period(end), parse_period(start))
    if d.years == 0 and d.months == 0:
        return f"1 {translations.t('mes', locale)}"

    years = '' if d.years == 0 else f"{d.years} {translations.t('anio' if d.years == 1 else 'anios', locale)}"
    months = '' if d.months == 0 else f"{d.months} {translations.t('mes' if d.months == 1 else 'meses', locale)}"
    return ' '.join(x for x in [years, months] if x != '')


# ------------------
# SORT, FILTER, FIND
# ------------------
def sort_by_end_date_descending(projects: Iterable[Project]) -> list[Project]:
    # sorted() keeps ties in input order, also with reverse=True
    return sorted(projects, key=lambda project: parse_period(project.end_period), reverse=True)


def filter_by_category(projects: Iterable[Project], category: str) -> list[Project]:
    if category == ALL_CATEGORIES:
        return list(projects)
    return [project for project in projects if project.category == category]


def find_by_id(projects: Iterable[Project], project_id: str) -> Project | None:
    for project in projects:
        if project.id == project_id:
            return project
    return None


def visible_technologies(project: Project, limit: int = VISIBLE_TECHNOLOGIES) -> tuple[Sequence[str], int]:
    """First `limit` technologies and how many are left out."""
    shown = project.technologies[:limit]
    return shown, len(project.technologies) - len(shown)


# -----------
# DETAIL VIEW
# -----------
CASE_STUDY = 'case_study'
EXTERNAL_LINK = 'external_link'
NO_LINK = 'none'


@dataclass(frozen=True)
class CallToAction:
    kind: Literal['case_study', 'external_link', 'none']
    url: str | None = None


def resolve_call_to_action(project: Project) -> CallToAction:
    if project.case_study_url:
        return CallToAction(CASE_STUDY, project.case_study_url)
    if project.external_url and project.external_url.strip() != '':
        return CallToAction(EXTERNAL_LINK, project.external_url)
    return CallToAction(NO_LINK)


def resolve_embed(project: Project) -> str | None:
    return project.figma_url or project.canva_url or None


HOSTED_VIDEO = 'hosted_video'
VIDEO_FILE = 'video_file'
IMAGE = 'image'
HOSTED_VIDEO_DOMAINS = ('youtube.com', 'youtu.be')


@dataclass(frozen=True)
class Media:
    kind: Literal['hosted_video', 'video_file', 'image']
    src: str


def is_hosted_video(url: str | None) -> bool:
    return url is not None and any(domain in url for domain in HOSTED_VIDEO_DOMAINS)


def resolve_media(project: Project) -> Media:
    if not project.video_url:
        return Media(IMAGE, f'/proyectos/{project.id}.png')
    if is_hosted_video(project.video_url):
        return Media(HOSTED_VIDEO, project.video_url.replace('watch?v=', 'embed/'))
    return Media(VIDEO_FILE, project.video_url)

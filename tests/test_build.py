import os
from dataclasses import replace

import pytest
from bs4 import BeautifulSoup

import build_portfolio
from build_portfolio import Site, build_project, build_site, check_links, language_selector, link, main, path_prefix
from catalog import CATALOG, CatalogError, Project
from config import SiteConfig
from translations import default_translations
from view_model import sort_by_end_date_descending


def read_page(output_dir, path: str) -> BeautifulSoup:
    with open(os.path.join(output_dir, f'{path}.html'), encoding='utf-8') as f:
        return BeautifulSoup(f.read(), 'html.parser')


def card_titles(soup: BeautifulSoup) -> list[str]:
    return [title.get_text(strip=True) for title in soup.select('a.card h2')]


def written_pages(output_dir) -> set[str]:
    pages = set()
    for root, _, files in os.walk(output_dir):
        for file_name in files:
            rel = os.path.relpath(os.path.join(root, file_name), output_dir)
            pages.add(rel.replace(os.sep, '/').removesuffix('.html'))
    return pages


@pytest.fixture(name='built')
def built_site(tmp_path):
    config = SiteConfig(output_dir=str(tmp_path))
    log = build_site(config, default_translations())
    return tmp_path, log


def test_paths():
    assert path_prefix('index') == ''
    assert path_prefix('en/proyecto/win98') == '../../'
    assert link('proyecto/win98', 'index') == '../index.html'
    assert link('en/index', 'en/categoria/web') == '../en/categoria/web.html'


def test_writes_every_page(built):
    output_dir, _ = built
    expected = set()
    for prefix in ('', 'en/'):
        expected |= {f'{prefix}index', f'{prefix}404'}
        expected |= {f'{prefix}categoria/{slug}' for slug in ('web', 'videojuegos', 'multimedia')}
        expected |= {f'{prefix}proyecto/{project.id}' for project in CATALOG}
    assert written_pages(output_dir) == expected


def test_reference_site_has_no_warnings(built):
    _, log = built
    assert log.report_lines() == []


def test_grid_is_sorted_and_localized(built):
    output_dir, _ = built
    ordered = sort_by_end_date_descending(CATALOG)
    assert card_titles(read_page(output_dir, 'index')) == [project.title for project in ordered]
    assert card_titles(read_page(output_dir, 'en/index')) == [project.title_alt for project in ordered]
    assert ordered[0].id == 'todo-list'


def test_category_page_only_lists_category(built):
    output_dir, _ = built
    soup = read_page(output_dir, 'en/categoria/videojuegos')
    hrefs = [card['href'] for card in soup.select('a.card')]
    assert hrefs == ['../../en/proyecto/runner-vr.html', '../../en/proyecto/arcade-versus.html', '../../en/proyecto/endless-runner-js.html']
    labels = [button.get_text(strip=True) for button in soup.select('a.filter-button')]
    assert labels == ['All', 'Web', 'Games', 'Multimedia']


def test_card_shows_period_and_extra_technologies(built):
    output_dir, _ = built
    soup = read_page(output_dir, 'index')
    todo = soup.select_one('a.card[href="proyecto/todo-list.html"]')
    assert todo.select_one('.card-date').get_text(strip=True) == '01/2026'
    assert [t.get_text(strip=True) for t in todo.select('.tag')] == ['TypeScript', 'React', 'PostgreSQL', 'Node.js']
    assert todo.select_one('.tag-more').get_text(strip=True) == '+ 4'

    voice = soup.select_one('a.card[href="proyecto/audio-reactiva.html"]')
    assert voice.select_one('.card-date').get_text(strip=True) == '04/2025 — 08/2025'
    assert voice.select_one('.tag-more') is None


def test_detail_page_call_to_action(built):
    output_dir, _ = built
    runner = read_page(output_dir, 'en/proyecto/runner-vr')
    cta = runner.select_one('a.cta')
    assert cta['href'].startswith('https://cherry-halloumi-3aa.notion.site/')
    assert 'CASE STUDY' in cta.get_text()

    arcade = read_page(output_dir, 'en/proyecto/arcade-versus')
    assert arcade.select_one('a.cta') is None
    assert 'Hardware/Offline project' in arcade.select_one('.cta-note').get_text()

    win98 = read_page(output_dir, 'proyecto/win98')
    assert win98.select_one('a.cta')['href'] == 'https://valenyuge.github.io/infografia-taller/inicio.html'


def test_detail_page_embed_and_media(built):
    output_dir, _ = built
    vorterix = read_page(output_dir, 'proyecto/landing-vorterix')
    assert vorterix.select_one('iframe.embed')['src'].startswith('https://www.canva.com/')
    assert vorterix.select_one('video source')['src'] == '/proyectos/vorterix.mp4'
    assert 'Memoria Técnica y Proceso de Diseño' in vorterix.select_one('.embed-section').get_text()

    audio = read_page(output_dir, 'en/proyecto/audio-reactiva')
    assert audio.select_one('.embed-section') is None
    assert audio.title.get_text() == 'Voice Brush: Generative Art | Valentin Yuge'


def test_language_selector_points_to_same_page(built):
    output_dir, _ = built
    soup = read_page(output_dir, 'en/proyecto/win98')
    hrefs = [button['href'] for button in soup.select('a.lang-button')]
    assert hrefs == ['../../proyecto/win98.html', '../../en/proyecto/win98.html']


def test_base_url_prefixes_assets(tmp_path):
    config = SiteConfig(output_dir=str(tmp_path), base_url='/portfolio/')
    build_project(config, default_translations(), 'todo-list')
    soup = read_page(tmp_path, 'proyecto/todo-list')
    assert soup.select_one('video source')['src'] == '/portfolio/proyectos/to-do.mp4'


def test_invalid_catalog_writes_nothing(tmp_path):
    broken = Project(
        id='broken', title='Roto', summary='Resumen', body='Cuerpo',
        start_period='2025-10', end_period='2025-01', technologies=(), category='Web',
    )
    with pytest.raises(CatalogError):
        build_site(SiteConfig(output_dir=str(tmp_path)), default_translations(), [broken])
    assert os.listdir(tmp_path) == []


def test_empty_category_is_reported(tmp_path):
    only_web = [project for project in CATALOG if project.category == 'Web']
    log = build_site(SiteConfig(output_dir=str(tmp_path)), default_translations(), only_web)
    assert log['categoria/multimedia'] == ['Empty grid']
    assert log['en/categoria/videojuegos'] == ['Empty grid']
    soup = read_page(tmp_path, 'en/categoria/multimedia')
    assert 'There are no projects in this category.' in soup.get_text()


def test_build_project_unknown_id(tmp_path):
    log = build_project(SiteConfig(output_dir=str(tmp_path)), default_translations(), 'does-not-exist')
    assert written_pages(tmp_path) == {'404', 'en/404'}
    assert log['404'] == ["Project 'does-not-exist' not found"]
    assert '404 - Project not found' in read_page(tmp_path, 'en/404').get_text()


def test_build_project(tmp_path):
    log = build_project(SiteConfig(output_dir=str(tmp_path)), default_translations(), 'win98')
    assert written_pages(tmp_path) == {'proyecto/win98', 'en/proyecto/win98'}
    assert log.report_lines() == []


def test_check_links_reports_broken_link(tmp_path):
    (tmp_path / 'index.html').write_text('<a href="missing.html">x</a><a href="https://example.com">y</a>', encoding='utf-8')
    site = Site(SiteConfig(output_dir=str(tmp_path)), default_translations())
    site.pages.append('index')
    check_links(site)
    assert site.log['index'] == ["Invalid local path 'missing.html'"]


def test_main(tmp_path, capsys):
    assert main(['--output', str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert 'Pages successfully built!' in out
    assert '✅ No warnings' in out
    assert (tmp_path / 'index.html').exists()


def test_main_project_not_found(tmp_path, capsys):
    assert main(['--output', str(tmp_path), '--project', 'nope']) == 0
    out = capsys.readouterr().out
    assert "⚠️  404: Project 'nope' not found" in out


def test_main_reports_invalid_catalog(tmp_path, capsys, monkeypatch):
    broken = replace(CATALOG[0], end_period='2025-13')
    monkeypatch.setattr(build_portfolio, 'CATALOG', (broken,) + CATALOG[1:])
    assert main(['--output', str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert '❌ Invalid project data:' in out
    assert "   - todo-list: invalid end_period '2025-13'" in out
    assert 'Pages successfully built!' not in out
    assert os.listdir(tmp_path) == []


def test_language_selector_marks_current_locale():
    soup = BeautifulSoup(language_selector('en/index', 'en', {'es': 'index', 'en': 'en/index'}), 'html.parser')
    buttons = soup.select('a.lang-button')
    assert [button.get_text() for button in buttons] == ['ES', 'EN']
    assert [button['href'] for button in buttons] == ['../index.html', '../en/index.html']
    assert 'active' in buttons[1]['class']
    assert 'active' not in buttons[0]['class']

from config import SiteConfig
from page_log import PageLog
from translations import Translations, base_language, default_translations


def test_base_language():
    assert base_language('en-GB') == 'en'
    assert base_language('ES') == 'es'


def test_lookup_and_fallbacks():
    translations = default_translations()
    assert translations.t('volver', 'en-US') == '← Back to grid'
    assert translations.t('volver', 'es-AR') == '← Volver a la grilla'
    # missing in English, falls back to Spanish
    assert translations.t('cat_Web', 'en') == 'Web'
    # unknown language uses the fallback locale
    assert translations.t('tech', 'fr') == 'Tecnologías utilizadas'
    assert translations.t('unknown_key', 'en') == 'unknown_key'


def test_every_english_key_exists_in_spanish():
    translations = default_translations()
    assert set(translations.resources['en']) <= set(translations.resources['es'])
    assert translations.languages() == ['es', 'en']


def test_custom_fallback_locale():
    translations = Translations({'en': {'hello': 'Hello'}, 'es': {}}, fallback_locale='en')
    assert translations.t('hello', 'es') == 'Hello'


def test_locale_prefix():
    config = SiteConfig()
    assert config.locale_prefix('es') == ''
    assert config.locale_prefix('es-AR') == ''
    assert config.locale_prefix('en') == 'en/'
    assert config.locale_prefix('en-GB') == 'en/'


def test_asset_url():
    assert SiteConfig().asset_url('/proyectos/VR.mp4') == '/proyectos/VR.mp4'
    assert SiteConfig(base_url='/portfolio/').asset_url('/proyectos/VR.mp4') == '/portfolio/proyectos/VR.mp4'
    assert SiteConfig(base_url='/portfolio/').asset_url('https://youtu.be/x') == 'https://youtu.be/x'


def test_page_log():
    log = PageLog()
    log.note('Empty grid')
    log.flush('categoria/web')
    log.flush('index')
    assert log['categoria/web'] == ['Empty grid']
    assert log['index'] == []
    assert log.report_lines() == ['⚠️  categoria/web: Empty grid']
    assert len(log) == 2

# pylint: disable=C0114,C0116
from html import escape


def esc(text: str) -> str:
    return escape(text, quote=True)


def attrs(**params: str | None) -> str:
    """Builds an attribute string, skipping None values.

    Trailing underscores are dropped ('class_' -> 'class') and inner ones become dashes.
    """
    parts = []
    for name, value in params.items():
        if value is None:
            continue
        name = name.rstrip('_').replace('_', '-')
        parts.append(f'{name}="{esc(value)}"')
    return ' '.join(parts)


# --------
# ELEMENTS
# --------
def tag(tag_name: str, content: str | list[str], params: str = '') -> str:
    if params != '':
        params = ' ' + params
    if isinstance(content, list):
        content = ''.join(content).strip()
    return f'<{tag_name}{params}>{content}</{tag_name}>'


def void(tag_name: str, params: str = '') -> str:
    if params != '':
        params = ' ' + params
    return f'<{tag_name}{params}>'


def tagc(tag_name: str, classes: str, content: str | list[str] = '', params: str = '') -> str:
    if params != '':
        params = ' ' + params
    return tag(tag_name, content, f'class="{classes}"{params}')


def div(classes: str, content: str | list[str] = '', params: str = '') -> str:
    return tagc('div', classes, content, params)


def span(classes: str, content: str | list[str] = '', params: str = '') -> str:
    return tagc('span', classes, content, params)


def h1(text: str | list[str], classes: str = 'title'):
    return tagc('h1', classes, text)


def h2(text: str | list[str], classes: str = 'card-title'):
    return tagc('h2', classes, text)


def h3(text: str | list[str], classes: str = 'section-title'):
    return tagc('h3', classes, text)


def p(text: str | list[str], classes: str = 'text'):
    return tagc('p', classes, text)


def a(href: str, text: str | list[str], classes: str = '', external: bool = False):
    classes = f'link {classes}' if classes != '' else 'link'
    params = attrs(href=href, target='_blank', rel='noopener noreferrer') if external else attrs(href=href)
    return tagc('a', classes, text, params)


def img(classes: str, src: str, alt_text: str):
    return void('img', f'class="{classes}" ' + attrs(src=src, alt=alt_text))


def iframe(classes: str, src: str, title: str, allow: str | None = None, lazy: bool = False):
    return tagc('iframe', classes, '', attrs(src=src, title=title, allow=allow, loading='lazy' if lazy else None) + ' allowfullscreen')


def video(classes: str, src: str):
    return tagc('video', classes, void('source', attrs(src=src, type='video/mp4')), 'controls muted loop')


def taglist(tag_names: list[str] | tuple[str, ...], extra: str = ''):
    return div('tag-list', [div('tag', esc(tag_name)) for tag_name in tag_names] + ([span('tag-more', extra)] if extra != '' else []))

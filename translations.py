# pylint: disable=C0114,C0115,C0116,C0301
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


def base_language(locale: str) -> str:
    """'en-GB' -> 'en'"""
    return locale.strip().lower()[:2]


@dataclass(frozen=True)
class Translations:
    resources: Mapping[str, Mapping[str, str]]
    fallback_locale: str = 'es'

    def t(self, key: str, locale: str) -> str:
        """Looks up a UI string, falling back to the default locale and then to the key itself."""
        for lang in (base_language(locale), self.fallback_locale):
            strings = self.resources.get(lang, {})
            if key in strings:
                return strings[key]
        return key

    def languages(self) -> list[str]:
        return list(self.resources.keys())


def default_translations() -> Translations:
    resources = {
        'es': {
            'header_sub': 'Estudiante de Diseño Multimedial @ UNLP | Desarrollador',
            'volver': '← Volver a la grilla',
            'sobre': 'Sobre el proyecto',
            'tech': 'Tecnologías utilizadas',
            'ver_demo': 'VER PROYECTO ↗',
            'ver_bitacora': 'LEER BITÁCORA / PROCESO ↗',
            'sin_link': '* Proyecto de hardware/offline - Documentación en video',
            'memoria': 'Memoria Técnica y Proceso de Diseño',
            'detalle_mas': 'VER DETALLES →',
            'contacto_tit': '¿Hablamos?',
            'contacto_desc': 'Estoy abierto a nuevas oportunidades y colaboraciones.',
            'no_encontrado': '404 - Proyecto no encontrado',
            'video_de': 'Video de',
            'sin_proyectos': 'No hay proyectos en esta categoría.',
            'cat_Todos': 'Todos',
            'cat_Web': 'Web',
            'cat_Videojuegos': 'Videojuegos',
            'cat_Multimedia': 'Multimedia',
            'mes': 'mes',
            'meses': 'meses',
            'anio': 'año',
            'anios': 'años',
        },
        'en': {
            'header_sub': 'Multimedia Design Student @ UNLP | Developer',
            'volver': '← Back to grid',
            'sobre': 'About the project',
            'tech': 'Technologies used',
            'ver_demo': 'VIEW PROJECT ↗',
            'ver_bitacora': 'READ CASE STUDY / LOG ↗',
            'sin_link': '* Hardware/Offline project - Video documentation only',
            'memoria': 'Technical Report & Design Process',
            'detalle_mas': 'VIEW DETAILS →',
            'contacto_tit': "Let's talk",
            'contacto_desc': "I'm open to new opportunities and collaborations.",
            'no_encontrado': '404 - Project not found',
            'video_de': 'Video of',
            'sin_proyectos': 'There are no projects in this category.',
            'cat_Todos': 'All',
            'cat_Videojuegos': 'Games',
            'mes': 'mo',
            'meses': 'mos',
            'anio': 'yr',
            'anios': 'yrs',
        },
    }
    return Translations(MappingProxyType({lang: MappingProxyType(strings) for lang, strings in resources.items()}))

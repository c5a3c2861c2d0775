# pylint: disable=C0114,C0116,C0301
import re
from dataclasses import dataclass
from typing import Iterable, Literal

Category = Literal['Web', 'Videojuegos', 'Multimedia']
CATEGORIES: tuple[str, ...] = ('Web', 'Videojuegos', 'Multimedia')

PERIOD_PATTERN = re.compile(r'^\d{4}-(0[1-9]|1[0-2])$')


class CatalogError(ValueError):
    """Raised when the project data breaks one of the catalog invariants."""

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__('Invalid catalog: ' + '; '.join(problems))


@dataclass(frozen=True)
class Project:
    id: str
    title: str
    summary: str
    body: str
    start_period: str
    end_period: str
    technologies: tuple[str, ...]
    category: Category
    title_alt: str | None = None
    summary_alt: str | None = None
    body_alt: str | None = None
    external_url: str = ''
    video_url: str | None = None
    case_study_url: str | None = None
    figma_url: str | None = None
    canva_url: str | None = None


def validate_catalog(projects: Iterable[Project]) -> tuple[Project, ...]:
    """Checks the catalog invariants and freezes the sequence.

    Args:
        projects (Iterable[Project]): the project records, in display order

    Raises:
        CatalogError: listing every problem found

    Returns:
        tuple[Project, ...]: the same records as an immutable sequence
    """
    projects = tuple(projects)
    problems = []
    seen_ids = set()
    for project in projects:
        label = project.id or '<no id>'
        if project.id in seen_ids:
            problems.append(f"Duplicated id '{project.id}'")
        seen_ids.add(project.id)

        for attr in ('id', 'title', 'summary', 'body'):
            if not getattr(project, attr):
                problems.append(f"{label}: empty '{attr}'")

        if project.category not in CATEGORIES:
            problems.append(f"{label}: unknown category '{project.category}'")

        periods_ok = True
        for attr in ('start_period', 'end_period'):
            value = getattr(project, attr)
            if not isinstance(value, str) or not PERIOD_PATTERN.match(value):
                problems.append(f"{label}: invalid {attr} '{value}'")
                periods_ok = False
        if periods_ok and project.end_period < project.start_period:
            problems.append(f"{label}: end_period {project.end_period} is before start_period {project.start_period}")

    if problems:
        raise CatalogError(problems)
    return projects


def catalog_warnings(projects: Iterable[Project]) -> dict[str, list[str]]:
    """Non-fatal data notes per project id (missing translations, media...)."""
    notes: dict[str, list[str]] = {}
    for project in projects:
        project_notes = []
        for attr in ('title', 'summary', 'body'):
            if not getattr(project, f'{attr}_alt'):
                project_notes.append(f"Missing English {attr}")
        if not project.video_url:
            project_notes.append('No video, using placeholder image')
        if len(project.technologies) == 0:
            project_notes.append('No technologies listed')
        if project_notes:
            notes[project.id] = project_notes
    return notes


# --------
# PROJECTS
# --------
# validated by the build, not at import
CATALOG: tuple[Project, ...] = (
    Project(
        id='todo-list',
        title='Gestor de Tareas Full Stack',
        title_alt='Full Stack Task Manager',
        start_period='2026-01',
        end_period='2026-01',
        summary='Aplicación de productividad con persistencia de datos y lógica de tipado estricto.',
        summary_alt='Productivity app with data persistence and strict typing logic.',
        body='Desarrollo integral de una aplicación de tareas utilizando el stack React + Vite. Implementé una base de datos PostgreSQL en Render para la persistencia, utilizando consultas SQL para la manipulación de la información. El proyecto destaca por su arquitectura limpia en TypeScript y una interfaz optimizada con TailwindCSS, priorizando la experiencia de usuario (UX) y el rendimiento.',
        body_alt='End-to-end development of a task application using the React + Vite stack. I implemented a PostgreSQL database on Render for persistence, using SQL queries for data manipulation. The project stands out for its clean TypeScript architecture and an optimized UI with TailwindCSS, prioritizing user experience (UX) and performance.',
        technologies=('TypeScript', 'React', 'PostgreSQL', 'Node.js', 'Express', 'TailwindCSS', 'SQL', 'Vite'),
        category='Web',
        external_url='https://todolist-18e7.onrender.com/',
        video_url='/proyectos/to-do.mp4',
    ),
    Project(
        id='runner-vr',
        title='Hora Pico: Unity VR Mobile',
        title_alt='Rush Hour: Unity Mobile VR',
        start_period='2025-09',
        end_period='2025-12',
        summary='Videojuego inmersivo de realidad virtual que captura el caos urbano de intentar tomar el último colectivo.',
        summary_alt='Immersive VR game capturing the urban chaos of trying to catch the last bus.',
        body="Desarrollo de un videojuego de realidad virtual (VR) para móviles con una mecánica de 'Endless Runner' en 3D. El jugador asume el rol de un niño que debe sortear obstáculos urbanos, autos y peatones en cuatro carriles dinámicos para alcanzar la parada antes de que el colectivo se retire. Implementé un sistema de colisiones preciso y una arquitectura de sonido espacial que incluye alertas de proximidad y feedback sonoro de pasos. La banda sonora fue generada mediante Suno AI para lograr una atmósfera frenética y envolvente. El proyecto destaca por su diseño de entorno urbano y la integración de inputs físicos para una experiencia inmersiva total.",
        body_alt="Mobile Virtual Reality (VR) game development featuring a 3D 'Endless Runner' mechanic. Players take on the role of a child navigating urban obstacles, cars, and pedestrians across four dynamic lanes to reach the bus stop on time. I implemented a precise collision system and spatial audio architecture, including proximity alerts and footstep sound feedback. The soundtrack was generated using Suno AI to create a frantic and immersive atmosphere. The project stands out for its urban environment design and the integration of physical inputs for a complete immersive experience.",
        technologies=('Unity 3D', 'C#', 'OSC', 'Mobile VR', 'Suno AI'),
        category='Videojuegos',
        case_study_url='https://cherry-halloumi-3aa.notion.site/Hora-pico-Bit-cora-2a387ae1d566802fa823f963f5a055de?pvs=14',
        video_url='/proyectos/VR.mp4',
    ),
    Project(
        id='win98',
        title='OS Interactivo: Historia de la IA',
        title_alt='Interactive OS: History of AI',
        start_period='2025-09',
        end_period='2025-09',
        summary='Sistema operativo simulado en la web que funciona como una infografía interactiva sobre la evolución de la IA.',
        summary_alt='Simulated web operating system acting as an interactive infographic on the evolution of AI.',
        body='Desarrollo de una infografía interactiva con estética de Windows 98 que explora el origen y el impacto de la Inteligencia Artificial. Programé un sistema de ventanas funcional utilizando JavaScript Vanilla, permitiendo una navegación no lineal a través de aplicaciones simuladas: un Explorador de Archivos para la cronología histórica, un Internet Explorer para el análisis de ChatGPT, un Vlog/Chat para el debate sobre autoría, y una instancia de Paint para la reflexión sobre el arte generado por máquinas. El proyecto incluye un Bloc de Notas para interacción de usuarios, demostrando un manejo avanzado de la manipulación del DOM y la gestión de estados de interfaz sin frameworks externos.',
        body_alt='Development of an interactive infographic with a Windows 98 aesthetic exploring the origins and impact of Artificial Intelligence. I programmed a functional window system using Vanilla JavaScript, allowing non-linear navigation through simulated applications: a File Explorer for historical chronology, an Internet Explorer for ChatGPT analysis, a Vlog/Chat for the authorship debate, and a Paint instance for reflection on machine-generated art. The project includes a Notepad for user interaction, demonstrating advanced DOM manipulation and interface state management without external frameworks.',
        technologies=('JavaScript', 'HTML', 'CSS', 'UX/UI Design'),
        category='Web',
        external_url='https://valenyuge.github.io/infografia-taller/inicio.html',
        video_url='/proyectos/Infografia-Windows.mp4',
        figma_url='https://embed.figma.com/slides/0MrmBkCXCZ4qg5SctYO4mA/TP3-Memoria-Descriptiva?node-id=1-29&embed-host=share',
    ),
    Project(
        id='influencers-ia',
        title='InfluencIA: Instalación Física',
        title_alt='InfluencIA: Physical Installation',
        start_period='2025-09',
        end_period='2025-12',
        summary='Instalación multimedia con Arduino y Unity que explora el fenómeno de las influencers IA mediante hardware personalizado.',
        summary_alt='Multimedia installation with Arduino and Unity exploring the AI influencer phenomenon.',
        body="Desarrollo integral de InfluencIA, una instalación interactiva física con lógica en Unity. El sistema permite una navegación no lineal mediante el escaneo de códigos QR reales vinculados a objetos físicos. Implementé una interfaz controlada por un potenciómetro programado en Arduino para la interacción con carruseles de datos y comparativas gráficas. La experiencia incluye un módulo de trivia gamificado con una 'ruleta aleatoria' y un sistema de feedback pedagógico. Programé la comunicación serial para integrar los sensores físicos y diseñé un flujo de usuario circular que permite reiniciar la instalación automáticamente para el siguiente usuario.",
        body_alt="Comprehensive development of InfluencIA, a physical interactive installation powered by Unity. The system allows non-linear navigation through real-world QR code scanning linked to physical objects. I implemented a user interface controlled by an Arduino-programmed potentiometer for interacting with data carousels and graphical comparisons. The experience features a gamified trivia module with a 'random roulette' and a pedagogical feedback system. I programmed serial communication to integrate physical sensors and designed a circular user flow that automatically resets the installation for the next user.",
        technologies=('Unity', 'Arduino', 'C#', 'OSC', 'Physical Interaction'),
        category='Multimedia',
        video_url='/proyectos/influencia.mp4',
        figma_url='https://embed.figma.com/slides/LDxUXS9EZQ4gYKyfLzNSpl/Memoria-InfluencIA?node-id=1-735&embed-host=share',
    ),
    Project(
        id='redisenio-gato',
        title="Rediseño 'El Gato y la Caja'",
        title_alt="'El Gato y la Caja' Redesign",
        start_period='2025-06',
        end_period='2025-08',
        summary='Rediseño de plataforma informativa mediante metodologías de Design Thinking y UX Research.',
        summary_alt='Digital news platform redesign using Design Thinking and UX Research methodologies.',
        body="Proyecto de rediseño integral para el medio 'El Gato y la Caja' desarrollado bajo la metodología de Diseño Centrado en el Usuario (DCU). El proceso incluyó etapas de Benchmarking, creación de User Personas y Arquitectura de la Información mediante Card Sorting para optimizar el flujo de navegación. Desarrollé una propuesta de valor que incluye el rediseño de la Home, secciones específicas y notas de profundidad, enfocándome en la legibilidad y jerarquías visuales. La implementación funcional se realizó con HTML, CSS y JavaScript, logrando un sistema de diseño consistente y escalable para una experiencia de lectura fluida en desktop.",
        body_alt="Comprehensive redesign project for 'El Gato y la Caja' news outlet, developed under User-Centered Design (UCD) methodology. The process involved Benchmarking, User Personas creation, and Information Architecture through Card Sorting to optimize navigation flow. I developed a value proposition that includes a redesigned Home, specific sections, and in-depth articles, focusing on readability and visual hierarchy. The functional implementation was built with HTML, CSS, and JavaScript, achieving a consistent and scalable design system for a seamless desktop reading experience.",
        technologies=('JavaScript', 'HTML', 'CSS', 'Figma', 'UX/UI Design', 'Information Architecture'),
        category='Web',
        external_url='https://valenyuge.github.io/UI-UXRedesignforSciencePlatform/index.html',
        video_url='/proyectos/elgatoylacaja.mp4',
        figma_url='https://embed.figma.com/deck/It7Ypl2xf2cKbyq1BfZBJm/Memoria-EGYLC?node-id=1-48&scaling=min-zoom&content-scaling=fixed&page-id=0%3A1&embed-host=share',
    ),
    Project(
        id='audio-reactiva',
        title='Voice Brush: Arte Generativo',
        title_alt='Voice Brush: Generative Art',
        start_period='2025-04',
        end_period='2025-08',
        summary='Experiencia de arte generativo controlada por voz que deforma grillas algorítmicas en tiempo real.',
        summary_alt='Voice-controlled generative art experience that deforms algorithmic grids in real-time.',
        body="Desarrollo de una experiencia web de arte generativo que reinterpreta las grillas de cuadrados de Vera Molnar. Utilizando la Web Audio API, programé un analizador de frecuencias que distingue entre tonos graves y agudos para controlar la deformación y el dibujo de la grilla en diferentes ejes (horizontal/vertical). Implementé lógica de detección de transitorios para reconocer aplausos (reinicio aleatorio de la obra) y silbidos (sistema de 'undo' o borrado progresivo). Todo el renderizado se realizó mediante Canvas API, permitiendo una performance fluida mientras el usuario interactúa mediante la voz o sonidos ambientales.",
        body_alt="Development of a generative art web experience reinterpreting Vera Molnar's square grids. Using the Web Audio API, I programmed a frequency analyzer that distinguishes between bass and treble tones to control the deformation and drawing of the grid on different axes. I implemented transient detection logic to recognize claps (random work reset) and whistles (progressive 'undo' or erasing system). All rendering was done via Canvas API, allowing fluid performance while the user interacts through voice or ambient sounds.",
        technologies=('Web Audio API', 'JavaScript', 'Generative Art'),
        category='Multimedia',
        external_url='https://valenyuge.github.io/WebAudio-ReactiveExperience/index.html',
        video_url='/proyectos/obra-sonido.mp4',
    ),
    Project(
        id='endless-runner-js',
        title='Vanilla JS Runner & Web',
        title_alt='Vanilla JS Runner & Web',
        start_period='2024-09',
        end_period='2024-11',
        summary='Motor de juego 2D desarrollado desde cero en JS puro y plataforma web desplegada en Neocities.',
        summary_alt='2D game engine developed from scratch in Vanilla JS and web platform deployed on Neocities.',
        body="Desarrollo de un videojuego 'Endless Runner' utilizando exclusivamente JavaScript puro (Vanilla JS), sin motores externos. Programé desde cero el Game Loop, la lógica de detección de colisiones AABB y el sistema de gravedad. El proyecto se presenta en una plataforma web diseñada para contextualizar la obra, incluyendo la fundamentación narrativa, un carrusel interactivo de assets y una galería multimedia. El sitio fue desplegado en Neocities, integrando el juego mediante una arquitectura de navegación fluida que conecta la landing page con la instancia ejecutable del juego.",
        body_alt="Development of an 'Endless Runner' video game using exclusively Vanilla JavaScript, without external engines. I programmed the Game Loop, AABB collision detection logic, and gravity system from scratch. The project is presented on a web platform designed to contextualize the work, including the narrative foundation, an interactive asset carousel, and a multimedia gallery. The site was deployed on Neocities, integrating the game through a fluid navigation architecture that connects the landing page with the playable instance of the game.",
        technologies=('JavaScript', 'HTML', 'CSS', 'Neocities', 'Game Logic'),
        category='Videojuegos',
        external_url='https://valenyuge.neocities.org/',
        video_url='/proyectos/runner-html.mp4',
    ),
    Project(
        id='arcade-versus',
        title='Arcade: Amargados 1v1',
        title_alt='Amargados Arcade 1v1',
        start_period='2024-09',
        end_period='2024-12',
        summary='Instalación interactiva con controladores físicos hackeados y lógica de ritmo en Unity.',
        summary_alt='Interactive installation with hacked physical controllers and rhythm logic in Unity.',
        body="Desarrollo integral de una experiencia de arcade física 1v1 con estética 2D. El proyecto incluyó la creación de un controlador personalizado mediante el desensamblaje y mapeo de un teclado para accionar 6 botones arcade físicos. Dentro de Unity, programé el Game Manager central que coordina el sistema de puntuación por 'timing' (ritmo), un temporizador de 90 segundos y eventos climáticos dinámicos (neblina, viento). Implementé la lógica de colisiones para los 'power-ups' (Alfajor especial) y sincronicé las animaciones de los personajes mediante eventos de código para generar una respuesta visual inmediata al input físico.",
        body_alt='Full development of a 1v1 physical arcade experience with 2D aesthetics. The project involved creating a custom controller by disassembling and mapping a keyboard to trigger 6 physical arcade buttons. Inside Unity, I programmed the central Game Manager to coordinate the timing-based scoring system, a 90-second timer, and dynamic weather events (fog, wind). I implemented collision logic for power-ups (special Alfajor) and synchronized character animations with code events to provide immediate visual feedback to physical inputs.',
        technologies=('Unity', 'C#', 'Hardware Hacking', 'Game Design'),
        category='Videojuegos',
        video_url='/proyectos/amargados.mp4',
    ),
    Project(
        id='landing-vorterix',
        title="Landing Page 'Vorterix'",
        title_alt="'Vorterix' Landing Page",
        start_period='2025-04',
        end_period='2025-05',
        summary='Maquetación Pixel Perfect con enfoque en conversión y fidelidad visual de marca.',
        summary_alt='Pixel Perfect layout focused on conversion and brand visual fidelity.',
        body='Desarrollo de una landing page de alto impacto para Vorterix, partiendo de un diseño original en Figma. El desafío principal fue lograr una maquetación Pixel Perfect que respetara la estética cruda y técnica del medio. Implementé una estructura Full Responsive utilizando metodologías modernas de CSS (Flexbox y Grid) y JavaScript para la validación de formularios de captura de datos en el lado del cliente. Me enfoqué en la optimización de activos visuales para garantizar una carga rápida sin perder calidad de imagen.',
        body_alt="High-impact landing page development for Vorterix, based on an original Figma design. The main challenge was achieving a Pixel Perfect layout that respected the brand's raw and technical aesthetics. I implemented a Full Responsive structure using modern CSS methodologies (Flexbox and Grid) and JavaScript for client-side data capture form validation. I focused on visual asset optimization to ensure fast loading times without compromising image quality.",
        technologies=('JavaScript', 'HTML', 'CSS', 'Figma', 'UX/UI Design'),
        category='Web',
        external_url='https://valenyuge.github.io/vorterix/index.html',
        video_url='/proyectos/vorterix.mp4',
        canva_url='https://www.canva.com/design/DAGoab_G6qE/OuNi1EX8LkiOvj41jqFICQ/view?embed',
    ),
)

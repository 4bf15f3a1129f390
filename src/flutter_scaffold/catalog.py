"""The catalog of files written into a generated Flutter project."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, Sequence

from . import templates
from .config import ProjectSpec
from .features import Feature
from .router import synthesize_router
from .template import TemplateRenderer

__all__ = [
    "DEFAULT_ENTRIES",
    "RenderedFile",
    "TemplateCatalog",
    "TemplateEntry",
]


Producer = Callable[[ProjectSpec, Optional[Feature]], str]
Gate = Callable[[ProjectSpec], bool]

_RENDERER = TemplateRenderer()


def _context(spec: ProjectSpec, feature: Feature | None) -> Mapping[str, Any]:
    context = dict(spec.context())
    if feature is not None:
        context["feature"] = feature
    return context


def _literal(source: str) -> Producer:
    def produce(spec: ProjectSpec, feature: Feature | None) -> str:
        return source

    return produce


def _rendered(template: str) -> Producer:
    def produce(spec: ProjectSpec, feature: Feature | None) -> str:
        return _RENDERER.render_string(template, _context(spec, feature))

    return produce


def _main(spec: ProjectSpec, feature: Feature | None) -> str:
    return templates.MAIN_BACKEND_SOURCE if spec.use_backend else templates.MAIN_SOURCE


def _router(spec: ProjectSpec, feature: Feature | None) -> str:
    return synthesize_router(spec)


def _always(spec: ProjectSpec) -> bool:
    return True


def _state_mgmt(spec: ProjectSpec) -> bool:
    return spec.use_state_mgmt


def _backend(spec: ProjectSpec) -> bool:
    return spec.use_backend


@dataclass(frozen=True, slots=True)
class TemplateEntry:
    """A destination path, how to produce its content and when to emit it.

    ``destination`` is itself a template, relative to the project root.
    Per-feature entries are rendered once for every declared feature with
    ``feature`` available in the context.
    """

    destination: str
    producer: Producer
    gate: Gate = _always
    per_feature: bool = False


@dataclass(frozen=True, slots=True)
class RenderedFile:
    path: str
    content: str


DEFAULT_ENTRIES: tuple[TemplateEntry, ...] = (
    TemplateEntry(
        "lib/features/{{ feature.name }}/data/{{ feature.name }}_repository.dart",
        _rendered(templates.REPOSITORY_TEMPLATE),
        per_feature=True,
    ),
    TemplateEntry(
        "lib/features/{{ feature.name }}/domain/{{ feature.name }}_model.dart",
        _rendered(templates.MODEL_TEMPLATE),
        per_feature=True,
    ),
    TemplateEntry(
        "lib/features/{{ feature.name }}/presentation/{{ feature.name }}_screen.dart",
        _rendered(templates.SCREEN_TEMPLATE),
        per_feature=True,
    ),
    TemplateEntry(
        "lib/features/{{ feature.name }}/logic/{{ feature.name }}_controller.dart",
        _rendered(templates.CONTROLLER_TEMPLATE),
        gate=_state_mgmt,
        per_feature=True,
    ),
    TemplateEntry("lib/core/constants/app_theme.dart", _literal(templates.APP_THEME_SOURCE)),
    TemplateEntry("lib/core/constants/app_colors.dart", _literal(templates.APP_COLORS_SOURCE)),
    TemplateEntry("lib/core/constants/app_strings.dart", _literal(templates.APP_STRINGS_SOURCE)),
    TemplateEntry("lib/core/utilities/logging.dart", _literal(templates.LOGGING_SOURCE)),
    TemplateEntry("lib/core/utilities/permissions.dart", _literal(templates.PERMISSIONS_SOURCE)),
    TemplateEntry("lib/core/widgets/custom_button.dart", _literal(templates.CUSTOM_BUTTON_SOURCE)),
    TemplateEntry(
        "lib/core/services/auth_service.dart",
        _literal(templates.AUTH_SERVICE_SOURCE),
        gate=_backend,
    ),
    TemplateEntry(
        "lib/core/services/auth_service_provider.dart",
        _rendered(templates.AUTH_SERVICE_PROVIDER_TEMPLATE),
        gate=_backend,
    ),
    TemplateEntry("lib/app/app.dart", _literal(templates.APP_SOURCE)),
    TemplateEntry("lib/app/router.dart", _router),
    TemplateEntry("lib/theme/app_theme.dart", _literal(templates.THEME_SOURCE)),
    TemplateEntry("lib/main.dart", _main),
    TemplateEntry(".env", _literal(templates.ENV_SOURCE), gate=_backend),
)


class TemplateCatalog:
    """Evaluate template gates and render the entries that apply to a project."""

    def __init__(
        self,
        entries: Sequence[TemplateEntry] | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.entries = tuple(DEFAULT_ENTRIES if entries is None else entries)
        self.renderer = renderer or _RENDERER

    def applicable(self, spec: ProjectSpec) -> Iterator[tuple[TemplateEntry, Feature | None]]:
        """Yield ``(entry, feature)`` pairs whose gate is satisfied by ``spec``.

        Per-feature entries are expanded feature by feature before the next
        entry is considered, so every file of one feature is yielded together.
        """

        gated = [entry for entry in self.entries if entry.gate(spec)]
        for feature in spec.features:
            for entry in gated:
                if entry.per_feature:
                    yield entry, feature
        for entry in gated:
            if not entry.per_feature:
                yield entry, None

    def render(self, spec: ProjectSpec) -> list[RenderedFile]:
        files: list[RenderedFile] = []
        for entry, feature in self.applicable(spec):
            path = self.renderer.render_string(entry.destination, _context(spec, feature))
            files.append(RenderedFile(path=path, content=entry.producer(spec, feature)))
        return files

"""Discover every external artifact consumed by a multi-module project.

The walk starts from the target modules (all modules minus the ignored ones, or a
chosen subset of them) and collects the resolved artifacts of every dependency
configuration. An artifact whose coordinate belongs to one of the target modules is
a reference to that module; the referenced module is walked as well so that its
dependencies end up in the result even when it was not a seed.

Candidates are deduplicated by ``group:name:version`` and the first occurrence wins.
Each module is walked at most once per run, which keeps the walk finite when modules
reference each other in a cycle.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING, Final, TypeAlias

from licensetools.domain.model import ArtifactKind, ResolvedArtifact

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Iterator, Sequence

    from licensetools.domain.ports import BuildModule, ProjectGraph

log = getLogger(__name__)

# releaseUnitTest* configurations would otherwise match the release prefix.
DEPENDENCY_SCOPE_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?!releaseUnitTest)(?:release\w*)?([cC]ompile|[cC]ompileOnly|[iI]mplementation|[aA]pi)$"
)


def is_dependency_scope(configuration_name: str) -> bool:
    return DEPENDENCY_SCOPE_PATTERN.fullmatch(configuration_name) is not None


def target_modules(
    modules: Iterable[BuildModule],
    ignored_module_names: Collection[str],
) -> list[BuildModule]:
    return [module for module in modules if module.name not in ignored_module_names]


ModuleKey: TypeAlias = tuple[str, str]


def _module_key(module: BuildModule) -> ModuleKey:
    return (module.name, module.coordinate)


@dataclass(slots=True)
class ModuleIndex:
    """Lookup table from ``group:name:version`` to in-scope module, built once per run."""

    modules: tuple[BuildModule, ...]
    _by_coordinate: dict[str, BuildModule] = field(
        default_factory=dict["str", "BuildModule"], repr=False
    )

    @classmethod
    def build(cls, modules: Sequence[BuildModule]) -> ModuleIndex:
        index = cls(modules=tuple(modules))
        for module in modules:
            existing = index._by_coordinate.setdefault(module.coordinate, module)
            if existing is not module:
                log.warning(
                    "Modules %s and %s share coordinate %s; references resolve to %s",
                    existing.name,
                    module.name,
                    module.coordinate,
                    existing.name,
                )
        return index

    def lookup(self, coordinate: str) -> BuildModule | None:
        return self._by_coordinate.get(coordinate)

    def select(self, names: Collection[str]) -> list[BuildModule]:
        known = {module.name for module in self.modules}
        unknown = sorted(set(names) - known)
        if unknown:
            raise ValueError(f"Unknown or ignored modules: {', '.join(unknown)}")
        return [module for module in self.modules if module.name in names]

    def classify(self, artifact: ResolvedArtifact) -> ResolvedArtifact:
        if artifact.coordinate in self._by_coordinate:
            kind = ArtifactKind.MODULE
        else:
            kind = ArtifactKind.EXTERNAL
        if artifact.kind is kind:
            return artifact
        return replace(artifact, kind=kind)


def _deduplicated(artifacts: Iterable[ResolvedArtifact]) -> dict[str, ResolvedArtifact]:
    unique: dict[str, ResolvedArtifact] = {}
    for artifact in artifacts:
        unique.setdefault(artifact.coordinate, artifact)
    return unique


@dataclass(slots=True)
class DependencyGraphWalker:
    index: ModuleIndex
    _visited: set[ModuleKey] = field(default_factory=set["ModuleKey"], repr=False)

    def resolve(self, seeds: Sequence[BuildModule]) -> dict[str, ResolvedArtifact]:
        """Return artifacts of ``seeds`` plus those of every module they reference.

        Referenced modules are expanded depth first from an explicit stack, so long
        module chains do not grow the interpreter's call stack.
        """

        resolved: dict[str, ResolvedArtifact] = {}
        pending = [self._expand(seeds, resolved)]
        while pending:
            candidate = next(pending[-1], None)
            if candidate is None:
                pending.pop()
                continue
            referenced = self.index.lookup(candidate.coordinate)
            if referenced is None or _module_key(referenced) in self._visited:
                continue
            log.debug("Following module reference %s", candidate.coordinate)
            pending.append(self._expand([referenced], resolved))
        return resolved

    def _expand(
        self,
        modules: Sequence[BuildModule],
        resolved: dict[str, ResolvedArtifact],
    ) -> Iterator[ResolvedArtifact]:
        """Merge the artifacts of ``modules`` and return their module references."""

        self._visited.update(_module_key(module) for module in modules)
        candidates = _deduplicated(
            self.index.classify(artifact)
            for module in modules
            for artifact in self._module_artifacts(module)
        )
        for coordinate, artifact in candidates.items():
            resolved.setdefault(coordinate, artifact)
        return iter([c for c in candidates.values() if c.is_module_reference])

    @staticmethod
    def _module_artifacts(module: BuildModule) -> Iterable[ResolvedArtifact]:
        for configuration in module.configurations():
            if not is_dependency_scope(configuration.name):
                continue
            yield from configuration.resolved_artifacts()


def resolve_project_dependencies(
    graph: ProjectGraph | None,
    *,
    ignored_modules: Collection[str] = frozenset(),
    roots: Collection[str] | None = None,
) -> tuple[ResolvedArtifact, ...]:
    """Resolve the deduplicated artifacts used by the project's target modules.

    ``roots`` narrows the walk to the named modules and whatever in-scope modules
    they reference; by default every target module is a root.
    """

    if graph is None:
        return ()
    modules = target_modules(graph.modules(), ignored_modules)
    index = ModuleIndex.build(modules)
    seeds = list(index.modules) if roots is None else index.select(roots)
    resolved = DependencyGraphWalker(index).resolve(seeds)
    log.info(
        "Resolved %s artifacts from %s of %s modules",
        len(resolved),
        len(seeds),
        len(modules),
    )
    return tuple(resolved.values())

"""Schema of the dependency graph snapshot exported from a Gradle build."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GradleBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, coerce_numbers_to_str=True)


class ArtifactPayload(GradleBaseModel):
    group: str
    name: str
    version: str
    file: str | None = None


class ConfigurationPayload(GradleBaseModel):
    name: str
    artifacts: list[ArtifactPayload] = Field(default_factory=list["ArtifactPayload"])


class ModulePayload(GradleBaseModel):
    name: str
    group: str = ""
    version: str = "unspecified"
    configurations: list[ConfigurationPayload] = Field(
        default_factory=list["ConfigurationPayload"]
    )


class GraphSnapshot(GradleBaseModel):
    modules: list[ModulePayload] = Field(default_factory=list["ModulePayload"])

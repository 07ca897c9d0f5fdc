"""POM document schema for license lookups."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class PomBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning(
            "POM %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class PomLicense(PomBaseModel):
    name: str | None = None
    url: str | None = None
    distribution: str | None = None
    comments: str | None = None


class PomDocument(PomBaseModel):
    group_id: str | None = Field(default=None, alias="groupId")
    artifact_id: str | None = Field(default=None, alias="artifactId")
    version: str | None = None
    name: str | None = None
    url: str | None = None
    licenses: list[PomLicense] = Field(default_factory=list["PomLicense"])

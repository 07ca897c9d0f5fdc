"""Schema of one manifest entry (``libraries.yml``)."""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class ManifestEntry(BaseModel):
    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    artifact: str
    name: str
    copyright_holder: str | None = Field(default=None, alias="copyrightHolder")
    license: str | None = None
    license_url: str | None = Field(default=None, alias="licenseUrl")
    url: str | None = None
    notice: str | None = None
    library_name: str | None = Field(default=None, alias="libraryName")
    file_name: str | None = Field(default=None, alias="fileName")

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.warning("Manifest entry: unmodeled keys: %s", ", ".join(sorted(new_keys)))

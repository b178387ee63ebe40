"""Documentation URLs built from package metadata."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version

from custom_error.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocLinker:
    """Formats documentation links for error types of one package.

    The template receives ``package``, ``version``, ``path`` (the dotted
    type path as a slash path) and ``anchor`` (the variant name).
    """

    package: str
    version: str
    template: str = Settings.model_fields["docs_url_template"].default

    @classmethod
    def from_distribution(cls, name: str, settings: Settings | None = None) -> DocLinker:
        """Read the installed version of distribution ``name`` once, at startup."""
        if settings is None:
            settings = Settings()
        try:
            dist_version = version(name)
        except PackageNotFoundError:
            logger.warning("Distribution %r is not installed; linking to 'latest' docs", name)
            dist_version = "latest"
        return cls(package=name, version=dist_version, template=settings.docs_url_template)

    def link(self, type_path: str, anchor: str) -> str:
        return self.template.format(
            package=self.package,
            version=self.version,
            path=type_path.replace(".", "/"),
            anchor=anchor,
        )

"""Detection of the site the CLI is run from."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TOOLSET = "gatsby"

# 'not dead' is not understood by the browserslist bundled with toolset v1
LEGACY_BROWSERS = ["> 1%", "last 2 versions", "IE >= 9"]
DEFAULT_BROWSERS = [">0.25%", "not dead"]


def _read_json(path: Path) -> dict[str, Any] | None:
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, json.JSONDecodeError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return None
    return data if isinstance(data, dict) else None


def is_local_site(directory: str | Path, toolset: str = DEFAULT_TOOLSET) -> bool:
    """Check whether a directory's package.json depends on the toolset."""
    package = _read_json(Path(directory) / "package.json")
    if package is None:
        return False

    for key in ("dependencies", "devDependencies"):
        deps = package.get(key)
        if isinstance(deps, dict) and deps.get(toolset):
            return True
    return False


def installed_toolset_version(
    directory: str | Path,
    toolset: str = DEFAULT_TOOLSET,
) -> str | None:
    """Read the toolset version installed in the site's node_modules."""
    package = _read_json(Path(directory) / "node_modules" / toolset / "package.json")
    if package is None:
        return None
    version = package.get("version")
    return version if isinstance(version, str) else None


def major_version(version: str | None) -> int | None:
    """Parse the major component of a version string."""
    if not version:
        return None
    try:
        return int(version.split(".")[0])
    except ValueError:
        return None


@dataclass(frozen=True)
class SiteInfo:
    """What the CLI knows about the current site."""

    directory: Path
    is_site: bool = False
    browserslist: list[str] = field(default_factory=lambda: list(DEFAULT_BROWSERS))
    use_yarn: bool = False
    toolset_version: str | None = None

    @classmethod
    def detect(
        cls,
        directory: str | Path | None = None,
        toolset: str = DEFAULT_TOOLSET,
    ) -> SiteInfo:
        """Inspect a directory (default: the working directory)."""
        root = Path(directory or ".").resolve()
        version = installed_toolset_version(root, toolset)

        if major_version(version) == 1:
            browsers = list(LEGACY_BROWSERS)
        else:
            browsers = list(DEFAULT_BROWSERS)

        info = cls(
            directory=root,
            is_site=is_local_site(root, toolset),
            browserslist=browsers,
            use_yarn=(root / "yarn.lock").exists(),
            toolset_version=version,
        )
        logger.debug(f"Detected site: {info}")
        return info

    def to_dict(self) -> dict[str, Any]:
        """Site fields merged into a command's arguments."""
        return {
            "directory": str(self.directory),
            "browserslist": list(self.browserslist),
        }

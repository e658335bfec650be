# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Sample host documents shared across tests."""

from __future__ import annotations

import json
from typing import Any, Final

HOST: Final[str] = "http://localhost:8080"
RENDER: Final[str] = "http://localhost:8060"
PROD_HOST: Final[str] = "https://www.khanacademy.org"
COMPONENT: Final[str] = "javascript/content-library-package/components/concept-thumbnail.jsx"
MAPPING_PATH: Final[str] = "/_kake/genfiles/js_path_to_pkgs/en/path_to_packages_prod.json"
MAPPING_URL: Final[str] = HOST + MAPPING_PATH

PACKAGES: Final[list[dict[str, Any]]] = [
    {"name": "shared.js", "url": "/genfiles/javascript/en/shared-0a1b.js", "dependencies": []},
    {"name": "react.js", "url": "/genfiles/javascript/en/react-2c3d.js", "dependencies": ["shared.js"]},
    {
        "name": "content-library.js",
        "url": "/genfiles/javascript/en/content-library-4e5f.js",
        "dependencies": ["react.js", "shared.js"],
    },
]

HOMEPAGE: Final[str] = (
    "<html><head>"
    "<script src='/genfiles/manifests/en/package-manifest-9f8e7d.js'></script>"
    "</head><body>home</body></html>"
)
MANIFEST_URL: Final[str] = HOST + "/genfiles/manifests/en/package-manifest-9f8e7d.js"


def manifest_text(packages: list[dict[str, Any]]) -> str:
    """Return manifest script text wrapping ``packages`` like the host does."""

    return (
        "window.KA_PACKAGE_MANIFEST = {"
        f'"javascript": {json.dumps(packages)}, '
        '"stylesheets": [{"name": "shared.css", "url": "/genfiles/shared.css", "dependencies": []}]};\n'
    )


def url_of(name: str) -> str:
    """Return the absolute URL of sample package ``name``."""

    return HOST + next(entry["url"] for entry in PACKAGES if entry["name"] == name)

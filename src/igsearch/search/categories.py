"""
Category resolution: which parts of an IG project each category searches.

The mapping is fixed:

    ================  =======================  ======================  =========  ==============
    Category          Location                 Extensions              Recursive  Filter
    ================  =======================  ======================  =========  ==============
    fsh               project root             .yaml                   no         SUSHI config
    fsh               input/                   .fsh                    yes
    inputResources    input/                   .json .xml .map .ttl    yes        resource
    inputResources    fsh-generated/           .json .xml .map .ttl    yes        resource
    inputPages        input/pagecontent/       all                     yes
    translations      input/translations/      all                     yes        text
    outputResources   output/                  .json                   yes        resource
    outputHtml        output/                  .html                   yes
    ================  =======================  ======================  =========  ==============

Only locations that exist on disk are returned.
"""

from __future__ import annotations

from functools import partial
from pathlib import Path

from ..core.config import RESOURCE_EXTENSIONS, SearchConfig
from ..core.types import Category, SearchLocation
from ..utils.logging_config import get_logger
from .sniffing import is_resource_file, is_text_file


def _is_named(name: str, path: Path) -> bool:
    return path.name == name


def build_locations(
    project_root: Path, category: Category, cfg: SearchConfig
) -> list[SearchLocation]:
    """Every location configured for ``category``, before the existence check."""
    resource_filter = partial(is_resource_file, sniff_chars=cfg.resource_sniff_chars)
    input_dir = project_root / "input"
    output_dir = project_root / cfg.output_dir_name

    if category is Category.FSH:
        return [
            SearchLocation(
                project_root,
                (".yaml",),
                recursive=False,
                file_filter=partial(_is_named, cfg.sushi_config_name),
            ),
            SearchLocation(input_dir, (".fsh",), recursive=True),
        ]

    if category is Category.INPUT_RESOURCES:
        locations = [
            SearchLocation(input_dir, RESOURCE_EXTENSIONS, True, resource_filter),
        ]
        generated = project_root / "fsh-generated"
        if generated.is_dir():
            locations.append(SearchLocation(generated, RESOURCE_EXTENSIONS, True, resource_filter))
        return locations

    if category is Category.INPUT_PAGES:
        return [SearchLocation(input_dir / "pagecontent", (), recursive=True)]

    if category is Category.TRANSLATIONS:
        text_filter = partial(
            is_text_file, text_extensions=cfg.text_extensions, sniff_bytes=cfg.text_sniff_bytes
        )
        return [SearchLocation(input_dir / "translations", (), True, text_filter)]

    if category is Category.OUTPUT_RESOURCES:
        return [SearchLocation(output_dir, (".json",), True, resource_filter)]

    if category is Category.OUTPUT_HTML:
        return [SearchLocation(output_dir, (".html",), recursive=True)]

    return []


def resolve_locations(
    project_root: Path | str, category: Category | str, cfg: SearchConfig | None = None
) -> list[SearchLocation]:
    """
    Resolve ``category`` to the search locations that currently exist.

    Args:
        project_root: The IG project folder
        category: A Category or its wire name; unknown names resolve to nothing
        cfg: Search configuration (defaults to ``SearchConfig()``)

    Returns:
        Existing locations in table order. An empty list is a normal result.
    """
    cfg = cfg or SearchConfig()
    logger = get_logger()

    cat = Category.parse(category)
    if cat is None:
        logger.debug(f"Unknown search category: {category}", category=str(category))
        return []

    root = Path(project_root)
    configured = build_locations(root, cat, cfg)
    existing = [loc for loc in configured if loc.path.exists()]
    logger.debug(
        f"Category {cat.value}: {len(configured)} configured paths, "
        f"{len(existing)} existing paths",
        category=cat.value,
    )
    return existing

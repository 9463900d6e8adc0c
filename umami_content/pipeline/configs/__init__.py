#!/usr/bin/env python3
"""
Seeder configuration modules.

This package contains declarative configurations for the seeding pipeline:
- content_configs: CSV import steps, editors and block content definitions
- seeder_config: runtime options loadable from YAML
"""

from umami_content.pipeline.configs.content_configs import (
    ARTICLES,
    BLOCK_CONTENT,
    CONTENT_IMPORTS,
    EDITORS,
    PAGES,
    PRESS_RELEASES,
    BlockContentDefinition,
    ContentImportConfig,
    ImageSpec,
    LinkSpec,
)
from umami_content.pipeline.configs.seeder_config import RowErrorPolicy, SeederConfig

__all__ = [
    "ARTICLES",
    "BLOCK_CONTENT",
    "CONTENT_IMPORTS",
    "EDITORS",
    "PAGES",
    "PRESS_RELEASES",
    "BlockContentDefinition",
    "ContentImportConfig",
    "ImageSpec",
    "LinkSpec",
    "RowErrorPolicy",
    "SeederConfig",
]

#!/usr/bin/env python3
"""
content_configs.py
------------------

Static seed definitions for the demo content import.

This module defines:
- ContentImportConfig objects for the CSV driven steps
  (articles, press releases, pages)
- The fixed editor accounts
- The three block content instances with their fixed uuids
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

from umami_content.database.models import NodeBundle


@dataclass(frozen=True)
class ContentImportConfig:
    """
    Configuration for one CSV driven import step.

    Attributes:
        name: Step name used in logs and stats (e.g. "articles")
        bundle: Bundle of the created content records
        csv_file: CSV file name inside the content directory
        body_dir: Directory of HTML body fragments inside the content directory
        supports_tags: Whether the 'tags' column is mapped
        supports_image: Whether the 'image' and 'alt' columns are mapped
    """
    name: str
    bundle: str
    csv_file: str
    body_dir: str
    supports_tags: bool = False
    supports_image: bool = False


ARTICLES = ContentImportConfig(
    name="articles",
    bundle=NodeBundle.ARTICLE.value,
    csv_file="articles.csv",
    body_dir="article_body",
    supports_tags=True,
    supports_image=True,
)

PRESS_RELEASES = ContentImportConfig(
    name="press_releases",
    bundle=NodeBundle.PRESS_RELEASE.value,
    csv_file="press-releases.csv",
    body_dir="prs",
)

PAGES = ContentImportConfig(
    name="pages",
    bundle=NodeBundle.PAGE.value,
    csv_file="pages.csv",
    body_dir="page_body",
)

CONTENT_IMPORTS: Tuple[ContentImportConfig, ...] = (ARTICLES, PRESS_RELEASES, PAGES)

# Images of articles and block content live here, inside the content directory
IMAGES_DIR = "images"

TAGS_VOCABULARY = "tags"

EDITORS: Tuple[str, ...] = ("Margaret Hopper", "Grace Hamilton")


# ========================================
# Block Content
# ========================================

@dataclass(frozen=True)
class LinkSpec:
    """Internal link to a content record looked up by exact title."""
    target_title: str
    title: str


@dataclass(frozen=True)
class ImageSpec:
    """Image file (inside the images directory) with its alt text."""
    filename: str
    alt: str


@dataclass(frozen=True)
class BlockContentDefinition:
    """
    A fixed block content instance.

    Attributes:
        machine_name: Identifier used in logs
        uuid: Fixed uuid of the instance
        info: Administrative label
        type: Block type
        field_title: Displayed title
        link: Link to an existing content record
        summary: Short summary
        image: Image with alt text
        disclaimer: Disclaimer text (formatted)
        copyright: Copyright text (formatted)
    """
    machine_name: str
    uuid: str
    info: str
    type: str
    field_title: Optional[str] = None
    link: Optional[LinkSpec] = None
    summary: Optional[str] = None
    image: Optional[ImageSpec] = None
    disclaimer: Optional[str] = None
    copyright: Optional[str] = None


BLOCK_CONTENT: List[BlockContentDefinition] = [
    BlockContentDefinition(
        machine_name="umami_recipes_banner",
        uuid="4c7d58a3-a45d-412d-9068-259c57e40541",
        info="B&B Banner",
        type="banner_block",
        field_title="Spend less time on operations, more time on your business",
        link=LinkSpec(
            target_title="Dynamic intellectual capital",
            title="Find your solution today",
        ),
        summary=(
            "Simplify your operations by combining point of sale, capital and "
            "payroll all in one place. Find your solution today."
        ),
        image=ImageSpec(
            filename="banner.png",
            alt=(
                "Simplify your operations by combining point of sale, capital "
                "and payroll all in one place"
            ),
        ),
    ),
    BlockContentDefinition(
        machine_name="umami_disclaimer",
        uuid="9b4dcd67-99f3-48d0-93c9-2c46648b29de",
        info="B&B disclaimer",
        type="disclaimer_block",
        disclaimer=(
            "<strong>Bread & Butter</strong> is a fictional organization "
            "for illustrative purposes only."
        ),
        copyright="&copy; 2018 Terms & Conditions",
    ),
    BlockContentDefinition(
        machine_name="umami_footer_promo",
        uuid="924ab293-8f5f-45a1-9c7f-2423ae61a241",
        info="B&B footer promo",
        type="footer_promo_block",
        field_title="Bread & Butter",
        link=LinkSpec(
            target_title="About Bread & Butter",
            title="Find your solution",
        ),
        summary=(
            "Simplify your operations by combining point of sale, capital and "
            "payroll all in one place."
        ),
        image=ImageSpec(
            filename="bread_butter_logowhite.png",
            alt="B&B - Find your solution",
        ),
    ),
]

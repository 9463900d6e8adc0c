"""
Seeding pipeline: the ContentSeeder and its configuration.
"""
from umami_content.pipeline.seeder import ContentSeeder, derive_email

__all__ = ["ContentSeeder", "derive_email"]

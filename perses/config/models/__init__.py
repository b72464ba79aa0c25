"""Configuration model exports.

    from perses.config.models import Database, File, FileExtension
"""

from perses.config.models.database import Database, File, FileExtension

__all__ = ["Database", "File", "FileExtension"]

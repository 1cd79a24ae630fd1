from .article_assembler import assemble_article
from .collection_builder import CollectionBuilder, discover_files

__all__ = ["CollectionBuilder", "assemble_article", "discover_files"]

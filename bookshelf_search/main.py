# bookshelf_search/main.py
import logging
import sys
from typing import List, Optional

from bookshelf_search.config import Settings, load_settings
from bookshelf_search.database.elastic import get_elasticsearch_client
from bookshelf_search.errors import BookshelfError
from bookshelf_search.logging_setup import configure_logging
from bookshelf_search.models.book import SAMPLE_BOOK, Book
from bookshelf_search.services.documents import insert_doc
from bookshelf_search.services.index_init import elastic_init
from bookshelf_search.services.mapping_inspector import get_index_mapping
from bookshelf_search.services.search import print_books, search_books

logger = logging.getLogger(__name__)


def run(settings: Settings) -> List[Book]:
    """
    Initialize the indexes, then search and print the matching books.
    Any BookshelfError is left to the caller.
    """
    # ------------------ Connect ------------------
    es = get_elasticsearch_client(settings)

    # ------------------ Ensure indexes ------------------
    elastic_init(es, settings)

    # ------------------ Optional steps ------------------
    if settings.show_mapping:
        get_index_mapping(es, settings.primary_index)

    if settings.insert_sample:
        insert_doc(es, settings, dict(SAMPLE_BOOK))

    # ------------------ Search ------------------
    books = search_books(es, settings)
    print_books(books)
    return books


def main(settings: Optional[Settings] = None) -> int:
    try:
        if settings is None:
            settings = load_settings()
        configure_logging(settings.log_level)
        run(settings)
    except BookshelfError as e:
        configure_logging()
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# bookshelf_search/services/index_init.py
import logging
from typing import List, NamedTuple

from elasticsearch import Elasticsearch

from bookshelf_search.config import Settings
from bookshelf_search.database.elastic import CLIENT_ERRORS, create_index
from bookshelf_search.database.mapping import load_mapping_file
from bookshelf_search.errors import IndexCreationError, ServiceQueryError

logger = logging.getLogger(__name__)

STARTED = "STARTED"
CREATED = "CREATED"


class IndexStatus(NamedTuple):
    index: str
    status: str


def elastic_init(es: Elasticsearch, settings: Settings) -> List[IndexStatus]:
    """
    Make sure every configured index exists, creating missing ones from
    their mapping file. Stops at the first index that cannot be created.
    """
    results = []
    for index in settings.index_names:
        try:
            exists = bool(es.indices.exists(index=index))
        except CLIENT_ERRORS as e:
            raise ServiceQueryError(f"Error checking index [{index}]: {e}") from e

        if exists:
            print(f"Index [{index}]: STARTED")
            results.append(IndexStatus(index, STARTED))
            continue

        print(f"Initializing Index [{index}] with mapping...")
        mapping = load_mapping_file(index, settings.mapping_dir, settings.mapping_template)
        if not mapping:
            logger.warning("No mapping file for index [%s], creating it with service defaults", index)

        try:
            created = create_index(es, index, mapping)
        except CLIENT_ERRORS as e:
            raise IndexCreationError(index, str(e)) from e

        if not created.get("acknowledged"):
            raise IndexCreationError(index, "request not acknowledged")

        print("Index created successfully")
        results.append(IndexStatus(index, CREATED))

    return results

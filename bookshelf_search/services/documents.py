# bookshelf_search/services/documents.py
from typing import Any, Dict

from elasticsearch import Elasticsearch

from bookshelf_search.config import Settings
from bookshelf_search.database.elastic import CLIENT_ERRORS, index_doc
from bookshelf_search.errors import DocumentInsertError


def insert_doc(es: Elasticsearch, settings: Settings, doc: Dict[str, Any]) -> str:
    """Index one document into the first configured index and return its id."""
    try:
        result = index_doc(es, settings.primary_index, doc)
    except CLIENT_ERRORS as e:
        raise DocumentInsertError(f"Error inserting the document: {e}") from e

    print("Document inserted successfully")
    return result.get("_id", "")

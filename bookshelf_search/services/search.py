# bookshelf_search/services/search.py
import logging
from typing import Any, Dict, Iterable, List, Optional

from elasticsearch import Elasticsearch
from pydantic import ValidationError

from bookshelf_search.config import Settings
from bookshelf_search.database.elastic import CLIENT_ERRORS, response_body
from bookshelf_search.errors import SearchError
from bookshelf_search.models.book import Book

logger = logging.getLogger(__name__)


def build_should_query(field: str, values: Iterable[str]) -> Dict[str, Any]:
    """
    Disjunctive bool query: a document matches when at least one of the
    `match` clauses on `field` does.
    """
    return {"bool": {"should": [{"match": {field: value}} for value in values]}}


def decode_hits(hits: Iterable[Dict[str, Any]]) -> List[Book]:
    """
    Decode hit sources into Books, keeping the order the service returned.
    Hits whose source does not fit the Book shape are logged and skipped.
    """
    books = []
    for hit in hits:
        try:
            books.append(Book.model_validate(hit.get("_source")))
        except ValidationError as e:
            logger.debug("Skipping hit %s: %s", hit.get("_id"), e)
    return books


def search_books(es: Elasticsearch, settings: Settings, query: Optional[Dict[str, Any]] = None) -> List[Book]:
    if query is None:
        query = build_should_query(settings.search_field, settings.search_terms)

    try:
        response = es.search(index=settings.index_names, query=query, pretty=True)
    except CLIENT_ERRORS as e:
        raise SearchError(f"Error searching: {e}") from e

    body = response_body(response)
    hits = body.get("hits", {}).get("hits", [])
    logger.info("Search returned %d hit(s)", len(hits))
    return decode_hits(hits)


def print_books(books: Iterable[Book]) -> None:
    for book in books:
        print(book)

# bookshelf_search/services/mapping_inspector.py
import json
from typing import Any, Dict

from elasticsearch import Elasticsearch

from bookshelf_search.database.elastic import CLIENT_ERRORS, response_body
from bookshelf_search.errors import MappingFetchError


def get_index_mapping(es: Elasticsearch, index: str) -> Dict[str, Any]:
    """Fetch and print the live mapping of one index."""
    try:
        response = es.indices.get_mapping(index=index)
    except CLIENT_ERRORS as e:
        raise MappingFetchError(f"Error getting the mapping: {e}") from e

    mapping = response_body(response).get(index, {})
    print(f"Mapping for index '{index}':")
    print(json.dumps(mapping, indent=2, ensure_ascii=False))
    return mapping

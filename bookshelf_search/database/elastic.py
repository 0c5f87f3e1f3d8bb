# bookshelf_search/database/elastic.py
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

from elasticsearch import ApiError, Elasticsearch, TransportError

from bookshelf_search.config import Settings
from bookshelf_search.errors import ConnectionError

logger = logging.getLogger(__name__)

# errors raised by the client for a failed request
CLIENT_ERRORS = (ApiError, TransportError)

JSON_HEADERS = {"accept": "application/json", "content-type": "application/json"}


def get_elasticsearch_client(settings: Settings) -> Elasticsearch:
    """
    Build the client handle used by every operation of a run.

    Node discovery is off unless ELASTIC_SNIFF is set, so the client only
    ever talks to the configured URL.
    """
    kwargs: Dict[str, Any] = {}
    if settings.elastic_username and settings.elastic_password:
        kwargs["basic_auth"] = (settings.elastic_username, settings.elastic_password)

    sniff = settings.elastic_sniff
    try:
        es = Elasticsearch(
            [settings.elastic_url],
            verify_certs=settings.elastic_verify_ssl,
            sniff_on_start=sniff,
            sniff_before_requests=sniff,
            sniff_on_node_failure=sniff,
            **kwargs,
        )
    except (ValueError, TypeError) as e:
        raise ConnectionError(f"Error creating the client: {e}") from e

    if settings.elastic_healthcheck and not es.ping():
        raise ConnectionError(f"Error creating the client: no Elasticsearch node available at {settings.elastic_url}")

    logger.info("Elasticsearch client ready for %s", settings.elastic_url)
    return es


def response_body(response: Any) -> Any:
    """Return the decoded body of a client response (or the value itself)."""
    return getattr(response, "body", response)


def create_index(es: Elasticsearch, index_name: str, mapping: Optional[bytes] = None) -> Dict[str, Any]:
    """
    Create `index_name` with the raw mapping blob as request body.
    The blob is forwarded verbatim; the service validates it.
    """
    response = es.perform_request(
        "PUT",
        f"/{quote(index_name, safe='')}",
        headers=JSON_HEADERS,
        body=mapping or None,
    )
    return response_body(response)


def index_doc(es: Elasticsearch, index_name: str, body: Dict[str, Any]) -> Dict[str, Any]:
    response = es.index(index=index_name, document=body)
    return response_body(response)

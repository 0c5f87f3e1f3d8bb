from unittest.mock import Mock

from elasticsearch import ConnectionError as TransportConnectionError
import pytest

from bookshelf_search.config import Settings
from bookshelf_search.errors import DocumentInsertError, MappingFetchError
from bookshelf_search.models.book import SAMPLE_BOOK
from bookshelf_search.services.documents import insert_doc
from bookshelf_search.services.mapping_inspector import get_index_mapping

from fakes import FakeElasticsearch


class TestInsertDoc:
    def test_document_goes_to_first_index(self, capsys):
        settings = Settings(index_names=["books", "archive"])
        es = FakeElasticsearch()

        doc_id = insert_doc(es, settings, dict(SAMPLE_BOOK))

        assert doc_id == "1"
        assert es.documents == [("books", "1", SAMPLE_BOOK)]
        assert capsys.readouterr().out.strip() == "Document inserted successfully"

    def test_insert_failure_is_fatal(self, settings, capsys):
        es = FakeElasticsearch()
        es.index = Mock(side_effect=TransportConnectionError("connection refused"))

        with pytest.raises(DocumentInsertError):
            insert_doc(es, settings, {"title": "T", "author": "A"})
        assert "Document inserted successfully" not in capsys.readouterr().out


class TestMappingInspector:
    def test_prints_and_returns_live_mapping(self, capsys):
        es = FakeElasticsearch(existing=["books"])
        es.indices.mappings["books"] = {"properties": {"author": {"type": "text"}}}

        mapping = get_index_mapping(es, "books")

        assert mapping == {"mappings": {"properties": {"author": {"type": "text"}}}}
        out = capsys.readouterr().out
        assert out.startswith("Mapping for index 'books':")
        assert '"author"' in out

    def test_fetch_failure_is_fatal(self):
        es = FakeElasticsearch()
        es.indices.get_mapping = Mock(side_effect=TransportConnectionError("connection refused"))

        with pytest.raises(MappingFetchError):
            get_index_mapping(es, "books")

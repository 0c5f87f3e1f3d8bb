# bookshelf_search/config.py
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError, field_validator

from bookshelf_search.errors import ConfigurationError

# load .env located at the project root
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ENV_PATH = os.path.join(BASE_DIR, ".env")

DEFAULT_ELASTIC_URL = "http://127.0.0.1:9200"
DEFAULT_INDEXES = "books"
DEFAULT_MAPPING_TEMPLATE = "mapping_{}.json"
DEFAULT_SEARCH_FIELD = "author"
DEFAULT_SEARCH_TERMS = "Guilherme Gonçalves,Zachary Tanga"

TRUTHY = ("true", "1", "yes")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY


def _split(value: str) -> List[str]:
    return [part.strip() for part in value.split(",")]


class Settings(BaseModel):
    elastic_url: str = DEFAULT_ELASTIC_URL
    elastic_username: str = ""
    elastic_password: str = ""
    elastic_verify_ssl: bool = False
    elastic_sniff: bool = False
    elastic_healthcheck: bool = True

    index_names: List[str] = [DEFAULT_INDEXES]
    mapping_dir: str = "."
    mapping_template: str = DEFAULT_MAPPING_TEMPLATE

    search_field: str = DEFAULT_SEARCH_FIELD
    search_terms: List[str] = _split(DEFAULT_SEARCH_TERMS)

    show_mapping: bool = False
    insert_sample: bool = False

    log_level: str = "INFO"

    @field_validator("index_names")
    @classmethod
    def _check_index_names(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one index name is required")
        if any(not name.strip() for name in value):
            raise ValueError("index names must be non-empty")
        return value

    @field_validator("mapping_template")
    @classmethod
    def _check_template(cls, value: str) -> str:
        if "{}" not in value:
            raise ValueError("mapping template must contain '{}' for the index name")
        return value

    @field_validator("search_terms")
    @classmethod
    def _check_terms(cls, value: List[str]) -> List[str]:
        terms = [term for term in value if term]
        if not terms:
            raise ValueError("at least one search term is required")
        return terms

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @property
    def primary_index(self) -> str:
        return self.index_names[0]


def load_settings(env_path: Optional[str] = ENV_PATH) -> Settings:
    """
    Build Settings from the environment. Values in `.env` never override
    variables already set in the process environment.
    """
    if env_path:
        load_dotenv(env_path)

    try:
        return Settings(
            elastic_url=os.getenv("ELASTIC_URL", DEFAULT_ELASTIC_URL),
            elastic_username=os.getenv("ELASTIC_USERNAME", ""),
            elastic_password=os.getenv("ELASTIC_PASSWORD", ""),
            elastic_verify_ssl=_flag("ELASTIC_VERIFY_SSL"),
            elastic_sniff=_flag("ELASTIC_SNIFF"),
            elastic_healthcheck=_flag("ELASTIC_HEALTHCHECK", "true"),
            index_names=_split(os.getenv("BOOKSHELF_INDEXES", DEFAULT_INDEXES)),
            mapping_dir=os.getenv("BOOKSHELF_MAPPING_DIR", "."),
            mapping_template=os.getenv("BOOKSHELF_MAPPING_TEMPLATE", DEFAULT_MAPPING_TEMPLATE),
            search_field=os.getenv("BOOKSHELF_SEARCH_FIELD", DEFAULT_SEARCH_FIELD),
            search_terms=_split(os.getenv("BOOKSHELF_SEARCH_TERMS", DEFAULT_SEARCH_TERMS)),
            show_mapping=_flag("BOOKSHELF_SHOW_MAPPING"),
            insert_sample=_flag("BOOKSHELF_INSERT_SAMPLE"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

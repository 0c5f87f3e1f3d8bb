# bookshelf_search/models/book.py
from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    model_config = ConfigDict(extra="ignore", strict=True)

    title: str = Field(..., examples=["Elasticsearch: The Definitive Guide"])
    author: str = Field(..., examples=["Clinton Gormley and Zachary Tong"])

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"


# literal document used by the optional insert path
SAMPLE_BOOK = {
    "title": "Elasticsearch: The Definitive Guide",
    "author": "Clinton Gormley and Zachary Tong",
}

"""JSON catalog schema for caller-supplied document categories."""

from pydantic import BaseModel, ConfigDict, Field

from docvalidator.categories.models import DocumentCategory


class CategoryDefinition(BaseModel):
    """One category entry of a JSON catalog file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    id: str = Field(min_length=1)
    expects_face: bool = False
    expects_document_edges: bool = True
    keyword_groups: list[list[str]] = Field(default_factory=list)
    minimum_text_density: float = Field(default=0.05, ge=0.0, le=1.0)
    expected_patterns: list[str] = Field(default_factory=list)

    def to_category(self) -> DocumentCategory:
        return DocumentCategory(
            name=self.name,
            id=self.id,
            expects_face=self.expects_face,
            expects_document_edges=self.expects_document_edges,
            keyword_groups=self.keyword_groups,
            minimum_text_density=self.minimum_text_density,
            expected_patterns=self.expected_patterns,
        )


class CategoryCatalog(BaseModel):
    """Top-level JSON catalog: ``{"categories": [...]}``."""

    model_config = ConfigDict(extra="forbid")

    categories: list[CategoryDefinition] = Field(default_factory=list)

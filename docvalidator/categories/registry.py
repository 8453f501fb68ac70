import json
from collections.abc import Iterable, Iterator
from pathlib import Path

from pydantic import ValidationError

from docvalidator.categories.models import DocumentCategory
from docvalidator.categories.presets import ALL_BUSINESS, ALL_INDIVIDUAL
from docvalidator.categories.schema import CategoryCatalog
from docvalidator.logging.logger import Log
from docvalidator.validation.exceptions import CategoryError


class CategoryRegistry:
    """Ordered collection of document categories keyed by unique id."""

    def __init__(self, categories: Iterable[DocumentCategory] = ()) -> None:
        self._categories: dict[str, DocumentCategory] = {}
        for category in categories:
            self.register(category)

    @classmethod
    def with_presets(cls) -> "CategoryRegistry":
        """Create a registry holding every built-in category."""
        return cls([*ALL_INDIVIDUAL, *ALL_BUSINESS])

    def register(self, category: DocumentCategory) -> None:
        """Add a category.

        Raises:
            CategoryError: if a category with the same id is already registered.
        """
        if category.id in self._categories:
            raise CategoryError(f"Duplicate category id '{category.id}'")
        self._categories[category.id] = category

    def get(self, category_id: str) -> DocumentCategory:
        category = self._categories.get(category_id)
        if category is None:
            raise CategoryError(
                f"Unknown category '{category_id}'. Choose from: {self.ids()}"
            )
        return category

    def ids(self) -> list[str]:
        return list(self._categories)

    def load_json(self, path: Path) -> list[DocumentCategory]:
        """Register every category from a JSON catalog file.

        The file holds either ``{"categories": [...]}`` or a bare list of
        category objects.

        Returns:
            The categories added, in file order.

        Raises:
            CategoryError: if the file cannot be read, is not valid JSON, fails
                schema validation, or repeats an existing id.
        """
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CategoryError(f"Failed to read category catalog: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise CategoryError(f"Invalid JSON in category catalog: {exc}") from exc

        if isinstance(raw, list):
            raw = {"categories": raw}
        try:
            catalog = CategoryCatalog.model_validate(raw)
        except ValidationError as exc:
            raise CategoryError(f"Invalid category catalog {path}: {exc}") from exc

        added = [definition.to_category() for definition in catalog.categories]
        for category in added:
            self.register(category)
        Log.info("Loaded category catalog", path=path, count=len(added))
        return added

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._categories

    def __iter__(self) -> Iterator[DocumentCategory]:
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)

from collections.abc import Iterable
from dataclasses import dataclass, field


def _freeze_groups(groups: Iterable[Iterable[str]]) -> tuple[tuple[str, ...], ...]:
    return tuple(tuple(group) for group in groups)


@dataclass(frozen=True)
class DocumentCategory:
    """A document type the user claims an image depicts.

    Adding a new document type means constructing a new instance; nothing in
    the matcher, scoring engine or pipeline needs to change.

    Attributes:
        name: Display name shown in UI or logs, e.g. "Driver's License".
        id: Stable identifier, unique within a registry.
        expects_face: Whether a face/photo is expected on the document.
        expects_document_edges: Whether a rectangular document outline is expected.
        keyword_groups: OR of AND-groups. Every keyword of a group must appear
            (case-insensitive) for that group to match; any matching group
            counts as a keyword hit. Empty means no keyword requirement.
        minimum_text_density: Expected text density in [0, 1]. Not normalized.
        expected_patterns: Regex patterns searched (case-insensitive, unanchored)
            in the recognized text. Empty means no pattern requirement.
    """

    name: str
    id: str
    expects_face: bool = False
    expects_document_edges: bool = True
    keyword_groups: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    minimum_text_density: float = 0.05
    expected_patterns: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # lists supplied by callers are frozen so instances stay shareable
        object.__setattr__(self, "keyword_groups", _freeze_groups(self.keyword_groups))
        object.__setattr__(self, "expected_patterns", tuple(self.expected_patterns))

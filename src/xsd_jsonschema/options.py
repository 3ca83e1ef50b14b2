"""Conversion options and JSON Schema dialect definitions."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Mapping


class SchemaDialect(Enum):
    """JSON Schema dialects the converter can emit."""

    DRAFT_07 = "draft-07"
    DRAFT_2020_12 = "2020-12"


@dataclass(frozen=True)
class DialectConfig:
    """Dialect-specific output settings."""

    schema_uri: str
    definitions_key: str  # "$defs" or "definitions"
    definitions_ref: str  # prefix for "$ref" values

    def ref(self, type_name: str) -> str:
        """Build a reference into the definitions container."""
        return f"{self.definitions_ref}{type_name}"


DIALECT_CONFIGS: dict[SchemaDialect, DialectConfig] = {
    SchemaDialect.DRAFT_2020_12: DialectConfig(
        schema_uri="https://json-schema.org/draft/2020-12/schema",
        definitions_key="$defs",
        definitions_ref="#/$defs/",
    ),
    SchemaDialect.DRAFT_07: DialectConfig(
        schema_uri="http://json-schema.org/draft-07/schema#",
        definitions_key="definitions",
        definitions_ref="#/definitions/",
    ),
}


@dataclass
class ConvertOptions:
    """Options shared by schema emission and array path derivation.

    Attributes:
        array_element_names: Element names treated as arrays when they are
            unbounded and ``treat_unbounded_as_array`` is off.
        treat_unbounded_as_array: Treat every unbounded sequence element as
            an array, regardless of its name.
        show_origin_types: Annotate emitted nodes with ``xsdOriginType``.
        type_mappings: Entries merged over the built-in primitive table.
        schema_dialect: JSON Schema dialect of the output document.
    """

    array_element_names: tuple[str, ...] = ()
    treat_unbounded_as_array: bool = False
    show_origin_types: bool = False
    type_mappings: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    schema_dialect: SchemaDialect = SchemaDialect.DRAFT_2020_12

    def __post_init__(self) -> None:
        self.array_element_names = tuple(self.array_element_names)
        if not isinstance(self.schema_dialect, SchemaDialect):
            self.schema_dialect = SchemaDialect(self.schema_dialect)

    @property
    def dialect(self) -> DialectConfig:
        return DIALECT_CONFIGS[self.schema_dialect]

    def is_array_name(self, name: str) -> bool:
        return name in self.array_element_names

    @classmethod
    def resolve(
        cls, options: ConvertOptions | Mapping[str, Any] | None = None
    ) -> ConvertOptions:
        """Normalize caller-supplied options.

        Args:
            options: None for defaults, an existing instance, or a mapping of
                field names to values.

        Returns:
            A ConvertOptions instance.

        Raises:
            TypeError: If the mapping contains unknown option names.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"Unknown conversion options: {sorted(unknown)}")
        return cls(**dict(options))

"""Configuration classes for escapist.

Each escape context is configured by a small immutable dataclass that is
built once per call (or once per application) and never mutated. Enum
members select the notation and the escape level; validation happens in
``__post_init__`` so that an invalid configuration is rejected before any
text is scanned.
"""

import json
from dataclasses import dataclass, fields, replace
from enum import Enum, IntEnum
from typing import Any, ClassVar, Dict, List, Type, TypeVar

from .errors import ConfigValidationError, InvalidArgumentError

DEFAULT_URI_ENCODING = "UTF-8"

_ConfigT = TypeVar("_ConfigT", bound="_EscapeConfigBase")


class EscapeContext(Enum):
    """Output contexts supported by escapist."""

    HTML = "html"
    URI = "uri"
    PROPERTIES = "properties"
    JSON = "json"
    CSV = "csv"
    XML = "xml"
    JAVASCRIPT = "javascript"


class _EscapeLevel(IntEnum):
    """Base for escape level enums: higher levels escape a superset of lower ones."""

    @classmethod
    def for_level(cls, level: int) -> Any:
        """Return the enum constant for a numeric level.

        Raises:
            InvalidArgumentError: If no constant is defined for ``level``
        """
        if isinstance(level, cls):
            return level
        try:
            return cls(level)
        except ValueError as e:
            raise InvalidArgumentError(
                f"No escape level enum constant defined for level: {level}",
                argument="level",
            ) from e


class HtmlEscapeLevel(_EscapeLevel):
    """How aggressively HTML text is escaped."""

    LEVEL_0_ONLY_MARKUP_SIGNIFICANT_EXCEPT_APOS = 0
    LEVEL_1_ONLY_MARKUP_SIGNIFICANT = 1
    LEVEL_2_ALL_NON_ASCII_PLUS_MARKUP_SIGNIFICANT = 2
    LEVEL_3_ALL_NON_ALPHANUMERIC = 3
    LEVEL_4_ALL_CHARACTERS = 4


class HtmlEscapeType(Enum):
    """Notation used for escaped HTML characters.

    Attributes:
        use_ncrs: Prefer named character references when one exists
        use_hexa: Fall back to hexadecimal (``&#x..;``) instead of decimal
        use_html5: Use the HTML5 named reference set instead of HTML4
    """

    HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL = (True, False, False)
    HTML4_NAMED_REFERENCES_DEFAULT_TO_HEXA = (True, True, False)
    HTML5_NAMED_REFERENCES_DEFAULT_TO_DECIMAL = (True, False, True)
    HTML5_NAMED_REFERENCES_DEFAULT_TO_HEXA = (True, True, True)
    DECIMAL_REFERENCES = (False, False, False)
    HEXADECIMAL_REFERENCES = (False, True, False)

    def __init__(self, use_ncrs: bool, use_hexa: bool, use_html5: bool) -> None:
        self.use_ncrs = use_ncrs
        self.use_hexa = use_hexa
        self.use_html5 = use_html5


class UriEscapeType(Enum):
    """URI part a value is escaped for (RFC 3986)."""

    PATH = "path"
    PATH_SEGMENT = "path_segment"
    QUERY_PARAM = "query_param"
    FRAGMENT_ID = "fragment_id"


class PropertiesRole(Enum):
    """Whether a Java ``.properties`` text is a key or a value."""

    KEY = "key"
    VALUE = "value"


class PropertiesEscapeLevel(_EscapeLevel):
    """How aggressively ``.properties`` keys and values are escaped."""

    LEVEL_1_BASIC_ESCAPE_SET = 1
    LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET = 2
    LEVEL_3_ALL_NON_ALPHANUMERIC = 3
    LEVEL_4_ALL_CHARACTERS = 4


class JsonEscapeType(Enum):
    """Notation used for escaped JSON characters."""

    SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA = "sec"
    UHEXA = "uhexa"

    @property
    def use_secs(self) -> bool:
        return self is JsonEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA


class JsonEscapeLevel(_EscapeLevel):
    """How aggressively JSON string content is escaped."""

    LEVEL_1_BASIC_ESCAPE_SET = 1
    LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET = 2
    LEVEL_3_ALL_NON_ALPHANUMERIC = 3
    LEVEL_4_ALL_CHARACTERS = 4


class XmlVersion(Enum):
    """XML version, selecting the allowed and restricted character sets."""

    XML10 = "1.0"
    XML11 = "1.1"


class XmlEscapeType(Enum):
    """Notation used for escaped XML characters.

    Attributes:
        use_cers: Prefer the five predefined character entity references
        use_hexa: Fall back to hexadecimal (``&#x..;``) instead of decimal
    """

    CHARACTER_ENTITY_REFERENCES_DEFAULT_TO_DECIMAL = (True, False)
    CHARACTER_ENTITY_REFERENCES_DEFAULT_TO_HEXA = (True, True)
    DECIMAL_REFERENCES = (False, False)
    HEXADECIMAL_REFERENCES = (False, True)

    def __init__(self, use_cers: bool, use_hexa: bool) -> None:
        self.use_cers = use_cers
        self.use_hexa = use_hexa


class XmlEscapeLevel(_EscapeLevel):
    """How aggressively XML text is escaped."""

    LEVEL_1_ONLY_MARKUP_SIGNIFICANT = 1
    LEVEL_2_ALL_NON_ASCII_PLUS_MARKUP_SIGNIFICANT = 2
    LEVEL_3_ALL_NON_ALPHANUMERIC = 3
    LEVEL_4_ALL_CHARACTERS = 4


class JavaScriptEscapeType(Enum):
    """Notation used for escaped JavaScript string characters.

    Attributes:
        use_secs: Prefer single escape characters such as ``\\n``
        use_xhexa: Use ``\\xHH`` for codepoints up to U+00FF
    """

    SINGLE_ESCAPE_CHARS_DEFAULT_TO_XHEXA_AND_UHEXA = (True, True)
    SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA = (True, False)
    XHEXA_DEFAULT_TO_UHEXA = (False, True)
    UHEXA = (False, False)

    def __init__(self, use_secs: bool, use_xhexa: bool) -> None:
        self.use_secs = use_secs
        self.use_xhexa = use_xhexa


class JavaScriptEscapeLevel(_EscapeLevel):
    """How aggressively JavaScript string content is escaped."""

    LEVEL_1_BASIC_ESCAPE_SET = 1
    LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET = 2
    LEVEL_3_ALL_NON_ALPHANUMERIC = 3
    LEVEL_4_ALL_CHARACTERS = 4


def _require_member(value: Any, enum_cls: Type[Enum], field_name: str) -> None:
    if not isinstance(value, enum_cls):
        raise ConfigValidationError(
            f"{field_name} must be a {enum_cls.__name__} member, got {value!r}",
            field_name=field_name,
            suggestions=[member.name for member in enum_cls],
        )


def _coerce_level(config: Any, enum_cls: Type[_EscapeLevel]) -> None:
    level = config.level
    if level is None or isinstance(level, bool) or not isinstance(level, int):
        raise ConfigValidationError(
            f"level must be a {enum_cls.__name__} member or int, got {level!r}",
            field_name="level",
            suggestions=[str(int(member)) for member in enum_cls],
        )
    try:
        coerced = enum_cls.for_level(level)
    except InvalidArgumentError as e:
        raise ConfigValidationError(
            str(e),
            field_name="level",
            suggestions=[str(int(member)) for member in enum_cls],
        ) from e
    object.__setattr__(config, "level", coerced)


class _EscapeConfigBase:
    """Serialization shared by all escape configurations."""

    context: ClassVar[EscapeContext]

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format, enums by name."""
        result: Dict[str, Any] = {"context": self.context.value}
        for config_field in fields(self):  # type: ignore[arg-type]
            value = getattr(self, config_field.name)
            result[config_field.name] = value.name if isinstance(value, Enum) else value
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def override(self: _ConfigT, **kwargs: Any) -> _ConfigT:
        """Create a new configuration with specific overrides."""
        return replace(self, **kwargs)  # type: ignore[type-var]

    @classmethod
    def from_dict(cls: Type[_ConfigT], data: Dict[str, Any]) -> _ConfigT:
        """Create configuration from dictionary.

        Enum fields accept member names; level fields also accept ints.
        Unknown keys are rejected.
        """
        known = {f.name: f for f in fields(cls)}  # type: ignore[arg-type]
        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key == "context":
                continue
            if key not in known:
                raise ConfigValidationError(
                    f"Unknown configuration field '{key}' for {cls.__name__}",
                    field_name=key,
                    suggestions=sorted(known),
                )
            default = known[key].default
            if isinstance(default, Enum) and isinstance(value, str):
                enum_cls = type(default)
                try:
                    value = enum_cls[value]
                except KeyError as e:
                    raise ConfigValidationError(
                        f"Unknown {enum_cls.__name__} member '{value}'",
                        field_name=key,
                        suggestions=[member.name for member in enum_cls],
                    ) from e
            values[key] = value
        return cls(**values)

    @classmethod
    def from_json(cls: Type[_ConfigT], json_str: str) -> _ConfigT:
        """Create configuration from JSON string."""
        return cls.from_dict(json.loads(json_str))


@dataclass(frozen=True)
class HtmlEscapeConfig(_EscapeConfigBase):
    """Configuration for HTML escaping."""

    escape_type: HtmlEscapeType = HtmlEscapeType.HTML5_NAMED_REFERENCES_DEFAULT_TO_DECIMAL
    level: HtmlEscapeLevel = HtmlEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_MARKUP_SIGNIFICANT

    context: ClassVar[EscapeContext] = EscapeContext.HTML

    def __post_init__(self) -> None:
        """Validate HTML configuration."""
        _require_member(self.escape_type, HtmlEscapeType, "escape_type")
        _coerce_level(self, HtmlEscapeLevel)

    @classmethod
    def html5(cls) -> "HtmlEscapeConfig":
        """HTML5 named references, markup-significant plus all non-ASCII."""
        return cls()

    @classmethod
    def html5_xml(cls) -> "HtmlEscapeConfig":
        """HTML5 named references, only the five XML-significant characters."""
        return cls(level=HtmlEscapeLevel.LEVEL_1_ONLY_MARKUP_SIGNIFICANT)

    @classmethod
    def html4(cls) -> "HtmlEscapeConfig":
        """HTML4 named references, markup-significant plus all non-ASCII."""
        return cls(escape_type=HtmlEscapeType.HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL)

    @classmethod
    def html4_xml(cls) -> "HtmlEscapeConfig":
        """HTML4 named references, only the five XML-significant characters."""
        return cls(
            escape_type=HtmlEscapeType.HTML4_NAMED_REFERENCES_DEFAULT_TO_DECIMAL,
            level=HtmlEscapeLevel.LEVEL_1_ONLY_MARKUP_SIGNIFICANT,
        )


@dataclass(frozen=True)
class UriEscapeConfig(_EscapeConfigBase):
    """Configuration for URI percent-encoding."""

    escape_type: UriEscapeType = UriEscapeType.PATH
    encoding: str = DEFAULT_URI_ENCODING

    context: ClassVar[EscapeContext] = EscapeContext.URI

    def __post_init__(self) -> None:
        """Validate URI configuration."""
        _require_member(self.escape_type, UriEscapeType, "escape_type")
        if self.encoding is None:
            raise ConfigValidationError(
                "Argument 'encoding' cannot be None", field_name="encoding"
            )
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ConfigValidationError(
                f"encoding must be a non-empty string, got {self.encoding!r}",
                field_name="encoding",
                suggestions=[DEFAULT_URI_ENCODING],
            )

    @property
    def plus_as_space(self) -> bool:
        """Whether ``+`` decodes to a space (query parameters only)."""
        return self.escape_type is UriEscapeType.QUERY_PARAM

    @classmethod
    def path(cls, encoding: str = DEFAULT_URI_ENCODING) -> "UriEscapeConfig":
        return cls(UriEscapeType.PATH, encoding)

    @classmethod
    def path_segment(cls, encoding: str = DEFAULT_URI_ENCODING) -> "UriEscapeConfig":
        return cls(UriEscapeType.PATH_SEGMENT, encoding)

    @classmethod
    def query_param(cls, encoding: str = DEFAULT_URI_ENCODING) -> "UriEscapeConfig":
        return cls(UriEscapeType.QUERY_PARAM, encoding)

    @classmethod
    def fragment_id(cls, encoding: str = DEFAULT_URI_ENCODING) -> "UriEscapeConfig":
        return cls(UriEscapeType.FRAGMENT_ID, encoding)


@dataclass(frozen=True)
class PropertiesEscapeConfig(_EscapeConfigBase):
    """Configuration for Java ``.properties`` escaping."""

    role: PropertiesRole = PropertiesRole.VALUE
    level: PropertiesEscapeLevel = PropertiesEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET

    context: ClassVar[EscapeContext] = EscapeContext.PROPERTIES

    def __post_init__(self) -> None:
        """Validate properties configuration."""
        _require_member(self.role, PropertiesRole, "role")
        _coerce_level(self, PropertiesEscapeLevel)

    @classmethod
    def value_minimal(cls) -> "PropertiesEscapeConfig":
        return cls(PropertiesRole.VALUE, PropertiesEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET)

    @classmethod
    def value(cls) -> "PropertiesEscapeConfig":
        return cls(PropertiesRole.VALUE)

    @classmethod
    def key_minimal(cls) -> "PropertiesEscapeConfig":
        return cls(PropertiesRole.KEY, PropertiesEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET)

    @classmethod
    def key(cls) -> "PropertiesEscapeConfig":
        return cls(PropertiesRole.KEY)


@dataclass(frozen=True)
class JsonEscapeConfig(_EscapeConfigBase):
    """Configuration for JSON string escaping."""

    escape_type: JsonEscapeType = JsonEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_UHEXA
    level: JsonEscapeLevel = JsonEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET

    context: ClassVar[EscapeContext] = EscapeContext.JSON

    def __post_init__(self) -> None:
        """Validate JSON configuration."""
        _require_member(self.escape_type, JsonEscapeType, "escape_type")
        _coerce_level(self, JsonEscapeLevel)

    @classmethod
    def minimal(cls) -> "JsonEscapeConfig":
        return cls(level=JsonEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET)

    @classmethod
    def default(cls) -> "JsonEscapeConfig":
        return cls()


@dataclass(frozen=True)
class XmlEscapeConfig(_EscapeConfigBase):
    """Configuration for XML 1.0 and XML 1.1 escaping."""

    version: XmlVersion = XmlVersion.XML10
    escape_type: XmlEscapeType = XmlEscapeType.CHARACTER_ENTITY_REFERENCES_DEFAULT_TO_DECIMAL
    level: XmlEscapeLevel = XmlEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_MARKUP_SIGNIFICANT

    context: ClassVar[EscapeContext] = EscapeContext.XML

    def __post_init__(self) -> None:
        """Validate XML configuration."""
        _require_member(self.version, XmlVersion, "version")
        _require_member(self.escape_type, XmlEscapeType, "escape_type")
        _coerce_level(self, XmlEscapeLevel)

    @classmethod
    def xml10_minimal(cls) -> "XmlEscapeConfig":
        """XML 1.0, only the five markup-significant characters."""
        return cls(level=XmlEscapeLevel.LEVEL_1_ONLY_MARKUP_SIGNIFICANT)

    @classmethod
    def xml10(cls) -> "XmlEscapeConfig":
        """XML 1.0, markup-significant plus all non-ASCII."""
        return cls()

    @classmethod
    def xml11_minimal(cls) -> "XmlEscapeConfig":
        return cls(XmlVersion.XML11, level=XmlEscapeLevel.LEVEL_1_ONLY_MARKUP_SIGNIFICANT)

    @classmethod
    def xml11(cls) -> "XmlEscapeConfig":
        return cls(XmlVersion.XML11)


@dataclass(frozen=True)
class JavaScriptEscapeConfig(_EscapeConfigBase):
    """Configuration for JavaScript string literal escaping."""

    escape_type: JavaScriptEscapeType = (
        JavaScriptEscapeType.SINGLE_ESCAPE_CHARS_DEFAULT_TO_XHEXA_AND_UHEXA
    )
    level: JavaScriptEscapeLevel = JavaScriptEscapeLevel.LEVEL_2_ALL_NON_ASCII_PLUS_BASIC_ESCAPE_SET

    context: ClassVar[EscapeContext] = EscapeContext.JAVASCRIPT

    def __post_init__(self) -> None:
        """Validate JavaScript configuration."""
        _require_member(self.escape_type, JavaScriptEscapeType, "escape_type")
        _coerce_level(self, JavaScriptEscapeLevel)

    @classmethod
    def minimal(cls) -> "JavaScriptEscapeConfig":
        return cls(level=JavaScriptEscapeLevel.LEVEL_1_BASIC_ESCAPE_SET)

    @classmethod
    def default(cls) -> "JavaScriptEscapeConfig":
        return cls()


@dataclass(frozen=True)
class CsvEscapeConfig(_EscapeConfigBase):
    """Configuration for CSV escaping. RFC 4180 quoting is the only mode."""

    context: ClassVar[EscapeContext] = EscapeContext.CSV


EscapeConfig = Any  # one of the *EscapeConfig dataclasses above

CONFIG_CLASSES: Dict[EscapeContext, Type[_EscapeConfigBase]] = {
    EscapeContext.HTML: HtmlEscapeConfig,
    EscapeContext.URI: UriEscapeConfig,
    EscapeContext.PROPERTIES: PropertiesEscapeConfig,
    EscapeContext.JSON: JsonEscapeConfig,
    EscapeContext.CSV: CsvEscapeConfig,
    EscapeContext.XML: XmlEscapeConfig,
    EscapeContext.JAVASCRIPT: JavaScriptEscapeConfig,
}


def config_from_dict(data: Dict[str, Any]) -> Any:
    """Rebuild an escape configuration from a dict carrying a ``context`` key.

    Args:
        data: Dictionary as produced by ``to_dict()``

    Returns:
        The matching configuration instance
    """
    context_name = data.get("context")
    try:
        context = EscapeContext(context_name)
    except ValueError as e:
        valid: List[str] = [context.value for context in EscapeContext]
        raise ConfigValidationError(
            f"Unknown escape context {context_name!r}",
            field_name="context",
            suggestions=valid,
        ) from e
    return CONFIG_CLASSES[context].from_dict(data)

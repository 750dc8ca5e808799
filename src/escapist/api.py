"""Generic escape API.

One ``escape`` / ``escape_to`` / ``unescape`` / ``unescape_to`` quartet serves
every context; the configuration object selects the engine.

Examples:
    >>> from escapist import HtmlEscapeConfig, UriEscapeConfig, escape, unescape
    >>> escape('<div class="A">', HtmlEscapeConfig.html5())
    '&lt;div class=&quot;A&quot;&gt;'
    >>> unescape("a+b", UriEscapeConfig.query_param())
    'a b'
"""

from types import ModuleType
from typing import Any, Dict, Optional, Sequence

from .csv import engine as csv_engine
from .engine.window import require_argument, require_writer
from .html import engine as html_engine
from .javascript import engine as javascript_engine
from .json import engine as json_engine
from .properties import engine as properties_engine
from .shared.config import CONFIG_CLASSES, EscapeContext
from .shared.errors import InvalidArgumentError
from .uri import engine as uri_engine
from .xml import engine as xml_engine

ENGINES: Dict[EscapeContext, ModuleType] = {
    EscapeContext.HTML: html_engine,
    EscapeContext.URI: uri_engine,
    EscapeContext.PROPERTIES: properties_engine,
    EscapeContext.JSON: json_engine,
    EscapeContext.CSV: csv_engine,
    EscapeContext.XML: xml_engine,
    EscapeContext.JAVASCRIPT: javascript_engine,
}


def engine_for(config: Any) -> ModuleType:
    """Return the engine module handling ``config``.

    Raises:
        InvalidArgumentError: If config is None or not an escape configuration
    """
    require_argument(config, "config")
    context = getattr(config, "context", None)
    if not isinstance(context, EscapeContext) or not isinstance(
        config, CONFIG_CLASSES[context]
    ):
        raise InvalidArgumentError(
            f"Argument 'config' must be an escape configuration, got {type(config).__name__}",
            argument="config",
        )
    return ENGINES[context]


def escape(text: Optional[str], config: Any) -> Optional[str]:
    """Escape ``text`` for the context selected by ``config``.

    Args:
        text: Text to escape, or None
        config: One of the ``*EscapeConfig`` objects

    Returns:
        None for None input, ``text`` itself when nothing needed escaping,
        otherwise the escaped text
    """
    return engine_for(config).escape(text, config)


def escape_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any, config: Any
) -> None:
    """Escape ``buffer[offset:offset + length]`` into ``writer``."""
    require_writer(writer)
    engine_for(config).escape_to(buffer, offset, length, writer, config)


def unescape(text: Optional[str], config: Any) -> Optional[str]:
    """Reverse :func:`escape` for the context selected by ``config``.

    Raises:
        MalformedEscapeError: On malformed escapes in strict contexts
    """
    return engine_for(config).unescape(text, config)


def unescape_to(
    buffer: Optional[Sequence[str]], offset: int, length: int, writer: Any, config: Any
) -> None:
    """Unescape ``buffer[offset:offset + length]`` into ``writer``."""
    require_writer(writer)
    engine_for(config).unescape_to(buffer, offset, length, writer, config)

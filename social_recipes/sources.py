"""Loading of scraped post text from YAML or JSON files."""

from pathlib import Path
from typing import IO, Any

import orjson
import yaml

from .logging import get_logger
from .models import RawTextSources

logger = get_logger(__name__)


class SourceFileError(ValueError):
    """Raised when a post file does not hold post mappings."""


def parse_sources(data: Any) -> list[RawTextSources]:
    """Turn loaded YAML/JSON data into post sources.

    Args:
        data: A single post mapping, a list of them, or None

    Returns:
        Post sources in file order
    """
    if data is None:
        return []
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise SourceFileError(
            f"Expected a post mapping or a list of posts, got {type(data).__name__}"
        )

    posts = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise SourceFileError(f"Post #{index + 1} is not a mapping")
        posts.append(RawTextSources.model_validate(item))

    return posts


def load_sources(stream: IO[str] | str | Path) -> list[RawTextSources]:
    """Load posts from a JSON or YAML file.

    ``.json`` files are read with orjson; anything else, stdin included, is
    parsed as YAML, which also accepts plain JSON documents.

    Args:
        stream: Open text stream or path

    Returns:
        Post sources in file order
    """
    if isinstance(stream, (str, Path)):
        name = str(stream)
        with open(stream, encoding="utf-8") as f:
            content = f.read()
    else:
        name = getattr(stream, "name", "")
        content = stream.read()

    if name.endswith(".json"):
        data = orjson.loads(content)
    else:
        data = yaml.safe_load(content)

    posts = parse_sources(data)
    logger.debug("sources_loaded", source=name, posts=len(posts))
    return posts

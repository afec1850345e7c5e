"""
Row normalization for catalog responses.

Turns stored Movie rows into API schemas: decodes the JSON-text columns
(genres, productionCompanies) and formats budgets for display.
"""

import json
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from app.api.models.movie import NamedEntity, MovieListItem, MovieDetail
from app.database.models import Movie
from app.exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

BUDGET_MISSING = "N/A"

_named_entities = TypeAdapter(List[NamedEntity])


def decode_named_list(raw: Optional[str], field: str) -> List[NamedEntity]:
    """
    Decode a JSON-text column holding a list of {id, name} objects.

    Args:
        raw: Stored text, may be None
        field: Column name, for error reporting

    Returns:
        List of NamedEntity; empty if the column is NULL or empty

    Raises:
        MalformedRecordError: If the text is present but is not valid JSON
            or not a list of {id, name} objects
    """
    if raw is None or not raw.strip():
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedRecordError(field, raw, f"invalid JSON ({e.msg})") from e

    try:
        return _named_entities.validate_python(data)
    except ValidationError as e:
        raise MalformedRecordError(field, raw, f"expected a list of {{id, name}} objects ({e.error_count()} errors)") from e


def format_budget(budget: Optional[Union[int, float]]) -> str:
    """
    Format a stored budget for display.

    None becomes 'N/A'; any number, including 0, becomes '$' followed by
    the whole-dollar value with no separators.

    Examples:
        >>> format_budget(None)
        'N/A'
        >>> format_budget(0)
        '$0'
        >>> format_budget(1500000)
        '$1500000'
    """
    if budget is None:
        return BUDGET_MISSING
    if isinstance(budget, float) and budget.is_integer():
        budget = int(budget)
    return f"${budget}"


def round_rating(average: Optional[float]) -> Optional[float]:
    """
    Round a mean rating to one decimal place, half away from zero.

    The mean is rounded on its shortest decimal representation, so 4.25
    becomes 4.3 rather than following binary float rounding.
    """
    if average is None:
        return None
    rounded = Decimal(repr(average)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(rounded)


def to_list_item(movie: Movie) -> MovieListItem:
    """Build the list representation of a movie row."""
    return MovieListItem(
        imdb_id=movie.imdb_id,
        title=movie.title,
        genres=decode_named_list(movie.genres, "genres"),
        release_date=movie.release_date,
        budget=format_budget(movie.budget),
    )


def to_detail(movie: Movie, average_rating: Optional[float]) -> MovieDetail:
    """
    Build the detail representation of a movie row.

    Args:
        movie: Catalog row
        average_rating: Unrounded mean from the ratings store, or None

    Returns:
        MovieDetail without the internal id
    """
    return MovieDetail(
        imdb_id=movie.imdb_id,
        title=movie.title,
        description=movie.overview,
        release_date=movie.release_date,
        budget=format_budget(movie.budget),
        runtime=movie.runtime,
        average_rating=round_rating(average_rating),
        genres=decode_named_list(movie.genres, "genres"),
        original_language=movie.language,
        production_companies=decode_named_list(movie.production_companies, "productionCompanies"),
    )

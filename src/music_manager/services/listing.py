"""Generic paginated, sortable, filterable listing queries.

A ``Listing`` describes one entity kind: which columns free-text search
matches, which sort keywords map to which expressions, and how a result
row becomes a view projection. ``fetch_page`` and ``fetch_one`` run the
same statement for every kind.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import ValidationError
from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.base import ExecutableOption

from music_manager.schemas.common import Page, PageRequest
from music_manager.services.base import InvalidPageError

ViewT = TypeVar("ViewT")


@dataclass(frozen=True)
class Listing(Generic[ViewT]):
    """Query recipe for listing one entity kind as view projections."""

    model: type[Any]
    key: InstrumentedAttribute[int]
    default_sort: ColumnElement[Any]
    project: Callable[..., ViewT]
    aggregates: Sequence[ColumnElement[Any]] = ()
    search_columns: Sequence[ColumnElement[str]] = ()
    sort_keys: Mapping[str, ColumnElement[Any]] = field(default_factory=dict)
    joins: Sequence[Any] = ()
    options: Sequence[ExecutableOption] = ()

    def statement(self) -> Select[Any]:
        """Select the entity, its aggregates and any joined parents."""
        stmt = select(self.model, *self.aggregates)
        for target in self.joins:
            stmt = stmt.join(target)
        return stmt

    def resolve_sort(self, sort_field: str | None) -> ColumnElement[Any]:
        """Map a sort keyword to its expression, falling back to the default."""
        if not sort_field:
            return self.default_sort
        return self.sort_keys.get(sort_field.lower(), self.default_sort)

    def search_criterion(self, search: str) -> ColumnElement[bool]:
        """Case-insensitive substring match against any search column."""
        return or_(*(column.icontains(search, autoescape=True) for column in self.search_columns))


def make_page_request(page: int, page_size: int) -> PageRequest:
    """Build a validated page request.

    Raises:
        InvalidPageError: If page or page_size is below 1.
    """
    try:
        return PageRequest(page=page, page_size=page_size)
    except ValidationError as e:
        raise InvalidPageError(
            f"Invalid page request (page={page}, page_size={page_size})"
        ) from e


async def fetch_page(
    db: AsyncSession,
    listing: Listing[ViewT],
    request: PageRequest,
    *,
    search: str | None = None,
    sort_field: str | None = None,
    descending: bool = False,
    criteria: Sequence[ColumnElement[bool]] = (),
) -> Page[ViewT]:
    """Filter, sort, count and paginate one entity kind.

    Args:
        db: Session to query with.
        listing: Recipe for the entity kind.
        request: Page index and size.
        search: Optional free-text term; blank terms are ignored.
        sort_field: Sort keyword; unknown keywords use the listing default.
        descending: Sort direction.
        criteria: Extra filters, e.g. a parent id.

    Returns:
        The requested page and the total number of matches.
    """
    stmt = listing.statement()
    for criterion in criteria:
        stmt = stmt.where(criterion)
    if search and search.strip():
        stmt = stmt.where(listing.search_criterion(search))

    # Total is taken before pagination
    count_query = select(func.count()).select_from(stmt.subquery())
    total = (await db.execute(count_query)).scalar_one()

    sort_key = listing.resolve_sort(sort_field)
    if descending:
        ordering = (sort_key.desc(), listing.key.desc())
    else:
        ordering = (sort_key.asc(), listing.key.asc())

    page_query = (
        stmt.options(*listing.options)
        .order_by(*ordering)
        .offset(request.offset)
        .limit(request.page_size)
        .execution_options(populate_existing=True)
    )
    rows = (await db.execute(page_query)).all()

    return Page(
        total=total,
        page=request.page,
        page_size=request.page_size,
        items=[listing.project(*row) for row in rows],
    )


async def fetch_one(db: AsyncSession, listing: Listing[ViewT], id: int) -> ViewT | None:
    """Project a single record by primary key, or None if it doesn't exist."""
    query = (
        listing.statement()
        .where(listing.key == id)
        .options(*listing.options)
        .execution_options(populate_existing=True)
    )
    row = (await db.execute(query)).one_or_none()
    if row is None:
        return None
    return listing.project(*row)

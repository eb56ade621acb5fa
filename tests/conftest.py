"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("DEBUG", "true")

import music_manager.models  # noqa: E402, F401
from music_manager.database import Base, configure_sqlite, get_db  # noqa: E402
from music_manager.main import app  # noqa: E402
from music_manager.schemas import AlbumEdit, ArtistEdit, GenreEdit, TrackEdit  # noqa: E402
from music_manager.services import DataReadService, DataWriteService  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory SQLite engine with the catalog schema and foreign keys enforced."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite(test_engine)
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Database session bound to the in-memory engine."""
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing FastAPI endpoints against the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession]:
        try:
            yield db_session
            await db_session.commit()
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def read_service(db_session: AsyncSession) -> DataReadService:
    """Read service bound to the test session."""
    return DataReadService(db_session)


@pytest.fixture
def write_service(db_session: AsyncSession) -> DataWriteService:
    """Write service bound to the test session."""
    return DataWriteService(db_session)


@pytest.fixture
async def catalog(write_service: DataWriteService) -> dict[str, int]:
    """Seed a small catalog and return the IDs of the created records.

    Air has two albums (Moon Safari with 3 tracks, Talkie Walkie with 2),
    Radiohead has one (OK Computer with 1 track).
    """
    ids: dict[str, int] = {}
    ids["electronic"] = await write_service.create_genre(GenreEdit(name="Electronic"))
    ids["trip_hop"] = await write_service.create_genre(GenreEdit(name="Trip Hop"))
    ids["rock"] = await write_service.create_genre(GenreEdit(name="Rock"))

    ids["air"] = await write_service.create_artist(ArtistEdit(name="Air"))
    ids["radiohead"] = await write_service.create_artist(ArtistEdit(name="Radiohead"))

    ids["moon_safari"] = await write_service.create_album(
        AlbumEdit(
            title="Moon Safari",
            release_year=1997,
            artist_id=ids["air"],
            genre_ids=[ids["electronic"]],
        )
    )
    ids["talkie_walkie"] = await write_service.create_album(
        AlbumEdit(
            title="Talkie Walkie",
            release_year=2004,
            artist_id=ids["air"],
            genre_ids=[ids["trip_hop"], ids["electronic"]],
        )
    )
    ids["ok_computer"] = await write_service.create_album(
        AlbumEdit(
            title="OK Computer",
            release_year=1997,
            artist_id=ids["radiohead"],
            genre_ids=[ids["rock"]],
        )
    )

    tracks = [
        ("sexy_boy", "Sexy Boy", 2, "moon_safari"),
        ("la_femme", "La Femme d'Argent", 1, "moon_safari"),
        ("all_i_need", "All I Need", 3, "moon_safari"),
        ("venus", "Venus", 1, "talkie_walkie"),
        ("cherry", "Cherry Blossom Girl", 2, "talkie_walkie"),
        ("airbag", "Airbag", 1, "ok_computer"),
    ]
    for key, title, number, album in tracks:
        ids[key] = await write_service.create_track(
            TrackEdit(title=title, track_number=number, album_id=ids[album])
        )

    return ids

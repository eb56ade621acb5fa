"""Tests for paginated, sorted and filtered listings."""

import pytest

from music_manager.schemas import AlbumEdit, ArtistEdit, GenreEdit
from music_manager.services import DataReadService, DataWriteService, InvalidPageError
from music_manager.services.listing import make_page_request


async def create_artists(write_service: DataWriteService, *names: str) -> list[int]:
    """Create artists with the given names and return their IDs."""
    return [await write_service.create_artist(ArtistEdit(name=name)) for name in names]


async def create_genres(write_service: DataWriteService, *names: str) -> list[int]:
    """Create genres with the given names and return their IDs."""
    return [await write_service.create_genre(GenreEdit(name=name)) for name in names]


class TestPageRequest:
    """Tests for page request validation."""

    def test_offset(self) -> None:
        """Test offset skips the rows of earlier pages."""
        assert make_page_request(1, 10).offset == 0
        assert make_page_request(3, 25).offset == 50

    @pytest.mark.parametrize(("page", "page_size"), [(0, 10), (-1, 10), (1, 0), (1, -5)])
    def test_rejects_non_positive_values(self, page: int, page_size: int) -> None:
        """Test page and page size below 1 are rejected."""
        with pytest.raises(InvalidPageError) as exc_info:
            make_page_request(page, page_size)
        assert exc_info.value.status_code == 422

    async def test_service_rejects_before_querying(self, read_service: DataReadService) -> None:
        """Test listing methods reject invalid pages."""
        with pytest.raises(InvalidPageError):
            await read_service.get_artists_page(page=0)
        with pytest.raises(InvalidPageError):
            await read_service.get_genres_page(page_size=0)
        with pytest.raises(InvalidPageError):
            await read_service.get_albums_page(page=-2)


class TestPagination:
    """Tests for page slicing and totals."""

    async def test_genre_pages_of_two(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test five genres split into pages of two, three and one."""
        await create_genres(write_service, "Electronic", "Blues", "Disco", "Ambient", "Country")

        pages = [
            await read_service.get_genres_page(page=index, page_size=2) for index in (1, 2, 3)
        ]

        assert [[genre.name for genre in page.items] for page in pages] == [
            ["Ambient", "Blues"],
            ["Country", "Disco"],
            ["Electronic"],
        ]
        assert [page.total for page in pages] == [5, 5, 5]
        assert [page.total_pages for page in pages] == [3, 3, 3]

    async def test_page_past_the_end_is_empty(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test a page beyond the last one has no items but keeps the total."""
        await create_genres(write_service, "Jazz", "Funk")

        page = await read_service.get_genres_page(page=5, page_size=2)

        assert page.items == []
        assert page.total == 2
        assert page.page == 5

    async def test_pages_partition_ties_exactly_once(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test concatenated pages cover every record once when sort keys tie."""
        ids = await create_artists(write_service, "A", "B", "C", "D", "E", "F", "G")

        for descending in (False, True):
            seen = []
            for index in (1, 2, 3):
                page = await read_service.get_artists_page(
                    sort_field="albumcount", descending=descending, page=index, page_size=3
                )
                assert len(page.items) <= 3
                seen.extend(artist.id for artist in page.items)

            assert len(seen) == len(ids)
            assert set(seen) == set(ids)

    async def test_total_independent_of_page_size(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test the total count ignores pagination."""
        await create_artists(write_service, "Air", "Fairground", "Blur", "Hair Metal")

        totals = {
            (await read_service.get_artists_page(search="air", page=page, page_size=size)).total
            for page, size in [(1, 1), (2, 1), (1, 2), (1, 100)]
        }

        assert totals == {3}


class TestSearch:
    """Tests for free-text search filtering."""

    async def test_case_insensitive_substring(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test search matches any case and any position in the name."""
        await create_artists(write_service, "Air", "Daft Punk", "Fairport Convention")

        page = await read_service.get_artists_page(search="AIR")

        assert [artist.name for artist in page.items] == ["Air", "Fairport Convention"]
        assert page.total == 2

    async def test_case_insensitive_beyond_ascii(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test accented letters match their other case."""
        (bjork,) = await create_artists(write_service, "Björk")
        await create_artists(write_service, "Bjorn Again")

        upper = await read_service.get_artists_page(search="BJÖRK")
        partial = await read_service.get_artists_page(search="jö")

        assert [artist.id for artist in upper.items] == [bjork]
        assert upper.total == 1
        assert [artist.name for artist in partial.items] == ["Björk"]

    async def test_blank_search_is_ignored(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test a whitespace-only search returns every record."""
        await create_genres(write_service, "Rock", "Pop")

        page = await read_service.get_genres_page(search="   ")

        assert page.total == 2

    async def test_wildcards_match_literally(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test LIKE wildcards in the search term are treated as text."""
        await create_artists(write_service, "100% Pure", "Plain", "Under_score")

        percent = await read_service.get_artists_page(search="%")
        underscore = await read_service.get_artists_page(search="_")

        assert [artist.name for artist in percent.items] == ["100% Pure"]
        assert [artist.name for artist in underscore.items] == ["Under_score"]

    async def test_album_search_matches_title_or_artist(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test album search covers both album title and artist name."""
        by_artist = await read_service.get_albums_page(search="air")
        by_title = await read_service.get_albums_page(search="computer")

        assert {album.title for album in by_artist.items} == {"Moon Safari", "Talkie Walkie"}
        assert [album.title for album in by_title.items] == ["OK Computer"]

    async def test_moon_safari_scenario(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test searching albums for 'moon' returns Moon Safari fully projected."""
        page = await read_service.get_albums_page(search="moon", page=1, page_size=10)

        assert page.total == 1
        album = page.items[0]
        assert album.id == catalog["moon_safari"]
        assert album.title == "Moon Safari"
        assert album.release_year == 1997
        assert album.artist_name == "Air"
        assert album.track_count == 3
        assert album.genres == ["Electronic"]

    async def test_album_artist_filter(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test albums can be restricted to a single artist."""
        page = await read_service.get_albums_page(artist_id=catalog["radiohead"])
        combined = await read_service.get_albums_page(
            artist_id=catalog["radiohead"], search="safari"
        )

        assert [album.title for album in page.items] == ["OK Computer"]
        assert combined.total == 0


class TestSorting:
    """Tests for sort field resolution."""

    async def test_default_sort_by_name(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test artists sort by name, ignoring case, when no field is given."""
        await create_artists(write_service, "blur", "Air", "Coldplay")

        page = await read_service.get_artists_page()

        assert [artist.name for artist in page.items] == ["Air", "blur", "Coldplay"]

    async def test_name_sort_folds_accented_capitals(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test an accented capital sorts next to its lowercase form."""
        await create_artists(write_service, "Émilie Simon", "Zola Jesus", "élan vital")

        page = await read_service.get_artists_page()
        names = await read_service.get_artist_names()

        expected = ["Zola Jesus", "élan vital", "Émilie Simon"]
        assert [artist.name for artist in page.items] == expected
        assert [option.name for option in names] == expected

    async def test_unknown_sort_field_falls_back(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test unrecognized sort fields behave like the default."""
        await create_genres(write_service, "Soul", "Funk", "Jazz")

        default = await read_service.get_genres_page()
        unknown = await read_service.get_genres_page(sort_field="popularity")
        prefix = await read_service.get_genres_page(sort_field="album")
        descending = await read_service.get_genres_page(sort_field="popularity", descending=True)

        assert [g.name for g in unknown.items] == [g.name for g in default.items]
        assert [g.name for g in prefix.items] == ["Funk", "Jazz", "Soul"]
        assert [g.name for g in descending.items] == ["Soul", "Jazz", "Funk"]

    async def test_sort_field_is_case_insensitive(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test sort keywords match regardless of case."""
        lower = await read_service.get_artists_page(sort_field="albumcount", descending=True)
        mixed = await read_service.get_artists_page(sort_field="AlbumCount", descending=True)

        assert [a.name for a in lower.items] == ["Air", "Radiohead"]
        assert [a.name for a in mixed.items] == ["Air", "Radiohead"]

    async def test_album_sort_fields(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test each album sort keyword orders by its field."""
        by_tracks = await read_service.get_albums_page(sort_field="trackcount")
        by_year = await read_service.get_albums_page(sort_field="releaseyear", descending=True)
        by_artist = await read_service.get_albums_page(sort_field="artistname", descending=True)
        by_title = await read_service.get_albums_page()

        assert [a.title for a in by_tracks.items] == ["OK Computer", "Talkie Walkie", "Moon Safari"]
        assert [a.title for a in by_year.items][0] == "Talkie Walkie"
        assert [a.artist_name for a in by_artist.items][0] == "Radiohead"
        assert [a.title for a in by_title.items] == ["Moon Safari", "OK Computer", "Talkie Walkie"]

    async def test_genre_sort_by_album_count(
        self, read_service: DataReadService, catalog: dict[str, int]
    ) -> None:
        """Test genres sort by the number of albums linked to them."""
        page = await read_service.get_genres_page(sort_field="albumcount", descending=True)

        assert page.items[0].name == "Electronic"
        assert page.items[0].album_count == 2

    async def test_sort_by_updated(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test records never updated sort before updated ones in ascending order."""
        first, second = await create_artists(write_service, "First", "Second")
        await write_service.update_artist(first, ArtistEdit(name="First"))

        page = await read_service.get_artists_page(sort_field="updated")

        assert [artist.id for artist in page.items] == [second, first]
        assert page.items[0].updated_at is None
        assert page.items[1].updated_at is not None

    async def test_sort_by_created_descending(
        self, read_service: DataReadService, write_service: DataWriteService
    ) -> None:
        """Test newest albums come first when sorting by creation time descending."""
        (artist_id,) = await create_artists(write_service, "Solo")
        older = await write_service.create_album(
            AlbumEdit(title="Zeta", release_year=2000, artist_id=artist_id)
        )
        newer = await write_service.create_album(
            AlbumEdit(title="Alpha", release_year=2001, artist_id=artist_id)
        )

        page = await read_service.get_albums_page(sort_field="created", descending=True)

        assert [album.id for album in page.items] == [newer, older]

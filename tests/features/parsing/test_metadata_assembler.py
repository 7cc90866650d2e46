"""Tests for composing the full metadata record."""

from pytest_mock import MockerFixture

from id3handler.features.parsing import CompositeMetadata, MetadataAssembler
from id3handler.features.parsing.domain.models import AlbumInfo, TrackInfo

CURRENT_YEAR = 2026


class TestMetadataAssemblerParse:
    """MetadataAssembler.parse"""

    def test_full_path(self) -> None:
        metadata = MetadataAssembler.parse(
            "/music/Pink Floyd - 1979 - The Wall/01 - Another Brick in the Wall.mp3",
            CURRENT_YEAR,
        )
        assert metadata == CompositeMetadata(
            artist="Pink Floyd",
            title="Another Brick in the Wall",
            album="The Wall",
            track=1,
            year=1979,
        )

    def test_override_string_shape(self) -> None:
        metadata = MetadataAssembler.parse(
            "Miles Davis - 1959 - Kind of Blue / 02 - Freddie Freeloader",
            CURRENT_YEAR,
        )
        assert metadata == CompositeMetadata(
            artist="Miles Davis",
            title="Freddie Freeloader",
            album="Kind of Blue",
            track=2,
            year=1959,
        )

    def test_bare_filename_is_fully_unknown(self) -> None:
        metadata = MetadataAssembler.parse("01 - Song.mp3", CURRENT_YEAR)
        assert metadata == CompositeMetadata.unknown()
        assert metadata == CompositeMetadata(
            artist="empty", title="empty", album="empty", track=0, year=0
        )

    def test_merges_both_parsers(self, mocker: MockerFixture) -> None:
        album = mocker.patch(
            "id3handler.features.parsing.usecases.metadata_assembler.AlbumParser.parse",
            return_value=AlbumInfo(artist="A", album="B", year=2000),
        )
        track = mocker.patch(
            "id3handler.features.parsing.usecases.metadata_assembler.TrackParser.parse",
            return_value=TrackInfo(title="T", track=3),
        )

        metadata = MetadataAssembler.parse("dir/file.mp3", CURRENT_YEAR)

        album.assert_called_once_with("dir/file.mp3", CURRENT_YEAR)
        track.assert_called_once_with("dir/file.mp3")
        assert metadata == CompositeMetadata(artist="A", title="T", album="B", track=3, year=2000)

    def test_same_input_gives_equal_records(self) -> None:
        path = "/music/Artist - Album/07 - Song.mp3"
        assert MetadataAssembler.parse(path, CURRENT_YEAR) == MetadataAssembler.parse(
            path, CURRENT_YEAR
        )


class TestMetadataAssemblerForce:
    """MetadataAssembler.force"""

    def test_values_are_taken_verbatim(self) -> None:
        metadata = MetadataAssembler.force("Artist", "1999", "Album", "7", "Title")
        assert metadata == CompositeMetadata(
            artist="Artist", title="Title", album="Album", track=7, year=1999
        )

    def test_numbers_are_not_range_checked(self) -> None:
        metadata = MetadataAssembler.force("A", "1066", "B", "150", "C")
        assert metadata.year == 1066
        assert metadata.track == 150

    def test_non_numeric_numbers_become_zero(self) -> None:
        metadata = MetadataAssembler.force("A", "nineteen", "B", "x", "C")
        assert metadata.year == 0
        assert metadata.track == 0

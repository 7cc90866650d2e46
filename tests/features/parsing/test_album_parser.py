"""Tests for directory-name parsing."""

import pytest

from id3handler.features.parsing import AlbumInfo, AlbumParser
from id3handler.features.parsing.usecases.album_parser import directory_segment

CURRENT_YEAR = 2026


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/music/Pink Floyd - 1979 - The Wall/01 - Track.mp3", "Pink Floyd - 1979 - The Wall"),
        ("Album/file.mp3", "Album"),
        ("/file.mp3", ""),
        ("Just A Directory", "Just A Directory"),
        ("a/b/c/d.mp3", "c"),
    ],
)
def test_directory_segment(path: str, expected: str) -> None:
    assert directory_segment(path) == expected


class TestAlbumParser:
    """Heuristics for ARTIST - YEAR - ALBUM directory names."""

    def test_artist_year_album(self) -> None:
        info = AlbumParser.parse(
            "/music/Pink Floyd - 1979 - The Wall/01 - Another Brick in the Wall.mp3",
            CURRENT_YEAR,
        )
        assert info == AlbumInfo(artist="Pink Floyd", album="The Wall", year=1979)

    def test_short_name_without_hyphen_is_artist_only(self) -> None:
        info = AlbumParser.parse("/music/SoloArtist/file.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="SoloArtist", album="empty", year=0)

    def test_single_hyphen_without_year_uses_current_year(self) -> None:
        info = AlbumParser.parse("/music/Artist - Album/05.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Artist", album="Album", year=CURRENT_YEAR)

    def test_current_year_is_injected(self) -> None:
        info = AlbumParser.parse("/music/Artist - Album/05.mp3", 2001)
        assert info.year == 2001

    def test_year_without_hyphens(self) -> None:
        info = AlbumParser.parse("/m/Beatles 1965 Help/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Beatles", album="Help", year=1965)

    def test_out_of_range_number_is_skipped_for_a_later_year(self) -> None:
        info = AlbumParser.parse("/m/Band 2077 - 1984 - Cyber/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Band 2077", album="Cyber", year=1984)

    def test_year_between_1800_and_1900_is_found_but_not_kept(self) -> None:
        info = AlbumParser.parse("/m/Composer - 1850 - Sonatas/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Composer", album="Sonatas", year=0)

    def test_several_hyphens_without_year(self) -> None:
        info = AlbumParser.parse("/m/Artist - Live - Greatest Hits/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Artist", album="Greatest Hits", year=0)

    def test_several_hyphens_with_out_of_range_middle(self) -> None:
        info = AlbumParser.parse("/m/Artist - 3000 - Album/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Artist", album="Album", year=0)

    def test_long_name_without_hyphen_or_year_is_artist(self) -> None:
        info = AlbumParser.parse("/m/Some Long Artist Name/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Some Long Artist Name", album="empty", year=0)

    def test_year_first_leaves_artist_unknown(self) -> None:
        info = AlbumParser.parse("/m/1979 - The Wall/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="empty", album="The Wall", year=1979)

    def test_dot_directory_is_unknown(self) -> None:
        info = AlbumParser.parse("./track.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="empty", album="empty", year=0)

    def test_root_level_file_is_unknown(self) -> None:
        assert AlbumParser.parse("/file.mp3", CURRENT_YEAR) == AlbumInfo()

    def test_short_name_with_hyphen_is_split(self) -> None:
        info = AlbumParser.parse("/m/AC-DC/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="AC", album="DC", year=CURRENT_YEAR)

    def test_separator_only_pieces_become_unknown(self) -> None:
        info = AlbumParser.parse("/m/Artist - 1999/x.mp3", CURRENT_YEAR)
        assert info == AlbumInfo(artist="Artist", album="empty", year=1999)

    def test_year_is_never_outside_bounds(self) -> None:
        paths = [
            "/m/A - 1799 - B/x.mp3",
            "/m/A - 2099 - B/x.mp3",
            "/m/A - 0000 - B/x.mp3",
            "/m/A - 1900 - B/x.mp3",
            "/m/A - 2026 - B/x.mp3",
        ]
        for path in paths:
            year = AlbumParser.parse(path, CURRENT_YEAR).year
            assert year == 0 or 1900 <= year <= CURRENT_YEAR

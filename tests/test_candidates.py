import pytest

from lyrics_resolver.query.candidates import generate, reduced_query, variants
from lyrics_resolver.query.title import parse_video_title


def test_generate_priority_order():
    out = generate("Song (Official Video) ft. Other Artist", "Artist [Official]")
    assert [c.pair for c in out] == [
        ("Song", "Artist"),
        ("Song ft. Other Artist", "Artist"),
        ("Song (Official Video) ft. Other Artist", "Artist [Official]"),
        ("Song", "Artist [Official]"),
    ]
    assert [c.rank for c in out] == [1, 2, 3, 4]


def test_generate_dedup_keeps_first_position():
    out = generate("Song", "Artist")
    assert [c.pair for c in out] == [("Song", "Artist")]
    assert out[0].rank == 1


def test_generate_dedup_partial():
    # cleaned == main here, so slots 2 and 4 repeat slot 1
    out = generate("Song (Live)", "Artist")
    assert [c.pair for c in out] == [
        ("Song", "Artist"),
        ("Song (Live)", "Artist"),
    ]
    assert [c.rank for c in out] == [1, 3]


def test_vevo_is_left_to_the_title_parser():
    out = generate("Song (Official Video) ft. Other Artist", "Artist VEVO")
    assert out[0].pair == ("Song", "Artist VEVO")

    raw = parse_video_title("Song (Official Video) ft. Other Artist", "ArtistVEVO")
    assert generate(raw.track, raw.artist)[0].pair == ("Song", "Artist")


@pytest.mark.parametrize(
    "track, artist",
    [
        ("Song", "Artist"),
        ("(Official Video)", "[HD]"),
        ("Song ft. X", "A & B"),
        ("", ""),
        ("  padded  ", " artist "),
        ("MV", "HD"),
    ],
)
def test_generate_invariants(track, artist):
    out = generate(track, artist)
    pairs = [c.pair for c in out]
    assert len(out) >= 1
    assert len(pairs) == len(set(pairs))
    assert (track, artist) in pairs
    assert all(c.track.strip() for c in out) or not track.strip()


def test_cleaning_never_produces_empty_values():
    out = generate("(Official Video)", "Artist")
    assert out[0].pair == ("(Official Video)", "Artist")


def test_reduced_query_matches_top_candidate():
    q = reduced_query("Song (Official Video) ft. Other Artist", "Artist (Band)")
    assert q.pair == ("Song", "Artist")
    assert q.pair == generate("Song (Official Video) ft. Other Artist", "Artist (Band)")[0].pair


def test_variants_for_diagnostics():
    v = variants("Song [HD] feat. X", "Artist")
    assert v.to_dict() == {
        "original": {"track": "Song [HD] feat. X", "artist": "Artist"},
        "cleaned": {"track": "Song feat. X", "artist": "Artist"},
        "mainTrack": {"track": "Song", "artist": "Artist"},
    }

"""Unit tests for the interactive LyricsExporter flow."""

import logging
import os

import pytest

from lyricsub.exporter import LyricsExporter, parse_song_ids
from lyricsub.subtitle_writer import SubtitleWriter
from lyricsub.token_store import TokenStore
from tests.helpers.fakes import ScriptedPrompter

HELLO = [{"word": "hello", "start_s": 1.5, "end_s": 2.0}]
WORLD = [{"word": "world", "start_s": 2.0, "end_s": 2.5}]


@pytest.fixture
def token_path(tmp_path):
    return str(tmp_path / "token.txt")


@pytest.fixture
def output_dir(tmp_path):
    return str(tmp_path / "output")


def make_exporter(answers, client, token_path, output_dir, on_ask=None):
    prompter = ScriptedPrompter(answers, on_ask=on_ask)
    exporter = LyricsExporter(
        prompter=prompter,
        client=client,
        token_store=TokenStore(token_path, prompter, client),
        writer=SubtitleWriter(output_dir=output_dir),
        show_progress=False,
    )
    return exporter, prompter


def read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a,b,c", ["a", "b", "c"]),
        (" a , ,b,, ", ["a", "b"]),
        ("", []),
        (" , ", []),
        ("b,a,b", ["b", "a", "b"]),
    ],
)
def test_parse_song_ids(raw, expected):
    assert parse_song_ids(raw) == expected


def test_token_file_created_before_first_prompt(client, token_path, output_dir):
    seen = []
    exporter, _ = make_exporter(
        ["", "lrc", "tok"], client, token_path, output_dir,
        on_ask=lambda q: seen.append(os.path.exists(token_path)),
    )

    exporter.run()

    assert seen[0] is True


def test_exports_each_song_in_order_as_srt(service, client, token_path, output_dir):
    service.add_words("song-a", HELLO)
    service.add_words("song-b", WORLD)
    exporter, prompter = make_exporter(["song-a, ,song-b", "SRT", "tok"], client, token_path, output_dir)

    summary = exporter.run()

    assert prompter.questions == [
        "Enter song IDs (comma-separated): ",
        "Enter file type (lrc or srt, default lrc): ",
        "Enter Bearer token: ",
    ]
    assert service.requested_ids == ["dummy-check", "song-a", "song-b"]
    assert len(summary.saved_paths) == 2
    assert not summary.aborted
    assert summary.skipped_ids == []
    first, second = summary.saved_paths
    assert os.path.basename(first).startswith("aligned_words_song-a_")
    assert first.endswith(".srt")
    assert read(first) == "1\n00:00:01,500 --> 00:00:02,000\nhello\n\n"
    assert read(second) == "1\n00:00:02,000 --> 00:00:02,500\nworld\n\n"


def test_unrecognised_format_defaults_to_lrc(service, client, token_path, output_dir):
    service.add_words("song-a", HELLO)
    exporter, _ = make_exporter(["song-a", "txt", "tok"], client, token_path, output_dir)

    summary = exporter.run()

    assert summary.saved_paths[0].endswith(".lrc")
    assert read(summary.saved_paths[0]) == "[00:01.50]hello\n"


def test_soft_failure_skips_song_and_continues(service, client, token_path, output_dir, caplog):
    service.add_words("song-a", HELLO)
    service.add_response("song-b", 200, json={"status": "no lyrics"})
    service.add_words("song-c", WORLD)
    exporter, _ = make_exporter(["song-a,song-b,song-c", "lrc", "tok"], client, token_path, output_dir)

    with caplog.at_level(logging.INFO):
        summary = exporter.run()

    assert summary.skipped_ids == ["song-b"]
    assert len(summary.saved_paths) == 2
    assert "No words for song-b" in caplog.text
    assert "All done!" in caplog.text


def test_auth_failure_aborts_remaining_songs(service, client, token_path, output_dir, caplog):
    service.add_words("song-a", HELLO)
    service.add_response("song-b", 401, json={"detail": "Unauthorized"})
    service.add_words("song-c", WORLD)
    exporter, _ = make_exporter(["song-a,song-b,song-c", "lrc", "tok"], client, token_path, output_dir)

    with caplog.at_level(logging.INFO):
        summary = exporter.run()

    assert summary.aborted
    assert len(summary.saved_paths) == 1
    assert service.requested_ids == ["dummy-check", "song-a", "song-b"]
    assert "token is invalid" in caplog.text
    assert "All done!" in caplog.text


def test_saved_token_reused_across_run(service, client, token_path, output_dir):
    with open(token_path, "w", encoding="utf-8") as f:
        f.write("stored")
    service.add_words("song-a", HELLO)
    exporter, prompter = make_exporter(["song-a", "lrc", "Y"], client, token_path, output_dir)

    exporter.run()

    assert prompter.questions[-1] == "Use this token? (Y/n): "
    assert all(r.headers["Authorization"] == "Bearer stored" for r in service.requests)


def test_write_failure_is_logged_and_loop_continues(service, client, token_path, tmp_path, caplog):
    blocker = tmp_path / "output"
    blocker.write_text("")
    service.add_words("song-a", HELLO)
    service.add_words("song-b", WORLD)
    exporter, _ = make_exporter(["song-a,song-b", "lrc", "tok"], client, token_path, str(blocker))

    with caplog.at_level(logging.INFO):
        summary = exporter.run()

    assert summary.skipped_ids == ["song-a", "song-b"]
    assert summary.saved_paths == []
    assert "All done!" in caplog.text


def test_no_song_ids_still_completes(service, client, token_path, output_dir, caplog):
    exporter, _ = make_exporter([" , ", "lrc", "tok"], client, token_path, output_dir)

    with caplog.at_level(logging.INFO):
        summary = exporter.run()

    assert summary.saved_paths == []
    assert service.requested_ids == ["dummy-check"]
    assert not os.path.exists(output_dir)
    assert "All done!" in caplog.text


def test_empty_lyrics_still_written(service, client, token_path, output_dir):
    service.add_words("song-a", [])
    exporter, _ = make_exporter(["song-a", "lrc", "tok"], client, token_path, output_dir)

    summary = exporter.run()

    assert read(summary.saved_paths[0]) == ""


def test_non_finite_time_skips_song_and_continues(service, client, token_path, output_dir):
    service.add_response("song-a", 200, content=b'{"aligned_words": [{"word": "x", "start_s": NaN, "end_s": 1}]}')
    service.add_words("song-b", WORLD)
    exporter, _ = make_exporter(["song-a,song-b", "srt", "tok"], client, token_path, output_dir)

    summary = exporter.run()

    assert summary.skipped_ids == ["song-a"]
    assert len(summary.saved_paths) == 1
    assert "_song-b_" in os.path.basename(summary.saved_paths[0])


def test_operator_messages_shown_regardless_of_log_level(service, client, token_path, output_dir, caplog):
    service.add_words("song-a", HELLO)
    exporter, prompter = make_exporter(["song-a", "lrc", "tok"], client, token_path, output_dir)

    with caplog.at_level(logging.WARNING):
        summary = exporter.run()

    assert "All done!" not in caplog.text
    assert prompter.messages == [f"Saved: {os.path.abspath(summary.saved_paths[0])}", "All done!"]

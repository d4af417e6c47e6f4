from skillpack.models import RawEntry
from skillpack.pipeline import expand_archive_entries


def _entries(mapping: dict[str, bytes]) -> list[RawEntry]:
    return [RawEntry(path=path, data=data) for path, data in mapping.items()]


def test_junk_is_reported_and_content_kept() -> None:
    report = expand_archive_entries(
        _entries(
            {
                "a/SKILL.md": b"# Demo",
                "a/notes.md": b"notes",
                "a/.DS_Store": b"junk",
                "a/._notes.md": b"junk",
                "__MACOSX/._SKILL.md": b"junk",
            }
        )
    )
    # Only a/ remains after junk filtering, so the shared root is unwrapped
    assert [f.path for f in report.files] == ["SKILL.md", "notes.md"]
    assert report.ignored_mac_junk_paths == [
        "a/.DS_Store",
        "a/._notes.md",
        "__MACOSX/._SKILL.md",
    ]


def test_non_text_entries_are_dropped_silently() -> None:
    report = expand_archive_entries(
        _entries({"SKILL.md": b"#", "logo.png": b"\x89PNG", "Makefile": b"all:"})
    )
    assert [f.path for f in report.files] == ["SKILL.md"]
    assert report.ignored_mac_junk_paths == []


def test_paths_are_normalized_before_filtering() -> None:
    report = expand_archive_entries(
        _entries({"./pkg\\SKILL.md": b"#", "/pkg/docs/guide.md": b"g", "x/": b""})
    )
    assert [f.path for f in report.files] == ["SKILL.md", "docs/guide.md"]


def test_mime_types_are_assigned() -> None:
    report = expand_archive_entries(
        _entries({"SKILL.md": b"#", "run.py": b"", "package.json": b"{}"})
    )
    assert [(f.path, f.mime_type) for f in report.files] == [
        ("SKILL.md", "text/markdown"),
        ("run.py", "text/plain"),
        ("package.json", "application/json"),
    ]


def test_duplicate_paths_pass_through() -> None:
    entries = [RawEntry("a.md", b"1"), RawEntry("a.md", b"2")]
    report = expand_archive_entries(entries)
    assert [(f.path, f.content) for f in report.files] == [("a.md", b"1"), ("a.md", b"2")]


def test_custom_text_extensions() -> None:
    report = expand_archive_entries(
        _entries({"data.bin": b"\x00", "SKILL.md": b"#"}), text_extensions={"bin"}
    )
    assert [(f.path, f.mime_type) for f in report.files] == [("data.bin", "text/plain")]

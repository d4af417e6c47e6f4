import asyncio
from typing import Optional

from skillpack.collector import collect_entry, expand_dropped_items, read_all_entries
from skillpack.expander import expand_files_with_report
from skillpack.sources import (
    EntryItem,
    FileItem,
    LocalDirectoryReader,
    LocalEntry,
    NamedFile,
)


class BatchReader:
    """Returns children a few at a time, then an empty batch."""

    def __init__(self, children: list, batch_size: int):
        self.batches = [
            children[i : i + batch_size] for i in range(0, len(children), batch_size)
        ]
        self.calls = 0

    async def read_entries(self) -> list:
        self.calls += 1
        return self.batches.pop(0) if self.batches else []


class FakeEntry:
    def __init__(
        self,
        name: str,
        data: Optional[bytes] = None,
        children: Optional[list] = None,
        full_path: Optional[str] = None,
        batch_size: int = 2,
    ):
        self.name = name
        self.data = data
        self.children = children
        self.full_path = full_path
        self.batch_size = batch_size
        self.readers: list[BatchReader] = []

    @property
    def is_file(self) -> bool:
        return self.data is not None

    @property
    def is_directory(self) -> bool:
        return self.children is not None

    async def file(self) -> NamedFile:
        return NamedFile(self.name, self.data, content_type="text/markdown")

    def create_reader(self) -> BatchReader:
        reader = BatchReader(self.children, self.batch_size)
        self.readers.append(reader)
        return reader


def collect(entry) -> list:
    files: list = []
    asyncio.run(collect_entry(entry, "", files))
    return files


def test_read_all_entries_drains_every_batch() -> None:
    children = [FakeEntry(f"{i}.md", b"") for i in range(5)]
    reader = BatchReader(children, batch_size=2)
    entries = asyncio.run(read_all_entries(reader))
    assert [e.name for e in entries] == ["0.md", "1.md", "2.md", "3.md", "4.md"]
    assert reader.calls == 4


def test_directory_tree_is_flattened_depth_first() -> None:
    tree = FakeEntry(
        "skill",
        children=[
            FakeEntry("SKILL.md", b"#"),
            FakeEntry("docs", children=[FakeEntry("a.md", b"a"), FakeEntry("b.md", b"b")]),
            FakeEntry("c.md", b"c"),
        ],
    )
    files = collect(tree)
    assert [f.name for f in files] == [
        "skill/SKILL.md",
        "skill/docs/a.md",
        "skill/docs/b.md",
        "skill/c.md",
    ]
    assert [f.content_type for f in files] == ["text/markdown"] * 4


def test_full_path_hint_wins() -> None:
    tree = FakeEntry(
        "skill",
        full_path="/dropped/skill",
        children=[FakeEntry("SKILL.md", b"#", full_path="/elsewhere/SKILL.md"), FakeEntry("b.md", b"")],
    )
    assert [f.name for f in collect(tree)] == ["elsewhere/SKILL.md", "dropped/skill/b.md"]


def test_empty_full_path_falls_back_to_parent() -> None:
    tree = FakeEntry("skill", full_path="", children=[FakeEntry("a.md", b"", full_path="/")])
    assert [f.name for f in collect(tree)] == ["skill/a.md"]


def test_entries_without_capability_are_skipped() -> None:
    tree = FakeEntry("skill", children=[FakeEntry("mystery"), FakeEntry("a.md", b"")])
    assert [f.name for f in collect(tree)] == ["skill/a.md"]


def test_collected_blobs_read_lazily() -> None:
    files = collect(FakeEntry("SKILL.md", b"# Demo"))
    assert files[0].relative_path == ""
    assert asyncio.run(files[0].read()) == b"# Demo"


def test_dropped_items_without_entries_return_files() -> None:
    first, second = NamedFile("a.md", b""), NamedFile("b.md", b"")
    dropped = asyncio.run(expand_dropped_items([FileItem(first), FileItem(second)]))
    assert dropped == [first, second]


def test_dropped_items_with_entries_walk_entries() -> None:
    items = [
        FileItem(NamedFile("loose.md", b"")),
        EntryItem(FakeEntry("pkg", children=[FakeEntry("a.md", b"")])),
        EntryItem(FakeEntry("top.md", b"")),
    ]
    dropped = asyncio.run(expand_dropped_items(items))
    assert [f.name for f in dropped] == ["pkg/a.md", "top.md"]


def test_no_items() -> None:
    assert asyncio.run(expand_dropped_items(None)) == []
    assert asyncio.run(expand_dropped_items([])) == []


def test_local_directory_drop(tmp_path) -> None:
    root = tmp_path / "skill"
    (root / "docs").mkdir(parents=True)
    (root / "SKILL.md").write_bytes(b"# Demo")
    (root / "docs" / "guide.md").write_bytes(b"guide")
    (root / ".DS_Store").write_bytes(b"junk")
    (root / "logo.png").write_bytes(b"\x89PNG")

    async def run():
        blobs = await expand_dropped_items([EntryItem(LocalEntry(root))])
        return await expand_files_with_report(blobs)

    report = asyncio.run(run())
    # Dropped folders are loose files: no unwrap and no text policy
    assert [(f.path, f.content) for f in report.files] == [
        ("skill/SKILL.md", b"# Demo"),
        ("skill/docs/guide.md", b"guide"),
        ("skill/logo.png", b"\x89PNG"),
    ]
    assert report.ignored_mac_junk_paths == ["skill/.DS_Store"]


def test_local_reader_returns_batches(tmp_path) -> None:
    for i in range(5):
        (tmp_path / f"{i}.txt").write_text(str(i))
    reader = LocalDirectoryReader(tmp_path, batch_size=2)

    async def drain():
        sizes = []
        while True:
            batch = await reader.read_entries()
            sizes.append(len(batch))
            if not batch:
                return sizes

    assert asyncio.run(drain()) == [2, 2, 1, 0]

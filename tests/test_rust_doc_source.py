"""End-to-end tests for the picker source."""

from pathlib import Path

import pytest
from conftest import FakeRunner

from rustdoc_index.command_runner import CommandOutput
from rustdoc_index.editor_context import StaticEditorContext, start_path
from rustdoc_index.load_config import load_config
from rustdoc_index.rust_doc_source import RustDocSource


def _write(root: Path, rel_paths: list[str]) -> None:
    for rel in rel_paths:
        f = root / rel
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text("", encoding="utf-8")


@pytest.fixture
def workspace(tmp_path: Path) -> tuple[Path, Path]:
    """A std doc tree and a Cargo project with generated docs."""
    std = tmp_path / "toolchain" / "html"
    _write(std, ["index.html", "std/index.html", "std/vec/struct.Vec.html"])
    proj = tmp_path / "proj"
    _write(
        proj,
        [
            "Cargo.toml",
            "src/main.rs",
            "target/doc/index.html",
            "target/doc/mycrate/index.html",
            "target/doc/mycrate/fn.run.html",
            "target/doc/src/mycrate/main.rs.html",
        ],
    )
    return std, proj


def _runner(std: Path) -> FakeRunner:
    return FakeRunner(CommandOutput(success=True, stdout=f"{std}/index.html\n"))


@pytest.mark.asyncio
async def test_gather_lists_std_then_project(workspace: tuple[Path, Path]) -> None:
    """Verify that entries from both roots are delivered in order."""
    std, proj = workspace
    source = RustDocSource(runner=_runner(std), env={})
    context = StaticEditorContext(buffer="src/main.rs", directory=str(proj))
    stream = source.gather(context)
    await stream.start()
    result = await stream.next()
    assert not result.done
    entries = result.value or []
    assert [e.display for e in entries] == [
        "module     std",
        "struct     std::vec::Vec",
        "fn         mycrate::run",
        "module     mycrate",
    ]
    assert entries[1].action.url == f"file://{std}/std/vec/struct.Vec.html"
    assert entries[3].action.url == f"file://{proj}/target/doc/mycrate/index.html"
    assert (await stream.next()).done


@pytest.mark.asyncio
async def test_second_gather_uses_cache(workspace: tuple[Path, Path]) -> None:
    """Verify that a repeated query replays the cache without walking."""
    std, proj = workspace
    source = RustDocSource(runner=_runner(std), env={})
    context = StaticEditorContext(buffer="", directory=str(proj))
    first = [e async for batch in source.gather(context) for e in batch]
    (proj / "target" / "doc" / "mycrate" / "struct.New.html").write_text("")
    second = [e async for batch in source.gather(context) for e in batch]
    assert first == second
    assert source.cache.walk_count == 2


@pytest.mark.asyncio
async def test_batch_size_from_config(workspace: tuple[Path, Path]) -> None:
    """Verify that the configured batch size is honoured."""
    std, proj = workspace
    config = load_config(None)
    config["stream"]["batch_size"] = 3
    source = RustDocSource(runner=_runner(std), env={}, config=config)
    context = StaticEditorContext(buffer="", directory=str(proj))
    sizes = [len(batch) async for batch in source.gather(context)]
    assert sizes == [3, 1]


@pytest.mark.asyncio
async def test_no_docs_found(tmp_path: Path, failing_runner: FakeRunner) -> None:
    """Verify that a location without docs gives an empty stream."""
    source = RustDocSource(runner=failing_runner, env={})
    stream = source.gather(StaticEditorContext(buffer="", directory=str(tmp_path)))
    await stream.start()
    assert (await stream.next()).done


def test_params_and_kind() -> None:
    """Verify that the source takes no parameters and produces URLs."""
    source = RustDocSource()
    assert source.params() == {}
    assert source.kind == "url"


@pytest.mark.asyncio
async def test_start_path() -> None:
    """Verify that cwd and buffer name are joined."""
    assert await start_path(StaticEditorContext("src/lib.rs", "/p")) == "/p/src/lib.rs"
    assert await start_path(StaticEditorContext("", "/p")) == "/p"


@pytest.mark.asyncio
async def test_partial_config_keeps_defaults(workspace: tuple[Path, Path]) -> None:
    """Verify that a config naming only some keys is merged over the defaults."""
    std, proj = workspace
    source = RustDocSource(
        runner=_runner(std), env={}, config={"stream": {"batch_size": 2}}
    )
    assert source.config["project"]["marker"] == "Cargo.toml"
    context = StaticEditorContext(buffer="", directory=str(proj))
    sizes = [len(batch) async for batch in source.gather(context)]
    assert sizes == [2, 2]
